r"""Ready-made retry predicates.

A retry predicate receives the error carried by a ``Failure`` and
returns ``True`` if the operation should be attempted again.

Example:
    ```pycon
    >>> from resultretry.predicates import retry_on
    >>> predicate = retry_on(TimeoutError, ConnectionError)
    >>> predicate(TimeoutError())
    True
    >>> predicate(KeyError("missing"))
    False

    ```
"""

from __future__ import annotations

__all__ = [
    "RETRY_STATUS_CODES",
    "always_retry",
    "is_retriable_http_error",
    "never_retry",
    "retry_on",
]

from typing import TYPE_CHECKING, Any

import httpx

if TYPE_CHECKING:
    from collections.abc import Callable

# HTTP status codes worth retrying
# 429: Too Many Requests - Rate limiting
# 500: Internal Server Error - Temporary server issue
# 502: Bad Gateway - Upstream server error
# 503: Service Unavailable - Server overloaded or down
# 504: Gateway Timeout - Upstream server timeout
RETRY_STATUS_CODES = (429, 500, 502, 503, 504)


def always_retry(error: Any) -> bool:  # noqa: ARG001
    """Treat every failure as retriable."""
    return True


def never_retry(error: Any) -> bool:  # noqa: ARG001
    """Treat every failure as permanent."""
    return False


def retry_on(*exception_types: type[BaseException]) -> Callable[[Any], bool]:
    """Create a predicate matching instances of the given exception types.

    Args:
        *exception_types: The retriable exception types.

    Returns:
        A predicate returning ``True`` for instances of one of the types.

    Raises:
        ValueError: If no exception type is given.
    """
    if not exception_types:
        msg = "retry_on requires at least one exception type"
        raise ValueError(msg)

    def predicate(error: Any) -> bool:
        return isinstance(error, exception_types)

    return predicate


def is_retriable_http_error(
    error: Any, status_codes: tuple[int, ...] = RETRY_STATUS_CODES
) -> bool:
    """Indicate if an httpx error is worth retrying.

    Timeouts and transport errors (connection failures, protocol errors,
    ...) are retriable. ``httpx.HTTPStatusError``, as raised by
    ``Response.raise_for_status()``, is retriable when its status code is
    in ``status_codes``. Any other error is not.

    Args:
        error: The error carried by a ``Failure``.
        status_codes: The retriable HTTP status codes.

    Returns:
        ``True`` if the error is retriable.

    Example:
        ```pycon
        >>> import httpx
        >>> from resultretry.predicates import is_retriable_http_error
        >>> is_retriable_http_error(httpx.ConnectTimeout("timed out"))
        True
        >>> request = httpx.Request("GET", "https://example.com")
        >>> response = httpx.Response(404, request=request)
        >>> error = httpx.HTTPStatusError("not found", request=request, response=response)
        >>> is_retriable_http_error(error)
        False

        ```
    """
    if isinstance(error, httpx.HTTPStatusError):
        return error.response.status_code in status_codes
    return isinstance(error, (httpx.TimeoutException, httpx.TransportError))
