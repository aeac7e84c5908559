r"""Exception hierarchy for the resultretry library.

Domain failures are never raised by the retry loop: they travel inside
``Failure`` outcomes. The exceptions defined here cover the two faults
the library itself can produce: an invalid configuration and a
cancelled backoff wait.
"""

from __future__ import annotations

__all__ = ["RetryCancelledError", "RetryConfigError", "RetryError"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from resultretry.outcome import Attempt


class RetryError(Exception):
    """Base class for all errors raised by resultretry."""


class RetryConfigError(RetryError, ValueError):
    """Raised when a retry configuration or backoff parameter is invalid.

    Example:
        ```pycon
        >>> from resultretry import RetryConfig, RetryConfigError
        >>> try:
        ...     RetryConfig(
        ...         max_attempts=0,
        ...         backoff_function=lambda n: 0.0,
        ...         retry_predicate=lambda e: True,
        ...     )
        ... except RetryConfigError as exc:
        ...     print(exc)
        ...
        max_attempts must be >= 1, got 0

        ```
    """


class RetryCancelledError(RetryError):
    """Raised when the backoff wait of a retry loop is cancelled.

    Args:
        message: Description of the cancellation.
        attempt: The last attempt made before the wait was cancelled.

    Attributes:
        attempt: The last attempt made before the wait was cancelled.
    """

    def __init__(self, message: str, attempt: Attempt | None = None) -> None:
        super().__init__(message)
        self.attempt = attempt

    def __repr__(self) -> str:
        attempt_nr = None if self.attempt is None else self.attempt.attempt_nr
        return f"{self.__class__.__qualname__}(message={str(self)!r}, attempt_nr={attempt_nr})"
