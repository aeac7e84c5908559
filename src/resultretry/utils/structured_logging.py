r"""Opt-in JSON logging for retry loops.

The retry executors log every classified attempt with the extra fields
``attempt_nr`` and ``category``. Attaching ``StructuredFormatter`` to
the ``resultretry`` logger turns these records into one JSON object per
line, ready for log aggregation systems.

Example:
    ```python
    import logging
    from resultretry.utils.structured_logging import StructuredFormatter, set_correlation_id

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())
    logger = logging.getLogger("resultretry")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

    set_correlation_id("job-42")
    ```
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "clear_correlation_id",
    "get_correlation_id",
    "log_structured",
    "set_correlation_id",
]

import contextvars
import json
import logging
import time
from typing import Any

_correlation_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "resultretry_correlation_id", default=None
)

# Attributes present on every LogRecord; anything else came from ``extra``.
_RESERVED_ATTRIBUTES = frozenset(
    logging.LogRecord("", logging.NOTSET, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}


def get_correlation_id() -> str | None:
    """Return the correlation ID of the current context, if any.

    Example:
        ```pycon
        >>> from resultretry.utils.structured_logging import (
        ...     clear_correlation_id,
        ...     get_correlation_id,
        ...     set_correlation_id,
        ... )
        >>> set_correlation_id("job-1")
        >>> get_correlation_id()
        'job-1'
        >>> clear_correlation_id()

        ```
    """
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID attached to structured log records.

    The value lives in a context variable, so concurrent threads and
    tasks each see their own correlation ID.

    Args:
        correlation_id: The identifier, e.g. a job or trace ID.
    """
    _correlation_id.set(correlation_id)


def clear_correlation_id() -> None:
    """Remove the correlation ID of the current context."""
    _correlation_id.set(None)


class StructuredFormatter(logging.Formatter):
    """Format log records as single-line JSON objects.

    Each object contains ``timestamp`` (ISO 8601, UTC), ``level``,
    ``logger``, ``message``, ``module``, ``function`` and ``line``, the
    current correlation ID when one is set, the formatted exception when
    present, and every field passed through ``extra``.

    Example:
        ```pycon
        >>> import json
        >>> import logging
        >>> from resultretry.utils.structured_logging import StructuredFormatter
        >>> record = logging.LogRecord(
        ...     "resultretry", logging.DEBUG, __file__, 1, "attempt 1", (), None
        ... )
        >>> record.attempt_nr = 1
        >>> data = json.loads(StructuredFormatter().format(record))
        >>> data["message"], data["attempt_nr"]
        ('attempt 1', 1)

        ```
    """

    def format(self, record: logging.LogRecord) -> str:
        data: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        correlation_id = get_correlation_id()
        if correlation_id is not None:
            data["correlation_id"] = correlation_id
        if record.exc_info:
            data["exception"] = self.formatException(record.exc_info)
        data.update(
            (key, value)
            for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRIBUTES
        )
        return json.dumps(data, default=str)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: ARG002
        stamp = time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
        return f"{stamp}.{int(record.msecs):03d}Z"


def log_structured(logger: logging.Logger, level: int, message: str, **extra: Any) -> None:
    """Log a message with structured fields.

    Args:
        logger: Logger to use.
        level: Log level (e.g., ``logging.DEBUG``).
        message: Log message.
        **extra: Fields added to the record, and to the JSON output when
            ``StructuredFormatter`` is used.
    """
    logger.log(level, message, extra=extra)
