r"""Backoff delay normalisation and wait utilities.

Backoff functions may return either a ``datetime.timedelta`` or a plain
number of seconds. The helpers in this module convert both forms to
seconds and perform the single suspension of the retry loop.
"""

from __future__ import annotations

__all__ = ["async_wait", "to_seconds", "wait"]

import asyncio
import logging
import time
from datetime import timedelta
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import threading

logger: logging.Logger = logging.getLogger(__name__)


def to_seconds(delay: timedelta | float) -> float:
    """Convert a backoff delay to a non-negative number of seconds.

    Negative delays are clamped to zero and logged as a warning.

    Args:
        delay: The delay as a ``timedelta`` or a number of seconds.

    Returns:
        The delay in seconds.

    Raises:
        TypeError: If delay is neither a ``timedelta`` nor a number.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from resultretry.utils.sleep import to_seconds
        >>> to_seconds(timedelta(milliseconds=250))
        0.25
        >>> to_seconds(1.5)
        1.5

        ```
    """
    if isinstance(delay, timedelta):
        seconds = delay.total_seconds()
    elif isinstance(delay, (int, float)) and not isinstance(delay, bool):
        seconds = float(delay)
    else:
        msg = f"backoff delay must be a timedelta or a number of seconds, got {type(delay).__name__}"
        raise TypeError(msg)
    if seconds < 0:
        logger.warning(f"Backoff function returned a negative delay ({seconds}s), using 0s")
        return 0.0
    return seconds


def wait(seconds: float, cancel_event: threading.Event | None = None) -> bool:
    """Block the calling thread for the given number of seconds.

    Args:
        seconds: The number of seconds to wait.
        cancel_event: Optional event that interrupts the wait when set.

    Returns:
        ``True`` if the full delay elapsed, ``False`` if the wait was
        cancelled through ``cancel_event``.
    """
    if cancel_event is None:
        time.sleep(seconds)
        return True
    return not cancel_event.wait(seconds)


async def async_wait(seconds: float) -> None:
    """Suspend the current task for the given number of seconds.

    Task cancellation raises ``asyncio.CancelledError`` from this
    coroutine and is never reported as an elapsed wait.

    Args:
        seconds: The number of seconds to wait.
    """
    await asyncio.sleep(seconds)
