r"""Abstract base class for backoff functions."""

from __future__ import annotations

__all__ = ["BaseBackoff", "to_milliseconds"]

from abc import ABC, abstractmethod
from datetime import timedelta

from resultretry.utils.validation import validate_attempt_nr

_ONE_MILLISECOND = timedelta(milliseconds=1)


def to_milliseconds(delay: timedelta | float) -> float:
    """Convert a delay given as ``timedelta`` or seconds to milliseconds.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from resultretry.backoff.base import to_milliseconds
        >>> to_milliseconds(timedelta(milliseconds=10))
        10.0
        >>> to_milliseconds(0.5)
        500.0

        ```
    """
    if isinstance(delay, timedelta):
        return delay / _ONE_MILLISECOND
    # 0.57 * 1000.0 is 569.999..., which would truncate to 569
    return round(float(delay) * 1000.0, 6)


class BaseBackoff(ABC):
    """Abstract base class for backoff functions.

    A backoff function determines how long to wait before the next
    attempt, given the number of the attempt that just failed. Instances
    are callable, so they can be passed directly as the
    ``backoff_function`` of a ``RetryConfig``.

    Delays are truncated to whole milliseconds.
    """

    def __call__(self, attempt_nr: int) -> timedelta:
        validate_attempt_nr(attempt_nr)
        return timedelta(milliseconds=self.calculate_milliseconds(attempt_nr))

    def calculate(self, attempt_nr: int) -> timedelta:
        """Calculate the delay before the attempt following ``attempt_nr``.

        Args:
            attempt_nr: The number of the attempt that just failed
                (1-indexed). For example, attempt_nr=1 is the delay
                before the second attempt.

        Returns:
            The delay as a ``timedelta`` with millisecond resolution.

        Raises:
            RetryConfigError: If attempt_nr is lower than 1.
        """
        return self(attempt_nr)

    @abstractmethod
    def calculate_milliseconds(self, attempt_nr: int) -> int:
        """Calculate the delay in whole milliseconds.

        Args:
            attempt_nr: The number of the attempt that just failed
                (1-indexed, already validated).

        Returns:
            The non-negative delay in milliseconds.
        """
