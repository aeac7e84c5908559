r"""Capped exponential backoff."""

from __future__ import annotations

__all__ = ["DEFAULT_BACKOFF_BASE", "ExponentialBackoff", "capped_exponential"]

import math
from typing import TYPE_CHECKING

from resultretry.backoff.base import BaseBackoff, to_milliseconds
from resultretry.utils.validation import validate_base, validate_non_negative_delay

if TYPE_CHECKING:
    from datetime import timedelta

DEFAULT_BACKOFF_BASE = 2.0


class ExponentialBackoff(BaseBackoff):
    """Capped exponential backoff.

    Calculates the delay as
    ``min(initial_delay * base ** (attempt_nr - 1), max_delay)``, in
    floating point milliseconds truncated to whole milliseconds. The
    first retry waits ``initial_delay`` (when it does not exceed the
    cap), and every delay is bounded by ``max_delay``. Attempt numbers
    large enough to overflow the power saturate at ``max_delay``.

    Args:
        initial_delay: The delay after the first failed attempt, as a
            ``timedelta`` or a number of seconds.
        max_delay: The cap applied to every delay, as a ``timedelta`` or
            a number of seconds.
        base: The growth factor between consecutive delays (default: 2.0).

    Raises:
        RetryConfigError: If a delay is negative or base is lower than 1.0.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from resultretry.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(
        ...     initial_delay=timedelta(milliseconds=10), max_delay=timedelta(seconds=3)
        ... )
        >>> backoff(1)
        datetime.timedelta(microseconds=10000)
        >>> backoff(4)
        datetime.timedelta(microseconds=80000)
        >>> backoff(20)
        datetime.timedelta(seconds=3)

        ```
    """

    def __init__(
        self,
        initial_delay: timedelta | float,
        max_delay: timedelta | float,
        base: float = DEFAULT_BACKOFF_BASE,
    ) -> None:
        validate_non_negative_delay("initial_delay", initial_delay)
        validate_non_negative_delay("max_delay", max_delay)
        validate_base(base)

        self.initial_delay = initial_delay
        self.max_delay = max_delay
        self.base = base
        self._initial_ms = to_milliseconds(initial_delay)
        self._max_ms = math.floor(to_milliseconds(max_delay))

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(initial_delay={self.initial_delay!r}, "
            f"max_delay={self.max_delay!r}, base={self.base})"
        )

    def calculate_milliseconds(self, attempt_nr: int) -> int:
        if self._initial_ms == 0:
            return 0
        try:
            exponential_ms = self._initial_ms * self.base ** (attempt_nr - 1)
        except OverflowError:
            return self._max_ms
        # min() first so an infinite product never reaches int()
        return int(min(exponential_ms, self._max_ms))


def capped_exponential(
    initial_delay: timedelta | float,
    max_delay: timedelta | float,
    base: float = DEFAULT_BACKOFF_BASE,
) -> ExponentialBackoff:
    """Create a capped exponential backoff function.

    Args:
        initial_delay: The delay after the first failed attempt.
        max_delay: The cap applied to every delay.
        base: The growth factor between consecutive delays (default: 2.0).

    Returns:
        The backoff function.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from resultretry.backoff import capped_exponential
        >>> backoff = capped_exponential(timedelta(milliseconds=10), timedelta(seconds=3))
        >>> [backoff(n) // timedelta(milliseconds=1) for n in range(1, 14)]
        [10, 20, 40, 80, 160, 320, 640, 1280, 2560, 3000, 3000, 3000, 3000]

        ```
    """
    return ExponentialBackoff(initial_delay=initial_delay, max_delay=max_delay, base=base)
