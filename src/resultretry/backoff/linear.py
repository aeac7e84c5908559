r"""Linear backoff."""

from __future__ import annotations

__all__ = ["LinearBackoff"]

import math
from typing import TYPE_CHECKING

from resultretry.backoff.base import BaseBackoff, to_milliseconds
from resultretry.utils.validation import validate_non_negative_delay

if TYPE_CHECKING:
    from datetime import timedelta


class LinearBackoff(BaseBackoff):
    """Linear backoff strategy.

    Calculates the delay as ``initial_delay + increment * (attempt_nr - 1)``,
    optionally capped at ``max_delay``. Useful when delays should grow,
    but more gently than with exponential backoff.

    Args:
        initial_delay: The delay after the first failed attempt, as a
            ``timedelta`` or a number of seconds.
        increment: The amount added for each further failed attempt.
        max_delay: Optional cap applied to every delay.

    Example:
        ```pycon
        >>> from resultretry.backoff import LinearBackoff
        >>> backoff = LinearBackoff(initial_delay=1.0, increment=0.5, max_delay=2.0)
        >>> [backoff(n).total_seconds() for n in range(1, 5)]
        [1.0, 1.5, 2.0, 2.0]

        ```
    """

    def __init__(
        self,
        initial_delay: timedelta | float,
        increment: timedelta | float,
        max_delay: timedelta | float | None = None,
    ) -> None:
        validate_non_negative_delay("initial_delay", initial_delay)
        validate_non_negative_delay("increment", increment)
        if max_delay is not None:
            validate_non_negative_delay("max_delay", max_delay)

        self.initial_delay = initial_delay
        self.increment = increment
        self.max_delay = max_delay
        self._initial_ms = to_milliseconds(initial_delay)
        self._increment_ms = to_milliseconds(increment)
        self._max_ms = None if max_delay is None else math.floor(to_milliseconds(max_delay))

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(initial_delay={self.initial_delay!r}, "
            f"increment={self.increment!r}, max_delay={self.max_delay!r})"
        )

    def calculate_milliseconds(self, attempt_nr: int) -> int:
        delay_ms = self._initial_ms + self._increment_ms * (attempt_nr - 1)
        if self._max_ms is not None:
            delay_ms = min(delay_ms, self._max_ms)
        return int(delay_ms)
