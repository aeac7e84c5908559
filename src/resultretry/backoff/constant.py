r"""Constant backoff."""

from __future__ import annotations

__all__ = ["ConstantBackoff"]

import math
from typing import TYPE_CHECKING

from resultretry.backoff.base import BaseBackoff, to_milliseconds
from resultretry.utils.validation import validate_non_negative_delay

if TYPE_CHECKING:
    from datetime import timedelta


class ConstantBackoff(BaseBackoff):
    """Constant backoff: every retry waits the same delay.

    Args:
        delay: The delay between attempts, as a ``timedelta`` or a number
            of seconds.

    Example:
        ```pycon
        >>> from resultretry.backoff import ConstantBackoff
        >>> backoff = ConstantBackoff(delay=0.5)
        >>> backoff(1) == backoff(10)
        True
        >>> backoff(3).total_seconds()
        0.5

        ```
    """

    def __init__(self, delay: timedelta | float) -> None:
        validate_non_negative_delay("delay", delay)
        self.delay = delay
        self._delay_ms = math.floor(to_milliseconds(delay))

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(delay={self.delay!r})"

    def calculate_milliseconds(self, attempt_nr: int) -> int:  # noqa: ARG002
        return self._delay_ms
