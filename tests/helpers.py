r"""Shared test helpers for retry executor tests.

This module contains the domain error, canned outcomes and recording
observers used across the executor test modules.
"""

from __future__ import annotations

__all__ = [
    "FAIL_PERMANENTLY",
    "FAIL_RETRIABLE",
    "SUCCESS",
    "AppError",
    "RecordingObservers",
    "service_returning",
]

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from resultretry import Attempt, Failure, Observers, Success

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Sequence

    from resultretry import Outcome


class AppError(Exception):
    """Domain error flagged as retriable or not."""

    def __init__(self, retriable: bool) -> None:
        super().__init__("Some error")
        self.retriable = retriable


SUCCESS = Success("OK")
FAIL_RETRIABLE = Failure(AppError(retriable=True))
FAIL_PERMANENTLY = Failure(AppError(retriable=False))


@dataclass
class RecordingObservers:
    """Record ``(event, attempt)`` pairs in the order observers fire.

    ``event`` is one of ``"success"``, ``"retriable"``,
    ``"non_retriable"`` and ``"max_attempts"``.
    """

    events: list[tuple[str, Attempt]] = field(default_factory=list)

    def observers(self) -> Observers:
        return Observers(
            on_success=lambda attempt: self.events.append(("success", attempt)),
            on_retriable_error=lambda attempt: self.events.append(("retriable", attempt)),
            on_non_retriable_error=lambda attempt: self.events.append(("non_retriable", attempt)),
            on_max_attempts_reached=lambda attempt: self.events.append(("max_attempts", attempt)),
        )

    @property
    def names(self) -> list[tuple[str, int]]:
        return [(event, attempt.attempt_nr) for event, attempt in self.events]


def service_returning(outcomes: Sequence[Outcome]) -> Callable[[], Outcome]:
    """Create an operation returning the given outcomes in order."""
    return iter(outcomes).__next__


def async_service_returning(outcomes: Sequence[Outcome]) -> Callable[[], Awaitable[Outcome]]:
    """Create a coroutine operation returning the given outcomes in order."""
    iterator = iter(outcomes)

    async def operation() -> Outcome:
        return next(iterator)

    return operation
