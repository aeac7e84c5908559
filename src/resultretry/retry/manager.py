r"""Observer manager for dispatching classified attempts.

This module provides the ObserverManager class that invokes the
user-defined observer matching the category of each attempt.
"""

from __future__ import annotations

__all__ = ["ObserverManager"]

import logging
from typing import TYPE_CHECKING

from resultretry.retry.decider import AttemptCategory
from resultretry.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from collections.abc import Callable

    from resultretry.outcome import Attempt
    from resultretry.retry.config import Observers

logger: logging.Logger = logging.getLogger(__name__)


class ObserverManager:
    """Dispatches classified attempts to the matching observer.

    Observers are called synchronously. An exception raised by an
    observer is not caught: it propagates to the caller of the executor
    and ends the retry loop.

    Attributes:
        observers: The observer callbacks, or ``None`` if no observer is
            configured.
    """

    def __init__(self, observers: Observers | None) -> None:
        self.observers = observers

    def get_observer(self, category: AttemptCategory) -> Callable[[Attempt], None] | None:
        """Return the observer registered for a category.

        Args:
            category: The attempt category.

        Returns:
            The observer, or ``None`` if it is not configured.
        """
        if self.observers is None:
            return None
        if category is AttemptCategory.SUCCESS:
            return self.observers.on_success
        if category is AttemptCategory.NON_RETRIABLE_FAILURE:
            return self.observers.on_non_retriable_error
        if category is AttemptCategory.ATTEMPTS_EXHAUSTED:
            return self.observers.on_max_attempts_reached
        return self.observers.on_retriable_error

    def dispatch(self, attempt: Attempt, category: AttemptCategory) -> None:
        """Log the classified attempt and invoke the matching observer.

        Args:
            attempt: The attempt to dispatch.
            category: The category of the attempt.
        """
        log_structured(
            logger,
            logging.DEBUG,
            f"Attempt {attempt.attempt_nr} classified as {category.value}",
            attempt_nr=attempt.attempt_nr,
            category=category.value,
        )
        observer = self.get_observer(category)
        if observer is not None:
            observer(attempt)
