r"""Synchronous retry executor.

This module provides the RetryExecutor class that runs an operation
until it succeeds, fails permanently, or runs out of attempts, blocking
the calling thread during backoff waits.
"""

from __future__ import annotations

__all__ = ["RetryExecutor", "execute_with_retries"]

import logging
from itertools import count
from typing import TYPE_CHECKING

from resultretry.exceptions import RetryCancelledError
from resultretry.outcome import Attempt
from resultretry.retry.decider import AttemptCategory, classify_attempt
from resultretry.retry.manager import ObserverManager
from resultretry.utils.sleep import to_seconds, wait

if TYPE_CHECKING:
    import threading
    from collections.abc import Callable

    from resultretry.outcome import Outcome
    from resultretry.retry.config import RetryConfig

logger: logging.Logger = logging.getLogger(__name__)


class RetryExecutor:
    """Executes an operation with retries and backoff.

    Each call to ``execute_with_retries`` owns its own attempt counter,
    so one executor can serve several threads concurrently.

    Args:
        config: The retry configuration.
        cancel_event: Optional event used to cancel backoff waits. When
            it is set, the current or next wait is aborted and
            ``RetryCancelledError`` is raised.

    Attributes:
        config: The retry configuration.
        observers: Manager dispatching attempts to the observers.
        cancel_event: Optional event used to cancel backoff waits.

    Example:
        ```pycon
        >>> from resultretry import Failure, RetryConfig, RetryExecutor, Success
        >>> responses = iter([Failure("busy"), Success("OK")])
        >>> executor = RetryExecutor(
        ...     RetryConfig(
        ...         max_attempts=3,
        ...         backoff_function=lambda attempt_nr: 0.0,
        ...         retry_predicate=lambda error: error == "busy",
        ...     )
        ... )
        >>> executor.execute_with_retries(lambda: next(responses))
        Success(value='OK')

        ```
    """

    def __init__(
        self, config: RetryConfig, cancel_event: threading.Event | None = None
    ) -> None:
        self.config = config
        self.observers: ObserverManager = ObserverManager(config.observers)
        self.cancel_event = cancel_event

    def execute_with_retries(self, operation: Callable[[], Outcome]) -> Outcome:
        """Execute the operation until a terminal attempt.

        The loop calls the operation, classifies the attempt, and invokes
        the matching observer. A success, a non-retriable failure, or a
        retriable failure on the last allowed attempt ends the loop. A
        retriable failure with attempts remaining is followed by a wait
        of ``backoff_function(attempt_nr)`` and another attempt.

        Args:
            operation: Zero-argument function returning a ``Success`` or
                a ``Failure``.

        Returns:
            The outcome of the last attempt.

        Raises:
            RetryCancelledError: If a backoff wait is cancelled through
                ``cancel_event``.
            TypeError: If the operation returns something that is not
                an outcome.
        """
        for attempt_nr in count(start=1):
            attempt = Attempt(attempt_nr=attempt_nr, outcome=operation())
            category = classify_attempt(attempt, self.config)
            self.observers.dispatch(attempt, category)
            if category is not AttemptCategory.RETRIABLE_FAILURE:
                return attempt.outcome
            self._backoff(attempt)
        return None  # pragma: no cover

    def _backoff(self, attempt: Attempt) -> None:
        seconds = to_seconds(self.config.backoff_function(attempt.attempt_nr))
        logger.debug(
            f"Waiting {seconds:.3f}s before attempt {attempt.attempt_nr + 1}"
            f"/{self.config.max_attempts}"
        )
        if not wait(seconds, self.cancel_event):
            logger.debug(f"Backoff after attempt {attempt.attempt_nr} was cancelled")
            msg = f"retry loop cancelled during backoff after attempt {attempt.attempt_nr}"
            raise RetryCancelledError(msg, attempt=attempt)


def execute_with_retries(
    operation: Callable[[], Outcome],
    config: RetryConfig,
    cancel_event: threading.Event | None = None,
) -> Outcome:
    """Execute an operation with retries and backoff.

    Shortcut for ``RetryExecutor(config, cancel_event).execute_with_retries(operation)``.

    Args:
        operation: Zero-argument function returning a ``Success`` or a
            ``Failure``.
        config: The retry configuration.
        cancel_event: Optional event used to cancel backoff waits.

    Returns:
        The outcome of the last attempt.
    """
    return RetryExecutor(config, cancel_event=cancel_event).execute_with_retries(operation)
