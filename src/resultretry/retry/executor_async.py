r"""Asynchronous retry executor.

This module provides the AsyncRetryExecutor class that runs a coroutine
operation with retries, suspending the task with ``asyncio.sleep``
during backoff waits instead of blocking a thread.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor", "execute_with_retries_async"]

import asyncio
import logging
from itertools import count
from typing import TYPE_CHECKING

from resultretry.outcome import Attempt
from resultretry.retry.decider import AttemptCategory, classify_attempt
from resultretry.retry.manager import ObserverManager
from resultretry.utils.sleep import async_wait, to_seconds

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from resultretry.outcome import Outcome
    from resultretry.retry.config import RetryConfig

logger: logging.Logger = logging.getLogger(__name__)


class AsyncRetryExecutor:
    """Executes a coroutine operation with retries and backoff.

    The algorithm is the one of ``RetryExecutor``. Observers are plain
    functions invoked synchronously, so they should be fast. Cancelling
    the task while it waits for a backoff raises
    ``asyncio.CancelledError`` out of ``execute_with_retries`` and no
    further attempt is made.

    Attributes:
        config: The retry configuration.
        observers: Manager dispatching attempts to the observers.

    Example:
        ```pycon
        >>> import asyncio
        >>> from resultretry import AsyncRetryExecutor, RetryConfig, Success
        >>> async def fetch():
        ...     return Success("OK")
        ...
        >>> executor = AsyncRetryExecutor(
        ...     RetryConfig(
        ...         max_attempts=3,
        ...         backoff_function=lambda attempt_nr: 0.0,
        ...         retry_predicate=lambda error: True,
        ...     )
        ... )
        >>> asyncio.run(executor.execute_with_retries(fetch))
        Success(value='OK')

        ```
    """

    def __init__(self, config: RetryConfig) -> None:
        self.config = config
        self.observers: ObserverManager = ObserverManager(config.observers)

    async def execute_with_retries(
        self, operation: Callable[[], Awaitable[Outcome]]
    ) -> Outcome:
        """Execute the coroutine operation until a terminal attempt.

        Args:
            operation: Zero-argument coroutine function returning a
                ``Success`` or a ``Failure``.

        Returns:
            The outcome of the last attempt.

        Raises:
            asyncio.CancelledError: If the task is cancelled.
            TypeError: If the operation returns something that is not
                an outcome.
        """
        for attempt_nr in count(start=1):
            attempt = Attempt(attempt_nr=attempt_nr, outcome=await operation())
            category = classify_attempt(attempt, self.config)
            self.observers.dispatch(attempt, category)
            if category is not AttemptCategory.RETRIABLE_FAILURE:
                return attempt.outcome

            seconds = to_seconds(self.config.backoff_function(attempt_nr))
            logger.debug(
                f"Waiting {seconds:.3f}s before attempt {attempt_nr + 1}/{self.config.max_attempts}"
            )
            try:
                await async_wait(seconds)
            except asyncio.CancelledError:
                logger.debug(f"Backoff after attempt {attempt_nr} was cancelled")
                raise
        return None  # pragma: no cover


async def execute_with_retries_async(
    operation: Callable[[], Awaitable[Outcome]], config: RetryConfig
) -> Outcome:
    """Execute a coroutine operation with retries and backoff.

    Shortcut for ``AsyncRetryExecutor(config).execute_with_retries(operation)``.

    Args:
        operation: Zero-argument coroutine function returning a
            ``Success`` or a ``Failure``.
        config: The retry configuration.

    Returns:
        The outcome of the last attempt.
    """
    return await AsyncRetryExecutor(config).execute_with_retries(operation)
