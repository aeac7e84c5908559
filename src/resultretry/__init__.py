r"""resultretry - Retry with backoff for operations returning outcomes.

This package executes a fallible operation repeatedly until it succeeds,
fails with a non-retriable error, or reaches a maximum number of
attempts. Operations report their result as an outcome (``Success`` or
``Failure``) instead of raising, and user-defined observers are notified
of every attempt.

Key Features:
    - Four-way classification of attempts: success, non-retriable
      failure, attempts exhausted, retriable failure
    - Capped exponential, linear, constant or custom backoff functions
    - Optional observers for logging, metrics and alerting
    - Synchronous and asyncio executors with cancellable backoff waits
    - Opt-in structured (JSON) logging

Example:
    ```pycon
    >>> from datetime import timedelta
    >>> from resultretry import Failure, RetryConfig, RetryExecutor, Success
    >>> from resultretry.backoff import capped_exponential
    >>> responses = iter([Failure(TimeoutError()), Success("OK")])
    >>> config = RetryConfig(
    ...     max_attempts=3,
    ...     backoff_function=capped_exponential(
    ...         timedelta(milliseconds=1), timedelta(milliseconds=8)
    ...     ),
    ...     retry_predicate=lambda error: isinstance(error, TimeoutError),
    ... )
    >>> RetryExecutor(config).execute_with_retries(lambda: next(responses))
    Success(value='OK')

    ```
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "Attempt",
    "AttemptCategory",
    "Failure",
    "Observers",
    "Outcome",
    "RetryCancelledError",
    "RetryConfig",
    "RetryConfigError",
    "RetryError",
    "RetryExecutor",
    "Success",
    "__version__",
    "capture",
    "classify_attempt",
    "execute_with_retries",
    "execute_with_retries_async",
]

from importlib.metadata import PackageNotFoundError, version

from resultretry.exceptions import RetryCancelledError, RetryConfigError, RetryError
from resultretry.outcome import Attempt, Failure, Outcome, Success, capture
from resultretry.retry import (
    AsyncRetryExecutor,
    AttemptCategory,
    Observers,
    RetryConfig,
    RetryExecutor,
    classify_attempt,
    execute_with_retries,
    execute_with_retries_async,
)

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
