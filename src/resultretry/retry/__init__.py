r"""Retry package implementing the retry-with-backoff loop.

Public API:
    - RetryConfig: Configuration for retry behavior
    - Observers: Optional callbacks notified of each attempt
    - AttemptCategory: Classification of an attempt
    - classify_attempt: Pure classification of an attempt
    - ObserverManager: Dispatcher of attempts to observers
    - RetryExecutor: Synchronous retry executor
    - AsyncRetryExecutor: Asynchronous retry executor
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "AttemptCategory",
    "ObserverManager",
    "Observers",
    "RetryConfig",
    "RetryExecutor",
    "classify_attempt",
    "execute_with_retries",
    "execute_with_retries_async",
]

from resultretry.retry.config import Observers, RetryConfig
from resultretry.retry.decider import AttemptCategory, classify_attempt
from resultretry.retry.executor import RetryExecutor, execute_with_retries
from resultretry.retry.executor_async import AsyncRetryExecutor, execute_with_retries_async
from resultretry.retry.manager import ObserverManager
