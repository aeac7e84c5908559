r"""Attempt classification logic.

This module provides the pure function deciding what happens after an
attempt: stop with a success, stop with a failure, or wait and retry.
It is shared by the synchronous and asynchronous executors.
"""

from __future__ import annotations

__all__ = ["AttemptCategory", "classify_attempt"]

from enum import Enum
from typing import TYPE_CHECKING

from resultretry.outcome import Failure, Success

if TYPE_CHECKING:
    from resultretry.outcome import Attempt
    from resultretry.retry.config import RetryConfig


class AttemptCategory(Enum):
    """The four mutually exclusive classifications of an attempt."""

    SUCCESS = "success"
    NON_RETRIABLE_FAILURE = "non_retriable_failure"
    ATTEMPTS_EXHAUSTED = "attempts_exhausted"
    RETRIABLE_FAILURE = "retriable_failure"

    @property
    def is_terminal(self) -> bool:
        """Indicate if the retry loop stops after this category."""
        return self is not AttemptCategory.RETRIABLE_FAILURE


def classify_attempt(attempt: Attempt, config: RetryConfig) -> AttemptCategory:
    """Classify an attempt against the retry configuration.

    The categories are evaluated in this order, the first match wins:

    1. ``SUCCESS``: the outcome is a ``Success``.
    2. ``NON_RETRIABLE_FAILURE``: the retry predicate rejects the error.
    3. ``ATTEMPTS_EXHAUSTED``: the error is retriable but
       ``attempt_nr >= max_attempts``.
    4. ``RETRIABLE_FAILURE``: the error is retriable and attempts remain.

    The retry predicate is only called for failures.

    Args:
        attempt: The attempt to classify.
        config: The retry configuration.

    Returns:
        The category of the attempt.

    Raises:
        TypeError: If the outcome is neither a ``Success`` nor a
            ``Failure``.

    Example:
        ```pycon
        >>> from resultretry import Attempt, Failure, RetryConfig, Success
        >>> from resultretry.retry.decider import classify_attempt
        >>> config = RetryConfig(
        ...     max_attempts=2,
        ...     backoff_function=lambda n: 0.0,
        ...     retry_predicate=lambda e: e == "transient",
        ... )
        >>> classify_attempt(Attempt(1, Success("OK")), config).name
        'SUCCESS'
        >>> classify_attempt(Attempt(1, Failure("transient")), config).name
        'RETRIABLE_FAILURE'
        >>> classify_attempt(Attempt(2, Failure("transient")), config).name
        'ATTEMPTS_EXHAUSTED'
        >>> classify_attempt(Attempt(1, Failure("fatal")), config).name
        'NON_RETRIABLE_FAILURE'

        ```
    """
    outcome = attempt.outcome
    if isinstance(outcome, Success):
        return AttemptCategory.SUCCESS
    if not isinstance(outcome, Failure):
        msg = f"operation must return a Success or a Failure, got {type(outcome).__name__}"
        raise TypeError(msg)
    if not config.is_retriable(outcome.error):
        return AttemptCategory.NON_RETRIABLE_FAILURE
    if attempt.attempt_nr >= config.max_attempts:
        return AttemptCategory.ATTEMPTS_EXHAUSTED
    return AttemptCategory.RETRIABLE_FAILURE
