r"""Parameter validation utilities for retry configuration.

This module provides validation functions for retry parameters to ensure
they meet the required constraints before being used by the retry
executors and backoff functions. All functions raise
``RetryConfigError`` (a ``ValueError`` subclass) on invalid input.
"""

from __future__ import annotations

__all__ = [
    "validate_attempt_nr",
    "validate_base",
    "validate_callable",
    "validate_max_attempts",
    "validate_non_negative_delay",
]

from datetime import timedelta
from typing import Any

from resultretry.exceptions import RetryConfigError


def validate_max_attempts(max_attempts: int) -> None:
    """Validate the maximum number of attempts.

    Args:
        max_attempts: Maximum number of attempts, including the first
            one. Must be >= 1.

    Raises:
        RetryConfigError: If max_attempts is not an integer >= 1.

    Example:
        ```pycon
        >>> from resultretry.utils.validation import validate_max_attempts
        >>> validate_max_attempts(3)
        >>> validate_max_attempts(0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        resultretry.exceptions.RetryConfigError: max_attempts must be >= 1, got 0

        ```
    """
    if isinstance(max_attempts, bool) or not isinstance(max_attempts, int):
        msg = f"max_attempts must be an int, got {type(max_attempts).__name__}"
        raise RetryConfigError(msg)
    if max_attempts < 1:
        msg = f"max_attempts must be >= 1, got {max_attempts}"
        raise RetryConfigError(msg)


def validate_callable(name: str, value: Any) -> None:
    """Validate that a configuration value is callable.

    Args:
        name: The parameter name, used in the error message.
        value: The value to check.

    Raises:
        RetryConfigError: If value is not callable.
    """
    if not callable(value):
        msg = f"{name} must be callable, got {type(value).__name__}"
        raise RetryConfigError(msg)


def validate_non_negative_delay(name: str, delay: timedelta | float) -> None:
    """Validate that a delay is non-negative.

    Args:
        name: The parameter name, used in the error message.
        delay: The delay as a ``timedelta`` or a number of seconds.

    Raises:
        RetryConfigError: If delay is negative.
    """
    if isinstance(delay, timedelta):
        negative = delay < timedelta(0)
    else:
        negative = delay < 0
    if negative:
        msg = f"{name} must be non-negative, got {delay}"
        raise RetryConfigError(msg)


def validate_base(base: float) -> None:
    """Validate the growth base of an exponential backoff.

    Args:
        base: The power base. Must be >= 1.0 so that delays never
            decrease with the attempt number.

    Raises:
        RetryConfigError: If base is lower than 1.0.
    """
    if base < 1.0:
        msg = f"base must be >= 1.0, got {base}"
        raise RetryConfigError(msg)


def validate_attempt_nr(attempt_nr: int) -> None:
    """Validate an attempt number passed to a backoff function.

    Args:
        attempt_nr: The attempt number (1-indexed).

    Raises:
        RetryConfigError: If attempt_nr is lower than 1.
    """
    if attempt_nr < 1:
        msg = f"attempt_nr must be >= 1, got {attempt_nr}"
        raise RetryConfigError(msg)
