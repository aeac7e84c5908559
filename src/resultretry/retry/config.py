r"""Configuration dataclasses for retry behavior.

This module provides the retry configuration and the set of optional
observer callbacks notified at each classified attempt.
"""

from __future__ import annotations

__all__ = ["Observers", "RetryConfig"]

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from resultretry.utils.validation import validate_callable, validate_max_attempts

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import timedelta

    from resultretry.outcome import Attempt

E = TypeVar("E")


@dataclass(frozen=True)
class Observers:
    """Optional callbacks notified of classified attempts.

    Each callback receives the ``Attempt`` and returns nothing. Exactly
    one callback is considered per attempt; a callback left to ``None``
    is skipped.

    Attributes:
        on_success: Called when the operation returned a ``Success``.
        on_retriable_error: Called when a retriable failure will be
            followed by a backoff wait and another attempt.
        on_non_retriable_error: Called when the retry predicate rejected
            the failure.
        on_max_attempts_reached: Called when a retriable failure happened
            on the last allowed attempt.
    """

    on_success: Callable[[Attempt], None] | None = None
    on_retriable_error: Callable[[Attempt], None] | None = None
    on_non_retriable_error: Callable[[Attempt], None] | None = None
    on_max_attempts_reached: Callable[[Attempt], None] | None = None

    def __post_init__(self) -> None:
        for name in (
            "on_success",
            "on_retriable_error",
            "on_non_retriable_error",
            "on_max_attempts_reached",
        ):
            value = getattr(self, name)
            if value is not None:
                validate_callable(name, value)


@dataclass(frozen=True)
class RetryConfig(Generic[E]):
    """Configuration for retry behavior.

    The configuration is validated when it is created and never changes
    afterwards, so it can be shared by several executors.

    Attributes:
        max_attempts: Maximum number of attempts, including the first
            one. Must be >= 1.
        backoff_function: Maps the number of the attempt that just failed
            to the delay before the next attempt (``timedelta`` or
            seconds).
        retry_predicate: Returns ``True`` if a domain error is retriable.
        observers: Optional callbacks notified of each attempt.

    Raises:
        RetryConfigError: If max_attempts is lower than 1 or a function
            is not callable.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from resultretry import RetryConfig
        >>> from resultretry.backoff import capped_exponential
        >>> config = RetryConfig(
        ...     max_attempts=3,
        ...     backoff_function=capped_exponential(
        ...         timedelta(milliseconds=100), timedelta(seconds=2)
        ...     ),
        ...     retry_predicate=lambda error: isinstance(error, TimeoutError),
        ... )
        >>> config.max_attempts
        3

        ```
    """

    max_attempts: int
    backoff_function: Callable[[int], timedelta | float]
    retry_predicate: Callable[[E], bool]
    observers: Observers | None = None

    def __post_init__(self) -> None:
        validate_max_attempts(self.max_attempts)
        validate_callable("backoff_function", self.backoff_function)
        validate_callable("retry_predicate", self.retry_predicate)

    def with_observers(self, observers: Observers | None) -> RetryConfig[E]:
        """Return a copy of this configuration with other observers.

        Args:
            observers: The observers of the new configuration.

        Returns:
            The new configuration.
        """
        return replace(self, observers=observers)

    def is_retriable(self, error: Any) -> bool:
        """Indicate if a domain error is retriable.

        Args:
            error: The error carried by a ``Failure``.

        Returns:
            The result of ``retry_predicate``, coerced to ``bool``.
        """
        return bool(self.retry_predicate(error))
