r"""Outcome and attempt value types.

An operation retried by resultretry does not raise to signal failure.
Instead it returns an ``Outcome``: either ``Success`` carrying a value,
or ``Failure`` carrying a domain error. Each execution of the operation
is recorded as an ``Attempt``.

Example:
    ```pycon
    >>> from resultretry.outcome import Attempt, Failure, Success
    >>> Success(42).is_success
    True
    >>> Failure(ValueError("boom")).is_failure
    True
    >>> Attempt(attempt_nr=1, outcome=Success("OK")).is_success
    True

    ```
"""

from __future__ import annotations

__all__ = ["Attempt", "Failure", "Outcome", "Success", "capture"]

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar, Union

if TYPE_CHECKING:
    from collections.abc import Callable

E = TypeVar("E")
R = TypeVar("R")


@dataclass(frozen=True)
class Success(Generic[R]):
    """Successful outcome of an operation.

    Attributes:
        value: The value produced by the operation.
    """

    value: R

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Failed outcome of an operation.

    Attributes:
        error: The domain error produced by the operation.
    """

    error: E

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True


Outcome = Union[Success[R], Failure[E]]


@dataclass(frozen=True)
class Attempt(Generic[E, R]):
    """One execution of the retried operation.

    Attributes:
        attempt_nr: The attempt number (1-indexed). First attempt is 1.
        outcome: The outcome returned by the operation on this attempt.
    """

    attempt_nr: int
    outcome: Outcome[R, E]

    @property
    def is_success(self) -> bool:
        return isinstance(self.outcome, Success)


def capture(
    func: Callable[[], R],
    *exception_types: type[Exception],
) -> Outcome[R, Exception]:
    """Call a function and convert its raised exceptions into a
    ``Failure``.

    This is the bridge between exception-raising code and the retry
    executors, which expect operations to return an ``Outcome``.

    Args:
        func: The zero-argument function to call.
        *exception_types: The exception types to capture. Defaults to
            ``Exception``. Other exceptions propagate unchanged.

    Returns:
        ``Success`` with the returned value, or ``Failure`` with the
        captured exception.

    Example:
        ```pycon
        >>> from resultretry.outcome import capture
        >>> capture(lambda: 1 + 1)
        Success(value=2)
        >>> capture(lambda: 1 / 0, ZeroDivisionError).is_failure
        True

        ```
    """
    catch = exception_types or (Exception,)
    try:
        return Success(func())
    except catch as exc:
        return Failure(exc)
