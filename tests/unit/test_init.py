from __future__ import annotations

import resultretry
from resultretry import RetryCancelledError, RetryConfigError, RetryError
from resultretry.outcome import Attempt, Failure


def test_version() -> None:
    assert isinstance(resultretry.__version__, str)


def test_public_api() -> None:
    for name in resultretry.__all__:
        assert hasattr(resultretry, name), name


def test_retry_config_error_hierarchy() -> None:
    assert issubclass(RetryConfigError, RetryError)
    assert issubclass(RetryConfigError, ValueError)


def test_retry_cancelled_error() -> None:
    attempt = Attempt(2, Failure("busy"))
    error = RetryCancelledError("cancelled", attempt=attempt)

    assert isinstance(error, RetryError)
    assert str(error) == "cancelled"
    assert error.attempt is attempt
    assert repr(error) == "RetryCancelledError(message='cancelled', attempt_nr=2)"


def test_retry_cancelled_error_without_attempt() -> None:
    error = RetryCancelledError("cancelled")

    assert error.attempt is None
    assert repr(error) == "RetryCancelledError(message='cancelled', attempt_nr=None)"
