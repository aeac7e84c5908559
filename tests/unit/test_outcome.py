r"""Unit tests for outcome and attempt value types."""

from __future__ import annotations

import dataclasses

import pytest

from resultretry import Attempt, Failure, Success, capture


def test_success() -> None:
    outcome = Success("OK")

    assert outcome.value == "OK"
    assert outcome.is_success
    assert not outcome.is_failure


def test_failure() -> None:
    error = KeyError("missing")
    outcome = Failure(error)

    assert outcome.error is error
    assert outcome.is_failure
    assert not outcome.is_success


def test_outcomes_compare_by_value() -> None:
    assert Success(1) == Success(1)
    assert Failure("e") == Failure("e")
    assert Success("x") != Failure("x")


def test_outcomes_are_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        Success(1).value = 2


def test_attempt() -> None:
    attempt = Attempt(attempt_nr=2, outcome=Failure("e"))

    assert attempt.attempt_nr == 2
    assert attempt.outcome == Failure("e")
    assert not attempt.is_success
    assert Attempt(1, Success(None)).is_success


def test_attempt_equality() -> None:
    assert Attempt(1, Success("OK")) == Attempt(1, Success("OK"))
    assert Attempt(1, Success("OK")) != Attempt(2, Success("OK"))


#############################
#     Tests for capture     #
#############################


def test_capture_success() -> None:
    assert capture(lambda: 42) == Success(42)


def test_capture_default_catches_exception() -> None:
    error = RuntimeError("boom")

    def fail() -> None:
        raise error

    assert capture(fail) == Failure(error)


def test_capture_specific_exception_types() -> None:
    outcome = capture(lambda: {}["key"], KeyError, ValueError)

    assert isinstance(outcome, Failure)
    assert isinstance(outcome.error, KeyError)


def test_capture_other_exceptions_propagate() -> None:
    with pytest.raises(ZeroDivisionError):
        capture(lambda: 1 / 0, KeyError)
