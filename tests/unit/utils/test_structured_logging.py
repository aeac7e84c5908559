from __future__ import annotations

import json
import logging
from io import StringIO
from typing import TYPE_CHECKING

import pytest

from resultretry import Attempt, AttemptCategory
from resultretry.retry.manager import ObserverManager
from resultretry.utils.structured_logging import (
    StructuredFormatter,
    clear_correlation_id,
    get_correlation_id,
    log_structured,
    set_correlation_id,
)
from tests.helpers import FAIL_RETRIABLE

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def stream_logger() -> Generator[tuple[logging.Logger, StringIO], None, None]:
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    logger = logging.getLogger("resultretry")
    logger.addHandler(handler)
    previous_level = logger.level
    logger.setLevel(logging.DEBUG)
    try:
        yield logger, stream
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous_level)
        clear_correlation_id()


##############################################
#     Tests for correlation ID management    #
##############################################


def test_correlation_id_initially_none() -> None:
    clear_correlation_id()
    assert get_correlation_id() is None


def test_set_and_clear_correlation_id() -> None:
    set_correlation_id("job-123")
    assert get_correlation_id() == "job-123"
    clear_correlation_id()
    assert get_correlation_id() is None


##############################################
#     Tests for StructuredFormatter          #
##############################################


def test_structured_formatter_fields(stream_logger: tuple[logging.Logger, StringIO]) -> None:
    logger, stream = stream_logger

    logger.info("hello")

    data = json.loads(stream.getvalue())
    assert data["message"] == "hello"
    assert data["level"] == "INFO"
    assert data["logger"] == "resultretry"
    assert data["timestamp"].endswith("Z")
    assert "correlation_id" not in data


def test_structured_formatter_correlation_id(stream_logger: tuple[logging.Logger, StringIO]) -> None:
    logger, stream = stream_logger
    set_correlation_id("job-42")

    logger.info("hello")

    assert json.loads(stream.getvalue())["correlation_id"] == "job-42"


def test_structured_formatter_exception(stream_logger: tuple[logging.Logger, StringIO]) -> None:
    logger, stream = stream_logger

    try:
        raise ValueError("boom")
    except ValueError:
        logger.exception("failed")

    data = json.loads(stream.getvalue())
    assert "ValueError: boom" in data["exception"]


def test_log_structured_extra_fields(stream_logger: tuple[logging.Logger, StringIO]) -> None:
    logger, stream = stream_logger

    log_structured(logger, logging.DEBUG, "waiting", attempt_nr=3, delay=0.5)

    data = json.loads(stream.getvalue())
    assert data["attempt_nr"] == 3
    assert data["delay"] == 0.5
    assert "msg" not in data
    assert "args" not in data


def test_attempt_dispatch_emits_json(stream_logger: tuple[logging.Logger, StringIO]) -> None:
    _, stream = stream_logger

    ObserverManager(None).dispatch(Attempt(1, FAIL_RETRIABLE), AttemptCategory.RETRIABLE_FAILURE)

    data = json.loads(stream.getvalue().splitlines()[-1])
    assert data["logger"] == "resultretry.retry.manager"
    assert data["attempt_nr"] == 1
    assert data["category"] == "retriable_failure"
