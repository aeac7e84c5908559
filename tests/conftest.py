from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest

from resultretry import RetryConfig
from tests.helpers import RecordingObservers

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def recorder() -> RecordingObservers:
    """Create observers recording every attempt they receive."""
    return RecordingObservers()


@pytest.fixture
def retry_config(recorder: RecordingObservers) -> RetryConfig:
    """Create a 3-attempt configuration retrying ``AppError(retriable=True)``.

    Backoff delays are 1ms for every attempt and all four observers are
    wired to ``recorder``.
    """
    return RetryConfig(
        max_attempts=3,
        backoff_function=lambda attempt_nr: 0.001,
        retry_predicate=lambda error: error.retriable,
        observers=recorder.observers(),
    )
