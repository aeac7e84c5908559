r"""Utility functions for retry configuration, waits and logging.

This package provides helpers for validating retry parameters,
converting backoff delays to seconds, waiting between attempts, and
emitting structured log records.
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "async_wait",
    "log_structured",
    "to_seconds",
    "validate_attempt_nr",
    "validate_base",
    "validate_callable",
    "validate_max_attempts",
    "validate_non_negative_delay",
    "wait",
]

from resultretry.utils.sleep import async_wait, to_seconds, wait
from resultretry.utils.structured_logging import StructuredFormatter, log_structured
from resultretry.utils.validation import (
    validate_attempt_nr,
    validate_base,
    validate_callable,
    validate_max_attempts,
    validate_non_negative_delay,
)
