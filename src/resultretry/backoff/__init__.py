r"""Backoff functions for retry delays.

This package provides backoff functions mapping the number of the
attempt that just failed to the delay before the next attempt: capped
exponential, linear and constant patterns. Any plain callable with the
same signature can be used instead.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_BACKOFF_BASE",
    "BaseBackoff",
    "ConstantBackoff",
    "ExponentialBackoff",
    "LinearBackoff",
    "capped_exponential",
]

from resultretry.backoff.base import BaseBackoff
from resultretry.backoff.constant import ConstantBackoff
from resultretry.backoff.exponential import (
    DEFAULT_BACKOFF_BASE,
    ExponentialBackoff,
    capped_exponential,
)
from resultretry.backoff.linear import LinearBackoff
