r"""Backoff strategies deciding retries and computing retry delays.

This package provides constant, linear, and exponential (with optional
jitter) backoff, plus a strategy that never retries.
"""

from __future__ import annotations

__all__ = [
    "BackoffStrategy",
    "ConstantBackoff",
    "ExponentialBackoff",
    "LinearBackoff",
    "NullBackoff",
]

from stepwise.backoff.base import BackoffStrategy
from stepwise.backoff.constant import ConstantBackoff
from stepwise.backoff.exponential import ExponentialBackoff
from stepwise.backoff.linear import LinearBackoff
from stepwise.backoff.null import NullBackoff
