r"""Retry package: configuration, decision, and execution of retries.

Public API:
    - RetryConfig: Retry configuration resolved from a step
    - StrategyFactory: Creates backoff strategies from configuration
    - RetryDecider: Decides whether a step may be retried at all
    - RetryExecutor: Runs an operation with retries
    - RetryCoordinator: Entry point combining the three above
    - Attempt, ExecutionOutcome: Attempt record and terminal outcome
"""

from __future__ import annotations

__all__ = [
    "Attempt",
    "ExecutionOutcome",
    "RetryConfig",
    "RetryCoordinator",
    "RetryDecider",
    "RetryExecutor",
    "StrategyFactory",
]

from stepwise.retry.config import RetryConfig
from stepwise.retry.coordinator import RetryCoordinator
from stepwise.retry.decider import RetryDecider
from stepwise.retry.executor import RetryExecutor
from stepwise.retry.factory import StrategyFactory
from stepwise.retry.outcome import Attempt, ExecutionOutcome
