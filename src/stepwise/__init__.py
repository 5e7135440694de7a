r"""stepwise - Resilient execution of workflow steps.

This package runs the steps of a workflow pipeline (commands, named
commands, nested groups, and parallel sets) with automatic retries of
transient failures. Errors are classified by composable matchers, retry
delays come from pluggable backoff strategies, and lifecycle events are
reported to observer handlers without changing any step's result.

Key Features:
    - Retry policies resolved per step: ``retry: 5``, ``retry: false``,
      ``idempotent: false``, or a full mapping
    - Constant, linear, and exponential (with jitter) backoff
    - Error matchers by type, message, HTTP status, and rate-limit hints,
      composable with ``any``/``all``
    - Logging, metrics, and instrumentation handlers
    - Parallel step sets that always run every sibling to completion

Example:
    ```pycon
    >>> from stepwise import RetryCoordinator
    >>> coordinator = RetryCoordinator()
    >>> coordinator.execute_with_retry({"retry": 3}, lambda: "ok")
    'ok'

    ```
"""

from __future__ import annotations

__all__ = [
    "ConfigurationError",
    "RetryConfig",
    "RetryCoordinator",
    "RetryDecider",
    "RetryExecutor",
    "RetryableError",
    "StepDispatcher",
    "StepwiseError",
    "StrategyFactory",
    "__version__",
]

import logging
from importlib.metadata import PackageNotFoundError, version

from stepwise.exceptions import ConfigurationError, RetryableError, StepwiseError
from stepwise.retry import (
    RetryConfig,
    RetryCoordinator,
    RetryDecider,
    RetryExecutor,
    StrategyFactory,
)
from stepwise.workflow import StepDispatcher

# Silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
