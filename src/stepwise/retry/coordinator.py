r"""Single entry point running a step's operation under its retry policy.

This module provides the RetryCoordinator class which composes the step
level eligibility check (RetryDecider), the strategy creation
(StrategyFactory), and the attempt loop (RetryExecutor).
"""

from __future__ import annotations

__all__ = ["RetryCoordinator"]

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from stepwise.handlers.factory import build_handlers
from stepwise.retry.config import RetryConfig
from stepwise.retry.decider import RetryDecider
from stepwise.retry.executor import RetryExecutor
from stepwise.retry.factory import StrategyFactory

if TYPE_CHECKING:
    from collections.abc import Callable

    from stepwise.metrics import MetricsSink

logger: logging.Logger = logging.getLogger(__name__)


class RetryCoordinator:
    """Runs operations under the retry policy of their step.

    Args:
        executor: The attempt loop. Defaults to a ``RetryExecutor``
            without handlers.
        decider: The step eligibility check. Defaults to ``RetryDecider``.
        strategy_factory: The strategy factory. Defaults to
            ``StrategyFactory``.
        default_retry: Retry configuration applied to steps that do not
            define ``retry`` themselves, typically the workflow-wide
            setting. ``None`` means such steps are attempted once.
        metrics: Metrics sink given to ``metrics`` handlers declared in a
            step's retry configuration.

    Example:
        ```pycon
        >>> from stepwise.retry import RetryCoordinator
        >>> coordinator = RetryCoordinator()
        >>> attempts = []
        >>> def operation():
        ...     attempts.append(1)
        ...     if len(attempts) < 2:
        ...         raise TimeoutError("slow")
        ...     return "ok"
        ...
        >>> coordinator.execute_with_retry(
        ...     {"retry": {"strategy": "constant", "base_delay": 0}}, operation
        ... )
        'ok'
        >>> len(attempts)
        2

        ```
    """

    def __init__(
        self,
        executor: RetryExecutor | None = None,
        decider: RetryDecider | None = None,
        strategy_factory: StrategyFactory | None = None,
        default_retry: Any = None,
        metrics: MetricsSink | None = None,
    ) -> None:
        self.executor = executor if executor is not None else RetryExecutor()
        self.decider = decider if decider is not None else RetryDecider()
        self.strategy_factory = (
            strategy_factory if strategy_factory is not None else StrategyFactory()
        )
        self.default_retry = default_retry
        self.metrics = metrics

    def execute_with_retry(self, step_config: Any, operation: Callable[[], Any]) -> Any:
        """Run an operation under the retry policy of a step.

        When the step opts out of retries, the operation is called exactly
        once, without any handler event, and its failure propagates
        immediately.

        Args:
            step_config: The step configuration, usually a mapping with
                optional ``retry`` and ``idempotent`` keys.
            operation: A callable without arguments.

        Returns:
            The value returned by the operation.

        Raises:
            ConfigurationError: If the retry configuration is invalid. It is
                raised before the operation runs.
            Exception: The error of the last attempt, unchanged.
        """
        if not self.decider.should_retry_step(step_config):
            return operation()

        retry_config = self.resolve_retry_config(step_config)
        strategy = self.strategy_factory.create(retry_config)
        handlers = (
            build_handlers(retry_config.handlers, metrics=self.metrics)
            if retry_config is not None
            else None
        )
        logger.debug(f"Running step operation with {strategy!r}")
        return self.executor.execute(strategy, operation, handlers=handlers)

    def resolve_retry_config(self, step_config: Any) -> RetryConfig | None:
        """Resolve the retry configuration of a step.

        The step's own ``retry`` value takes precedence over
        ``default_retry``. The result is computed fresh on every call.

        Args:
            step_config: The step configuration.

        Returns:
            The retry configuration, or ``None`` if neither the step nor the
            coordinator define one.
        """
        value = step_config.get("retry") if isinstance(step_config, Mapping) else None
        if value is None:
            value = self.default_retry
        if value is None or isinstance(value, RetryConfig):
            return value
        return RetryConfig.from_value(value)
