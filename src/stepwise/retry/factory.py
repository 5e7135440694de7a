r"""Creation of backoff strategies from retry configuration."""

from __future__ import annotations

__all__ = ["StrategyFactory"]

from typing import Any

from stepwise.backoff.base import BackoffStrategy
from stepwise.backoff.constant import ConstantBackoff
from stepwise.backoff.exponential import ExponentialBackoff
from stepwise.backoff.linear import LinearBackoff
from stepwise.backoff.null import NullBackoff
from stepwise.retry.config import RetryConfig


class StrategyFactory:
    """Create backoff strategies from retry configuration.

    The rules are applied in order:

    1. ``None`` gives a ``NullBackoff``: the operation runs once.
    2. A bare integer ``N`` gives an ``ExponentialBackoff`` with
       ``max_attempts=N``.
    3. A mapping (or a ``RetryConfig``) gives the strategy named by its
       ``strategy`` field; unknown names fall back to exponential.

    Example:
        ```pycon
        >>> from stepwise.retry import StrategyFactory
        >>> factory = StrategyFactory()
        >>> factory.create(5)
        ExponentialBackoff(max_attempts=5, base_delay=1.0, max_delay=60.0, multiplier=2.0, jitter=True)
        >>> factory.create({"strategy": "constant", "base_delay": 0.1})
        ConstantBackoff(max_attempts=3, base_delay=0.1, max_delay=60.0)
        >>> factory.create(None)
        NullBackoff()

        ```
    """

    def create(self, config: Any) -> BackoffStrategy:
        """Create the backoff strategy for a retry configuration.

        Args:
            config: ``None``, a bool, an int, a mapping, or a ``RetryConfig``.

        Returns:
            The backoff strategy.

        Raises:
            ConfigurationError: If the configuration contains invalid fields.
        """
        if config is None:
            return NullBackoff()
        if not isinstance(config, RetryConfig):
            config = RetryConfig.from_value(config)
        return self.from_config(config)

    def from_config(self, config: RetryConfig) -> BackoffStrategy:
        """Create the backoff strategy for a resolved retry configuration.

        Args:
            config: The retry configuration.

        Returns:
            The backoff strategy.
        """
        if config.strategy == "null":
            return NullBackoff()
        if config.strategy == "constant":
            return ConstantBackoff(
                max_attempts=config.max_attempts,
                base_delay=config.base_delay,
                max_delay=config.max_delay,
                matcher=config.matcher,
            )
        if config.strategy == "linear":
            return LinearBackoff(
                max_attempts=config.max_attempts,
                base_delay=config.base_delay,
                max_delay=config.max_delay,
                increment=config.increment,
                matcher=config.matcher,
            )
        return ExponentialBackoff(
            max_attempts=config.max_attempts,
            base_delay=config.base_delay,
            max_delay=config.max_delay,
            multiplier=config.multiplier,
            jitter=config.jitter,
            matcher=config.matcher,
        )
