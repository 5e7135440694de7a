r"""Retry configuration resolved from a step's ``retry`` setting.

A step's ``retry`` setting can take several shapes in a workflow file:

- absent or ``true``: the default exponential policy;
- ``false``: no retry;
- an integer ``N``: the default exponential policy with ``N`` attempts;
- a mapping with any of the ``RetryConfig`` fields, plus ``matcher`` and
  ``handlers`` sections.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_STRATEGY",
    "STRATEGY_NAMES",
    "RetryConfig",
]

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from stepwise.backoff.base import DEFAULT_BASE_DELAY, DEFAULT_MAX_ATTEMPTS, DEFAULT_MAX_DELAY
from stepwise.exceptions import ConfigurationError
from stepwise.matchers.factory import build_matcher
from stepwise.retry.validation import validate_retry_params

if TYPE_CHECKING:
    from stepwise.matchers.base import ErrorMatcher

logger: logging.Logger = logging.getLogger(__name__)

STRATEGY_NAMES = ("exponential", "linear", "constant", "null")

DEFAULT_STRATEGY = "exponential"


@dataclass(frozen=True)
class RetryConfig:
    """Retry configuration of a step.

    Args:
        max_attempts: Total number of attempts, including the first one.
        base_delay: Base delay in seconds.
        max_delay: Maximum delay in seconds.
        strategy: One of ``STRATEGY_NAMES``.
        jitter: Whether to add random jitter (exponential only).
        multiplier: Growth factor between delays (exponential only).
        increment: Linear increment in seconds (linear only). Defaults to
            ``base_delay``.
        matcher: Optional matcher classifying errors as retryable. The
            strategy uses the default transient matcher when ``None``.
        handlers: Handler configurations for this step.

    Example:
        ```pycon
        >>> from stepwise.retry import RetryConfig
        >>> config = RetryConfig.from_value({"strategy": "linear", "base_delay": 0.5})
        >>> config.strategy, config.max_attempts, config.increment
        ('linear', 3, 0.5)
        >>> RetryConfig.from_value(5).max_attempts
        5

        ```
    """

    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    base_delay: float = DEFAULT_BASE_DELAY
    max_delay: float = DEFAULT_MAX_DELAY
    strategy: str = DEFAULT_STRATEGY
    jitter: bool = True
    multiplier: float = 2.0
    increment: float | None = None
    matcher: ErrorMatcher | None = None
    handlers: tuple[Mapping[str, Any], ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        validate_retry_params(
            max_attempts=self.max_attempts,
            base_delay=self.base_delay,
            max_delay=self.max_delay,
            multiplier=self.multiplier,
            increment=self.increment,
        )
        if self.increment is None:
            object.__setattr__(self, "increment", self.base_delay)
        if self.strategy not in STRATEGY_NAMES:
            logger.warning(
                f"Unknown retry strategy {self.strategy!r}, "
                f"falling back to {DEFAULT_STRATEGY!r}"
            )
            object.__setattr__(self, "strategy", DEFAULT_STRATEGY)

    @classmethod
    def from_value(cls, value: Any) -> RetryConfig:
        """Create a retry configuration from a step's ``retry`` value.

        Args:
            value: ``None``, a bool, an int, or a mapping.

        Returns:
            The resolved configuration.

        Raises:
            ConfigurationError: If the value has an unsupported shape or
                contains invalid fields.
        """
        if value is None or value is True:
            return cls()
        if value is False:
            return cls(strategy="null")
        if isinstance(value, int):
            return cls(max_attempts=value)
        if not isinstance(value, Mapping):
            msg = f"retry configuration must be a bool, an int or a mapping, got {value!r}"
            raise ConfigurationError(msg)

        handlers = value.get("handlers") or ()
        if isinstance(handlers, Mapping):
            handlers = (handlers,)
        return cls(
            max_attempts=value.get("max_attempts", DEFAULT_MAX_ATTEMPTS),
            base_delay=value.get("base_delay", DEFAULT_BASE_DELAY),
            max_delay=value.get("max_delay", DEFAULT_MAX_DELAY),
            strategy=str(value.get("strategy", DEFAULT_STRATEGY)),
            jitter=bool(value.get("jitter", True)),
            multiplier=value.get("multiplier", 2.0),
            increment=value.get("increment"),
            matcher=build_matcher(value.get("matcher")),
            handlers=tuple(handlers),
        )
