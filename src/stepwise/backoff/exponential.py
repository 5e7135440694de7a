r"""Exponential backoff strategy."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

import random
from typing import TYPE_CHECKING

from stepwise.backoff.base import (
    DEFAULT_BASE_DELAY,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_DELAY,
    BackoffStrategy,
)

if TYPE_CHECKING:
    from stepwise.matchers.base import ErrorMatcher

# Jitter adds up to this fraction of the (capped) delay
JITTER_RATIO = 0.25


class ExponentialBackoff(BackoffStrategy):
    """Exponential backoff strategy.

    Calculates delay as: base_delay * multiplier ** (attempt - 1), capped
    at max_delay. When jitter is enabled, a random amount in
    ``[0, 0.25 * delay)`` is added after the cap, so a jittered delay can
    exceed ``max_delay`` by up to 25%.

    This is the default strategy.

    Args:
        max_attempts: Total number of attempts, including the first one.
        base_delay: The delay before the first retry in seconds.
        max_delay: The maximum delay in seconds, before jitter.
        multiplier: The growth factor between consecutive delays. Must be > 0.
        jitter: Whether to add random jitter.
        matcher: Matcher classifying errors as retryable.

    Example:
        ```pycon
        >>> from stepwise.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(base_delay=0.5, jitter=False)
        >>> backoff.delay(1)
        0.5
        >>> backoff.delay(2)
        1.0
        >>> backoff.delay(3)
        2.0
        >>> ExponentialBackoff(base_delay=1.0, max_delay=5.0, jitter=False).delay(10)
        5.0

        ```
    """

    def __init__(
        self,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        base_delay: float = DEFAULT_BASE_DELAY,
        max_delay: float = DEFAULT_MAX_DELAY,
        multiplier: float = 2.0,
        jitter: bool = True,
        matcher: ErrorMatcher | None = None,
    ) -> None:
        super().__init__(
            max_attempts=max_attempts, base_delay=base_delay, max_delay=max_delay, matcher=matcher
        )
        if multiplier <= 0:
            msg = f"multiplier must be positive, got {multiplier}"
            raise ValueError(msg)
        self.multiplier = multiplier
        self.jitter = jitter

    def delay(self, attempt: int) -> float:
        try:
            delay = self.base_delay * self.multiplier ** (attempt - 1)
        except OverflowError:
            # Growth factor exceeds the float range, the cap applies
            delay = self.max_delay if self.base_delay > 0 else 0.0
        delay = min(delay, self.max_delay)
        if self.jitter:
            delay += delay * JITTER_RATIO * random.random()  # noqa: S311
        return delay

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(max_attempts={self.max_attempts}, "
            f"base_delay={self.base_delay}, max_delay={self.max_delay}, "
            f"multiplier={self.multiplier}, jitter={self.jitter})"
        )
