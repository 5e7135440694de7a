r"""Linear backoff strategy."""

from __future__ import annotations

__all__ = ["LinearBackoff"]

from typing import TYPE_CHECKING

from stepwise.backoff.base import (
    DEFAULT_BASE_DELAY,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_DELAY,
    BackoffStrategy,
)

if TYPE_CHECKING:
    from stepwise.matchers.base import ErrorMatcher


class LinearBackoff(BackoffStrategy):
    """Linear backoff strategy.

    Calculates delay as: base_delay + increment * (attempt - 1), capped at
    max_delay.

    Args:
        max_attempts: Total number of attempts, including the first one.
        base_delay: The delay before the first retry in seconds.
        max_delay: The maximum delay in seconds.
        increment: The amount added for each further retry. Defaults to
            ``base_delay``.
        matcher: Matcher classifying errors as retryable.

    Example:
        ```pycon
        >>> from stepwise.backoff import LinearBackoff
        >>> backoff = LinearBackoff(base_delay=1.0, increment=0.5)
        >>> backoff.delay(1)
        1.0
        >>> backoff.delay(3)
        2.0
        >>> LinearBackoff(base_delay=2.0, max_delay=5.0).delay(10)
        5.0

        ```
    """

    def __init__(
        self,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        base_delay: float = DEFAULT_BASE_DELAY,
        max_delay: float = DEFAULT_MAX_DELAY,
        increment: float | None = None,
        matcher: ErrorMatcher | None = None,
    ) -> None:
        super().__init__(
            max_attempts=max_attempts, base_delay=base_delay, max_delay=max_delay, matcher=matcher
        )
        if increment is not None and increment < 0:
            msg = f"increment must be non-negative, got {increment}"
            raise ValueError(msg)
        self.increment = increment if increment is not None else base_delay

    def delay(self, attempt: int) -> float:
        return min(self.base_delay + self.increment * (attempt - 1), self.max_delay)
