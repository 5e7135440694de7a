r"""Abstract base class for backoff strategies."""

from __future__ import annotations

__all__ = [
    "DEFAULT_BASE_DELAY",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_MAX_DELAY",
    "BackoffStrategy",
]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from stepwise.matchers.factory import default_transient_matcher

if TYPE_CHECKING:
    from stepwise.matchers.base import ErrorMatcher

# Total number of attempts, including the first one
DEFAULT_MAX_ATTEMPTS = 3

# Delay in seconds before the first retry
DEFAULT_BASE_DELAY = 1.0

# Upper bound in seconds of the computed delay (before jitter)
DEFAULT_MAX_DELAY = 60.0


class BackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy decides whether a failed attempt should be retried
    and how long to wait before the next attempt. The retry decision
    combines the strategy's error matcher with its attempt budget.

    Args:
        max_attempts: Total number of attempts, including the first one.
            Must be >= 1.
        base_delay: Base delay in seconds. Must be >= 0.
        max_delay: Maximum delay in seconds. Must be >= 0.
        matcher: Matcher classifying errors as retryable. Defaults to the
            matcher for transient errors.

    Raises:
        ValueError: If any numeric parameter is out of range.
    """

    def __init__(
        self,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        base_delay: float = DEFAULT_BASE_DELAY,
        max_delay: float = DEFAULT_MAX_DELAY,
        matcher: ErrorMatcher | None = None,
    ) -> None:
        if max_attempts < 1:
            msg = f"max_attempts must be >= 1, got {max_attempts}"
            raise ValueError(msg)
        if base_delay < 0:
            msg = f"base_delay must be non-negative, got {base_delay}"
            raise ValueError(msg)
        if max_delay < 0:
            msg = f"max_delay must be non-negative, got {max_delay}"
            raise ValueError(msg)

        self.max_attempts = max_attempts
        self.base_delay = base_delay
        self.max_delay = max_delay
        self.matcher: ErrorMatcher = (
            matcher if matcher is not None else default_transient_matcher()
        )

    def should_retry(self, error: BaseException, attempt: int) -> bool:
        """Indicate whether a failed attempt should be retried.

        Args:
            error: The error raised by the failed attempt.
            attempt: The number of the failed attempt (1-indexed).

        Returns:
            ``True`` if the error is retryable and the attempt budget is
            not exhausted.
        """
        return attempt < self.max_attempts and self.matcher.matches(error)

    @abstractmethod
    def delay(self, attempt: int) -> float:
        """Calculate the delay before the attempt following ``attempt``.

        Args:
            attempt: The number of the failed attempt (1-indexed). For
                example, attempt=1 gives the delay before the first retry.

        Returns:
            The delay in seconds.
        """

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(max_attempts={self.max_attempts}, "
            f"base_delay={self.base_delay}, max_delay={self.max_delay})"
        )
