r"""Constant backoff strategy."""

from __future__ import annotations

__all__ = ["ConstantBackoff"]

from stepwise.backoff.base import BackoffStrategy


class ConstantBackoff(BackoffStrategy):
    """Constant/fixed backoff strategy.

    Returns ``base_delay`` for every retry, regardless of the attempt
    number. ``max_delay`` is not applied.

    Example:
        ```pycon
        >>> from stepwise.backoff import ConstantBackoff
        >>> backoff = ConstantBackoff(base_delay=2.5)
        >>> backoff.delay(1)
        2.5
        >>> backoff.delay(10)
        2.5

        ```
    """

    def delay(self, attempt: int) -> float:  # noqa: ARG002
        return self.base_delay
