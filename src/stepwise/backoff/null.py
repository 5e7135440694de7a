r"""Strategy that never retries."""

from __future__ import annotations

__all__ = ["NullBackoff"]

from stepwise.backoff.base import BackoffStrategy


class NullBackoff(BackoffStrategy):
    """Strategy that never retries.

    The operation is attempted exactly once and any failure propagates.

    Example:
        ```pycon
        >>> from stepwise.backoff import NullBackoff
        >>> NullBackoff().should_retry(TimeoutError("slow"), attempt=1)
        False

        ```
    """

    def __init__(self) -> None:
        super().__init__(max_attempts=1, base_delay=0.0, max_delay=0.0)

    def should_retry(self, error: BaseException, attempt: int) -> bool:  # noqa: ARG002
        return False

    def delay(self, attempt: int) -> float:  # noqa: ARG002
        return 0.0

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"
