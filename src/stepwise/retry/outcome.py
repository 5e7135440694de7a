r"""Value objects describing attempts and their final outcome."""

from __future__ import annotations

__all__ = ["Attempt", "ExecutionOutcome"]

from dataclasses import dataclass
from typing import Any


@dataclass
class Attempt:
    """One try of an operation.

    Attributes:
        number: The attempt number (1-indexed). It only ever increases
            within a retry sequence.
        error: The error raised by this attempt, if it failed.
        delay: The delay in seconds waited before the next attempt, if
            the failure was retried.
    """

    number: int
    error: BaseException | None = None
    delay: float | None = None


@dataclass(frozen=True)
class ExecutionOutcome:
    """Terminal outcome of running an operation under a retry policy.

    Exactly one of ``value`` (on success) or ``error`` (on failure) is
    meaningful. There is no partial outcome.

    Attributes:
        value: The value returned by the successful attempt.
        error: The error raised by the last attempt, unchanged.
        attempts: The number of attempts made.

    Example:
        ```pycon
        >>> from stepwise.retry import ExecutionOutcome
        >>> outcome = ExecutionOutcome(value=42, attempts=2)
        >>> outcome.succeeded
        True
        >>> outcome.unwrap()
        42

        ```
    """

    value: Any = None
    error: BaseException | None = None
    attempts: int = 0

    @property
    def succeeded(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the value, or raise the original error.

        Returns:
            The value returned by the operation.

        Raises:
            BaseException: The error of the last attempt, if the outcome is
                a failure.
        """
        if self.error is not None:
            raise self.error
        return self.value
