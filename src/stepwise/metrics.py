r"""Retry metrics sinks.

A metrics sink receives one record per attempt, retry, success, and
failure. ``RetryMetrics`` aggregates them in memory and is safe to share
between concurrent workers; ``NullMetrics`` discards everything so that
metrics collection is optional.

Example:
    ```pycon
    >>> from stepwise.metrics import RetryMetrics
    >>> metrics = RetryMetrics()
    >>> metrics.record_attempt(1)
    >>> metrics.record_retry(1)
    >>> metrics.record_attempt(2)
    >>> metrics.record_success(2, duration=1.5)
    >>> metrics.to_dict()
    {'attempts': 2, 'retries': 1, 'successes': 1, 'failures': 0, 'average_duration': 1.5, 'success_rate': 100.0}

    ```
"""

from __future__ import annotations

__all__ = ["MetricsSink", "NullMetrics", "RetryMetrics"]

import threading
from typing import Any, Protocol


class MetricsSink(Protocol):
    """Interface of the objects receiving retry metrics."""

    def record_attempt(self, attempt: int) -> None: ...

    def record_retry(self, attempt: int) -> None: ...

    def record_success(self, attempt: int, duration: float) -> None: ...

    def record_failure(self, attempt: int, duration: float) -> None: ...


class NullMetrics:
    """Metrics sink that discards every record."""

    def record_attempt(self, attempt: int) -> None:
        pass

    def record_retry(self, attempt: int) -> None:
        pass

    def record_success(self, attempt: int, duration: float) -> None:
        pass

    def record_failure(self, attempt: int, duration: float) -> None:
        pass


class RetryMetrics:
    """In-memory aggregate of retry metrics.

    One instance is owned by a workflow run and must not be shared across
    unrelated runs. All updates are protected by a lock, so parallel
    workers can record into the same instance.

    Attributes:
        attempts: Number of attempts.
        retries: Number of retries.
        successes: Number of operations that eventually succeeded.
        failures: Number of operations that eventually failed.
        durations: Duration in seconds of every finished operation,
            including retries and waits.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.attempts = 0
        self.retries = 0
        self.successes = 0
        self.failures = 0
        self.durations: list[float] = []

    def record_attempt(self, attempt: int) -> None:  # noqa: ARG002
        with self._lock:
            self.attempts += 1

    def record_retry(self, attempt: int) -> None:  # noqa: ARG002
        with self._lock:
            self.retries += 1

    def record_success(self, attempt: int, duration: float) -> None:  # noqa: ARG002
        with self._lock:
            self.successes += 1
            self.durations.append(duration)

    def record_failure(self, attempt: int, duration: float) -> None:  # noqa: ARG002
        with self._lock:
            self.failures += 1
            self.durations.append(duration)

    @property
    def average_duration(self) -> float:
        with self._lock:
            if not self.durations:
                return 0.0
            return sum(self.durations) / len(self.durations)

    @property
    def success_rate(self) -> float:
        """Percentage of finished operations that succeeded."""
        with self._lock:
            total = self.successes + self.failures
            if total == 0:
                return 0.0
            return self.successes / total * 100

    def merge(self, other: RetryMetrics) -> None:
        """Add the records of another aggregate to this one.

        Args:
            other: The aggregate to merge, typically filled by one worker.
        """
        with other._lock:
            attempts, retries = other.attempts, other.retries
            successes, failures = other.successes, other.failures
            durations = list(other.durations)
        with self._lock:
            self.attempts += attempts
            self.retries += retries
            self.successes += successes
            self.failures += failures
            self.durations.extend(durations)

    def to_dict(self) -> dict[str, Any]:
        return {
            "attempts": self.attempts,
            "retries": self.retries,
            "successes": self.successes,
            "failures": self.failures,
            "average_duration": self.average_duration,
            "success_rate": self.success_rate,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({self.to_dict()})"
