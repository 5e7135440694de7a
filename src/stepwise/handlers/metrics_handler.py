r"""Handler forwarding retry lifecycle events to a metrics sink."""

from __future__ import annotations

__all__ = ["MetricsHandler"]

import threading
import time
from typing import TYPE_CHECKING

from stepwise.metrics import NullMetrics

if TYPE_CHECKING:
    from stepwise.metrics import MetricsSink


class MetricsHandler:
    """Handler recording attempts, retries, and outcomes in a metrics sink.

    The duration of an operation runs from its first attempt to its
    success or terminal failure, waits included. The start time is kept
    per thread, so a single handler can observe parallel workers.

    Args:
        metrics: The metrics sink. Defaults to ``NullMetrics``.

    Example:
        ```pycon
        >>> from stepwise.handlers import MetricsHandler
        >>> from stepwise.metrics import RetryMetrics
        >>> handler = MetricsHandler(RetryMetrics())
        >>> handler.before_attempt(1)
        >>> handler.on_success(1)
        >>> handler.metrics.successes
        1

        ```
    """

    def __init__(self, metrics: MetricsSink | None = None) -> None:
        self.metrics: MetricsSink = metrics if metrics is not None else NullMetrics()
        self._local = threading.local()

    def before_attempt(self, attempt: int) -> None:
        if attempt == 1 or getattr(self._local, "start_time", None) is None:
            self._local.start_time = time.monotonic()
        self.metrics.record_attempt(attempt)

    def on_retry(self, error: BaseException, attempt: int) -> None:  # noqa: ARG002
        self.metrics.record_retry(attempt)

    def on_success(self, attempt: int) -> None:
        self.metrics.record_success(attempt, self._elapsed())

    def on_failure(self, error: BaseException, attempt: int) -> None:  # noqa: ARG002
        self.metrics.record_failure(attempt, self._elapsed())

    def _elapsed(self) -> float:
        start_time = getattr(self._local, "start_time", None)
        self._local.start_time = None
        if start_time is None:
            return 0.0
        return time.monotonic() - start_time
