r"""Handler emitting named retry events for external collection."""

from __future__ import annotations

__all__ = ["DEFAULT_NAMESPACE", "InstrumentationHandler"]

import logging
from typing import TYPE_CHECKING, Any

from stepwise.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from collections.abc import Callable

DEFAULT_NAMESPACE = "stepwise.retry"


class InstrumentationHandler:
    """Handler emitting one named event per lifecycle point.

    Events are named ``<namespace>.attempt``, ``<namespace>.retry``,
    ``<namespace>.backoff``, ``<namespace>.success``, and
    ``<namespace>.failure``. Their payload holds ``attempt`` and, where
    relevant, ``error_class``, ``error_message``, and ``delay``.

    By default events are written as structured log records (see
    ``stepwise.utils.structured_logging``), with the event name as message
    and the payload as extra fields. Pass ``emit`` to send them to any
    other collector.

    Args:
        namespace: Prefix of the event names.
        emit: Optional callable receiving ``(event_name, payload)``.
        logger: Logger used by the default emitter.

    Example:
        ```pycon
        >>> from stepwise.handlers import InstrumentationHandler
        >>> events = []
        >>> handler = InstrumentationHandler(emit=lambda name, payload: events.append((name, payload)))
        >>> handler.on_retry(TimeoutError("slow"), 1)
        >>> events
        [('stepwise.retry.retry', {'attempt': 1, 'error_class': 'TimeoutError', 'error_message': 'slow'})]

        ```
    """

    def __init__(
        self,
        namespace: str = DEFAULT_NAMESPACE,
        emit: Callable[[str, dict[str, Any]], None] | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.namespace = namespace
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self._emit = emit if emit is not None else self._log_event

    def before_attempt(self, attempt: int) -> None:
        self._emit(f"{self.namespace}.attempt", {"attempt": attempt})

    def on_retry(self, error: BaseException, attempt: int) -> None:
        self._emit(f"{self.namespace}.retry", self._error_payload(error, attempt))

    def on_backoff(self, delay: float, attempt: int) -> None:
        self._emit(f"{self.namespace}.backoff", {"attempt": attempt, "delay": delay})

    def on_success(self, attempt: int) -> None:
        self._emit(f"{self.namespace}.success", {"attempt": attempt})

    def on_failure(self, error: BaseException, attempt: int) -> None:
        self._emit(f"{self.namespace}.failure", self._error_payload(error, attempt))

    @staticmethod
    def _error_payload(error: BaseException, attempt: int) -> dict[str, Any]:
        return {
            "attempt": attempt,
            "error_class": type(error).__name__,
            "error_message": str(error),
        }

    def _log_event(self, name: str, payload: dict[str, Any]) -> None:
        log_structured(self.logger, logging.INFO, name, event=name, **payload)
