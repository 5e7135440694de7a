r"""Structured logging utilities for machine-readable retry events.

This module provides a JSON log formatter and a helper to log records
with extra structured fields. It is what the instrumentation handler
uses by default to publish retry lifecycle events, so a log aggregator
(ELK, Splunk, CloudWatch Logs) can collect them without any other
integration.

Every record can carry the identifier of the workflow run that produced
it. The run identifier is stored in a context variable, so concurrent
runs in different threads or tasks do not see each other's value.

Example:
    Enable structured logging for stepwise:

    ```python
    import logging
    from stepwise.utils.structured_logging import StructuredFormatter, run_context

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())
    logger = logging.getLogger("stepwise")
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)

    with run_context("nightly-build-42"):
        dispatcher.execute_steps(steps)
    ```
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "clear_run_id",
    "get_run_id",
    "log_structured",
    "run_context",
    "set_run_id",
]

import contextvars
import json
import logging
import time
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Generator

_run_id: contextvars.ContextVar[str | None] = contextvars.ContextVar("run_id", default=None)

# Attributes every LogRecord has; anything else was passed through ``extra``.
_RESERVED_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)


def get_run_id() -> str | None:
    """Get the identifier of the current workflow run.

    Returns:
        The current run identifier, or None if not set.

    Example:
        ```pycon
        >>> from stepwise.utils.structured_logging import get_run_id, set_run_id
        >>> set_run_id("run-123")
        >>> get_run_id()
        'run-123'

        ```
    """
    return _run_id.get()


def set_run_id(run_id: str) -> None:
    """Set the identifier of the current workflow run.

    Args:
        run_id: The run identifier to attach to log records.
    """
    _run_id.set(run_id)


def clear_run_id() -> None:
    """Clear the identifier of the current workflow run."""
    _run_id.set(None)


@contextmanager
def run_context(run_id: str) -> Generator[None, None, None]:
    """Attach a run identifier to all records logged inside the block.

    The previous value is restored on exit, so run contexts can nest.

    Args:
        run_id: The run identifier.

    Example:
        ```pycon
        >>> from stepwise.utils.structured_logging import get_run_id, run_context
        >>> with run_context("run-7"):
        ...     get_run_id()
        ...
        'run-7'

        ```
    """
    token = _run_id.set(run_id)
    try:
        yield
    finally:
        _run_id.reset(token)


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Standard fields in the JSON output:
        - timestamp: ISO 8601 timestamp (UTC, millisecond precision)
        - level: Log level name
        - logger: Logger name
        - message: Log message
        - run_id: Workflow run identifier, when set
        - module, function, line: Origin of the record
        - thread: Thread name

    Fields passed through ``extra`` are copied to the output as-is, or as
    their ``repr`` when they are not JSON serializable.

    Example:
        ```pycon
        >>> import logging
        >>> from io import StringIO
        >>> from stepwise.utils.structured_logging import StructuredFormatter
        >>> stream = StringIO()
        >>> handler = logging.StreamHandler(stream)
        >>> handler.setFormatter(StructuredFormatter())
        >>> logger = logging.getLogger("doctest_structured_formatter")
        >>> logger.addHandler(handler)
        >>> logger.setLevel(logging.INFO)
        >>> logger.info("step done", extra={"step": "lint"})
        >>> '"step": "lint"' in stream.getvalue()
        True

        ```
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as JSON.

        Args:
            record: The log record to format.

        Returns:
            JSON-formatted log string.
        """
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "thread": record.threadName,
        }

        run_id = get_run_id()
        if run_id is not None:
            log_data["run_id"] = run_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and key not in log_data:
                log_data[key] = value

        return json.dumps(log_data, default=repr)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: ARG002
        """Format timestamp as ISO 8601 in UTC.

        Args:
            record: The log record.
            datefmt: Ignored, the output is always ISO 8601.

        Returns:
            ISO 8601 formatted timestamp.
        """
        return (
            time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
            + f".{int(record.msecs):03d}Z"
        )


def log_structured(
    logger: logging.Logger,
    level: int,
    message: str,
    **extra: Any,
) -> None:
    """Log a message with structured data.

    Args:
        logger: Logger to use.
        level: Log level (e.g., logging.INFO).
        message: Log message.
        **extra: Additional structured fields to include in the record.
            Names must not collide with standard ``LogRecord`` attributes.

    Example:
        ```pycon
        >>> import logging
        >>> from stepwise.utils.structured_logging import log_structured
        >>> logger = logging.getLogger("doctest_log_structured")
        >>> log_structured(logger, logging.INFO, "stepwise.retry.retry", attempt=2)

        ```
    """
    logger.log(level, message, extra=extra)
