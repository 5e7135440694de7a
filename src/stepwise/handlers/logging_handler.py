r"""Handler writing retry lifecycle events to a logger."""

from __future__ import annotations

__all__ = ["LoggingHandler"]

import logging


class LoggingHandler:
    """Handler writing one log line per lifecycle event.

    Terminal failures are logged at ERROR level with the attempt count and
    the error class and message.

    Args:
        logger: The logger to write to. Defaults to this module's logger.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger if logger is not None else logging.getLogger(__name__)

    def before_attempt(self, attempt: int) -> None:
        self.logger.info(f"Starting attempt {attempt}")

    def on_retry(self, error: BaseException, attempt: int) -> None:
        self.logger.warning(
            f"Retrying after attempt {attempt} due to {type(error).__name__}: {error}"
        )

    def on_backoff(self, delay: float, attempt: int) -> None:  # noqa: ARG002
        self.logger.info(f"Waiting {delay:.2f} seconds before retry")

    def on_success(self, attempt: int) -> None:
        if attempt > 1:
            self.logger.info(f"Succeeded after {attempt} attempts")

    def on_failure(self, error: BaseException, attempt: int) -> None:
        self.logger.error(
            f"Failed after {attempt} attempts with {type(error).__name__}: {error}"
        )
