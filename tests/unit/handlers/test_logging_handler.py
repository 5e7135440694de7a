from __future__ import annotations

import logging

import pytest

from stepwise.handlers import LoggingHandler


@pytest.fixture
def handler() -> LoggingHandler:
    return LoggingHandler(logging.getLogger("test_logging_handler"))


def test_logging_handler_default_logger() -> None:
    """Test that the default logger is the module logger."""
    assert LoggingHandler().logger.name == "stepwise.handlers.logging_handler"


def test_logging_handler_before_attempt(
    handler: LoggingHandler, caplog: pytest.LogCaptureFixture
) -> None:
    """Test the message logged before an attempt."""
    with caplog.at_level(logging.INFO):
        handler.before_attempt(2)
    assert caplog.record_tuples == [("test_logging_handler", logging.INFO, "Starting attempt 2")]


def test_logging_handler_on_retry(
    handler: LoggingHandler, caplog: pytest.LogCaptureFixture
) -> None:
    """Test the warning logged on retry."""
    with caplog.at_level(logging.INFO):
        handler.on_retry(TimeoutError("read timed out"), 1)
    assert caplog.record_tuples == [
        (
            "test_logging_handler",
            logging.WARNING,
            "Retrying after attempt 1 due to TimeoutError: read timed out",
        )
    ]


def test_logging_handler_on_backoff(
    handler: LoggingHandler, caplog: pytest.LogCaptureFixture
) -> None:
    """Test the message logged with the backoff delay."""
    with caplog.at_level(logging.INFO):
        handler.on_backoff(1.5, 1)
    assert caplog.messages == ["Waiting 1.50 seconds before retry"]


def test_logging_handler_on_success_after_retries(
    handler: LoggingHandler, caplog: pytest.LogCaptureFixture
) -> None:
    """Test the message logged on success after retries."""
    with caplog.at_level(logging.INFO):
        handler.on_success(3)
    assert caplog.messages == ["Succeeded after 3 attempts"]


def test_logging_handler_on_success_first_attempt(
    handler: LoggingHandler, caplog: pytest.LogCaptureFixture
) -> None:
    """Test that a first-attempt success is not logged."""
    with caplog.at_level(logging.INFO):
        handler.on_success(1)
    assert caplog.messages == []


def test_logging_handler_on_failure(
    handler: LoggingHandler, caplog: pytest.LogCaptureFixture
) -> None:
    """Test the error logged on terminal failure."""
    with caplog.at_level(logging.INFO):
        handler.on_failure(ValueError("invalid input"), 3)
    assert caplog.record_tuples == [
        (
            "test_logging_handler",
            logging.ERROR,
            "Failed after 3 attempts with ValueError: invalid input",
        )
    ]
