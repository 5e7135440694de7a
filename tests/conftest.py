from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import httpx
import pytest

if TYPE_CHECKING:
    from collections.abc import Callable, Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def make_status_error() -> Callable[..., httpx.HTTPStatusError]:
    """Create httpx.HTTPStatusError instances with a given status and
    headers."""

    def _make(status_code: int, headers: dict[str, str] | None = None) -> httpx.HTTPStatusError:
        request = httpx.Request("GET", "https://api.example.com/data")
        response = httpx.Response(status_code, headers=headers, request=request)
        return httpx.HTTPStatusError(
            f"HTTP {status_code}", request=request, response=response
        )

    return _make


class RecordingHandler:
    """Handler recording every lifecycle event it receives."""

    def __init__(self) -> None:
        self.events: list[tuple] = []

    def before_attempt(self, attempt: int) -> None:
        self.events.append(("before_attempt", attempt))

    def on_retry(self, error: BaseException, attempt: int) -> None:
        self.events.append(("on_retry", error, attempt))

    def on_backoff(self, delay: float, attempt: int) -> None:
        self.events.append(("on_backoff", delay, attempt))

    def on_success(self, attempt: int) -> None:
        self.events.append(("on_success", attempt))

    def on_failure(self, error: BaseException, attempt: int) -> None:
        self.events.append(("on_failure", error, attempt))

    def named(self, name: str) -> list[tuple]:
        return [event for event in self.events if event[0] == name]


@pytest.fixture
def recording_handler() -> RecordingHandler:
    """Create a handler recording lifecycle events."""
    return RecordingHandler()


@pytest.fixture
def make_flaky() -> Callable[..., Mock]:
    """Create an operation failing ``failures`` times before returning
    ``value``."""

    def _make(
        failures: int, error: Exception | None = None, value: object = "success"
    ) -> Mock:
        error = error if error is not None else TimeoutError("timed out")
        return Mock(side_effect=[error] * failures + [value])

    return _make
