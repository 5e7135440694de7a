r"""Interface of retry lifecycle handlers.

A handler is any object implementing some of the hooks below. The
executor looks the hooks up by name, so a handler only needs to define
the ones it cares about and does not have to inherit from anything.

Hooks are called in this order for an operation that fails once and then
succeeds::

    before_attempt(1) -> on_retry(error, 1) -> on_backoff(delay, 1)
    -> before_attempt(2) -> on_success(2)

Handlers observe; they cannot change the outcome. An exception raised by
a hook is logged and ignored.
"""

from __future__ import annotations

__all__ = ["HOOK_NAMES", "RetryHandler"]

from typing import Protocol

HOOK_NAMES = ("before_attempt", "on_retry", "on_backoff", "on_success", "on_failure")


class RetryHandler(Protocol):
    """Full set of retry lifecycle hooks.

    Every hook is optional for an actual handler.
    """

    def before_attempt(self, attempt: int) -> None:
        """Called before each attempt (1-indexed)."""

    def on_retry(self, error: BaseException, attempt: int) -> None:
        """Called when a failed attempt is going to be retried."""

    def on_backoff(self, delay: float, attempt: int) -> None:
        """Called with the computed delay, before waiting."""

    def on_success(self, attempt: int) -> None:
        """Called when an attempt succeeds."""

    def on_failure(self, error: BaseException, attempt: int) -> None:
        """Called when the last attempt fails and the error propagates."""
