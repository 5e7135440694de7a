r"""Ordered dispatch of retry lifecycle events to handlers.

This module provides the HandlerChain class that invokes the registered
handlers at each point of the retry lifecycle, in registration order.
"""

from __future__ import annotations

__all__ = ["HandlerChain"]

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable


class HandlerChain:
    """Invokes handler hooks in registration order.

    A handler that raises does not prevent the following handlers from
    running and never alters the outcome of the operation: the exception
    is logged and dropped.

    Args:
        handlers: The initial handlers.
        logger: Logger receiving the errors raised by handlers. Defaults
            to this module's logger.

    Example:
        ```pycon
        >>> from stepwise.handlers import HandlerChain
        >>> class Recorder:
        ...     def __init__(self):
        ...         self.events = []
        ...     def on_success(self, attempt):
        ...         self.events.append(("success", attempt))
        ...
        >>> recorder = Recorder()
        >>> chain = HandlerChain([recorder])
        >>> chain.before_attempt(1)  # Recorder has no before_attempt hook
        >>> chain.on_success(1)
        >>> recorder.events
        [('success', 1)]

        ```
    """

    def __init__(
        self, handlers: Iterable[Any] = (), logger: logging.Logger | None = None
    ) -> None:
        self.handlers: list[Any] = list(handlers)
        self.logger = logger if logger is not None else logging.getLogger(__name__)

    def register(self, handler: Any) -> None:
        """Append a handler at the end of the chain.

        Args:
            handler: The handler to register.
        """
        self.handlers.append(handler)

    def extended(self, handlers: Iterable[Any]) -> HandlerChain:
        """Return a new chain with extra handlers after the current ones.

        Args:
            handlers: The handlers to append.

        Returns:
            A new chain. This chain is left unchanged.
        """
        return HandlerChain([*self.handlers, *handlers], logger=self.logger)

    def before_attempt(self, attempt: int) -> None:
        self._dispatch("before_attempt", attempt)

    def on_retry(self, error: BaseException, attempt: int) -> None:
        self._dispatch("on_retry", error, attempt)

    def on_backoff(self, delay: float, attempt: int) -> None:
        self._dispatch("on_backoff", delay, attempt)

    def on_success(self, attempt: int) -> None:
        self._dispatch("on_success", attempt)

    def on_failure(self, error: BaseException, attempt: int) -> None:
        self._dispatch("on_failure", error, attempt)

    def _dispatch(self, hook_name: str, *args: Any) -> None:
        for handler in self.handlers:
            hook = getattr(handler, hook_name, None)
            if hook is None:
                continue
            try:
                hook(*args)
            except Exception:
                self.logger.exception(
                    f"Handler {type(handler).__qualname__}.{hook_name} raised an exception"
                )

    def __len__(self) -> int:
        return len(self.handlers)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(handlers={self.handlers!r})"
