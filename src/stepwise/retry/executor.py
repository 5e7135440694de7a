r"""Attempt loop running an operation under a backoff strategy.

This module provides the RetryExecutor class. Each attempt runs the
operation; a failure is retried after the strategy's delay when the
strategy classifies it as retryable and the attempt budget allows it.
Otherwise the original error propagates unchanged.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import logging
import time
from typing import TYPE_CHECKING, Any

from stepwise.handlers.chain import HandlerChain
from stepwise.retry.outcome import Attempt, ExecutionOutcome

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from stepwise.backoff.base import BackoffStrategy


class RetryExecutor:
    """Runs operations with automatic retries.

    The loop for one operation is:

    1. increment the attempt number and call ``before_attempt``;
    2. run the operation; on success call ``on_success`` and return;
    3. on failure ask ``strategy.should_retry(error, attempt)``;
    4. if retryable call ``on_retry``, compute ``strategy.delay(attempt)``,
       call ``on_backoff``, sleep, and go back to 1;
    5. otherwise call ``on_failure`` and re-raise the original error.

    Only ``Exception`` subclasses are considered; ``KeyboardInterrupt``
    and ``SystemExit`` propagate immediately without any handler event.

    Args:
        handlers: Handlers invoked for every operation run by this
            executor, in order. Can also be a ``HandlerChain``.
        logger: Logger for the executor's own debug messages and for
            errors raised by handlers. Defaults to this module's logger,
            which is silent unless the application configures logging.

    Example:
        ```pycon
        >>> from stepwise.backoff import ConstantBackoff
        >>> from stepwise.retry import RetryExecutor
        >>> calls = []
        >>> def flaky():
        ...     calls.append(1)
        ...     if len(calls) < 3:
        ...         raise TimeoutError("slow")
        ...     return "done"
        ...
        >>> RetryExecutor().execute(ConstantBackoff(base_delay=0.0), flaky)
        'done'
        >>> len(calls)
        3

        ```
    """

    def __init__(
        self,
        handlers: Iterable[Any] | HandlerChain = (),
        logger: logging.Logger | None = None,
    ) -> None:
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self.handlers: HandlerChain = (
            handlers if isinstance(handlers, HandlerChain) else HandlerChain(handlers, self.logger)
        )

    def execute(
        self,
        strategy: BackoffStrategy,
        operation: Callable[[], Any],
        handlers: Iterable[Any] | None = None,
    ) -> Any:
        """Run an operation with retries and return its value.

        Args:
            strategy: The backoff strategy deciding retries and delays.
            operation: A callable without arguments.
            handlers: Extra handlers for this call only, invoked after the
                executor's own handlers.

        Returns:
            The value returned by the successful attempt.

        Raises:
            Exception: The error of the last attempt, unchanged, when the
                error is not retryable or the attempts are exhausted.
        """
        return self.run(strategy, operation, handlers=handlers).unwrap()

    def run(
        self,
        strategy: BackoffStrategy,
        operation: Callable[[], Any],
        handlers: Iterable[Any] | None = None,
    ) -> ExecutionOutcome:
        """Run an operation with retries and return its outcome.

        Same as ``execute`` but the terminal error is returned inside the
        outcome instead of being raised.

        Args:
            strategy: The backoff strategy deciding retries and delays.
            operation: A callable without arguments.
            handlers: Extra handlers for this call only.

        Returns:
            The success or failure outcome.
        """
        chain = self.handlers.extended(handlers) if handlers else self.handlers
        attempt = Attempt(number=0)

        while True:
            attempt = Attempt(number=attempt.number + 1)
            chain.before_attempt(attempt.number)
            try:
                value = operation()
            except Exception as exc:  # noqa: BLE001
                attempt.error = exc
            else:
                chain.on_success(attempt.number)
                return ExecutionOutcome(value=value, attempts=attempt.number)

            error = attempt.error
            if not strategy.should_retry(error, attempt.number):
                self.logger.debug(
                    f"Attempt {attempt.number}/{strategy.max_attempts} failed with "
                    f"{type(error).__name__}, not retrying"
                )
                chain.on_failure(error, attempt.number)
                return ExecutionOutcome(error=error, attempts=attempt.number)

            chain.on_retry(error, attempt.number)
            attempt.delay = strategy.delay(attempt.number)
            chain.on_backoff(attempt.delay, attempt.number)
            self.logger.debug(
                f"Attempt {attempt.number}/{strategy.max_attempts} failed with "
                f"{type(error).__name__}, retrying in {attempt.delay:.2f}s"
            )
            time.sleep(attempt.delay)
