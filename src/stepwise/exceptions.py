r"""Exception types raised by stepwise.

Errors raised by the operations that stepwise runs are never wrapped:
they propagate to the caller with their original type and message. The
classes below are only raised by stepwise itself, or by operations that
want to explicitly flag an error as transient.
"""

from __future__ import annotations

__all__ = ["ConfigurationError", "RetryableError", "StepwiseError"]


class StepwiseError(Exception):
    """Base class for all stepwise errors."""


class ConfigurationError(StepwiseError):
    """Raised when a retry policy, matcher, or handler is misconfigured.

    Configuration errors are detected when the policy is built, before any
    attempt is made, and are never retried.

    Example:
        ```pycon
        >>> from stepwise.exceptions import ConfigurationError
        >>> raise ConfigurationError("Unknown operator: 'xor'")
        Traceback (most recent call last):
            ...
        stepwise.exceptions.ConfigurationError: Unknown operator: 'xor'

        ```
    """


class RetryableError(StepwiseError):
    """Error raised by an operation to mark a failure as transient.

    ``RetryableError`` is part of the default transient error set, so any
    strategy built without an explicit matcher retries it.

    Args:
        message: A descriptive error message.
        retry_after: Optional number of seconds the remote side asked to
            wait before the next attempt.

    Example:
        ```pycon
        >>> from stepwise.exceptions import RetryableError
        >>> error = RetryableError("backend busy", retry_after=2.0)
        >>> error.retry_after
        2.0

        ```
    """

    def __init__(self, message: str, retry_after: float | None = None) -> None:
        super().__init__(message)
        self.retry_after = retry_after
