r"""Validation of retry configuration values.

Retry configuration comes from workflow files, so invalid values are
reported as ``ConfigurationError`` before any attempt is made.
"""

from __future__ import annotations

__all__ = ["validate_retry_params"]

from stepwise.exceptions import ConfigurationError


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_retry_params(
    max_attempts: object,
    base_delay: object,
    max_delay: object,
    multiplier: object = 2.0,
    increment: object = None,
) -> None:
    """Validate retry parameters.

    Args:
        max_attempts: Total number of attempts. Must be an int >= 1.
        base_delay: Base delay in seconds. Must be a number >= 0.
        max_delay: Maximum delay in seconds. Must be a number >= 0.
        multiplier: Exponential growth factor. Must be a number > 0.
        increment: Optional linear increment in seconds. Must be a number
            >= 0 if provided.

    Raises:
        ConfigurationError: If any parameter is invalid.

    Example:
        ```pycon
        >>> from stepwise.retry.validation import validate_retry_params
        >>> validate_retry_params(max_attempts=3, base_delay=1.0, max_delay=60.0)
        >>> validate_retry_params(max_attempts=0, base_delay=1.0, max_delay=60.0)
        Traceback (most recent call last):
            ...
        stepwise.exceptions.ConfigurationError: max_attempts must be an int >= 1, got 0

        ```
    """
    if not isinstance(max_attempts, int) or isinstance(max_attempts, bool) or max_attempts < 1:
        msg = f"max_attempts must be an int >= 1, got {max_attempts!r}"
        raise ConfigurationError(msg)
    if not _is_number(base_delay) or base_delay < 0:
        msg = f"base_delay must be a number >= 0, got {base_delay!r}"
        raise ConfigurationError(msg)
    if not _is_number(max_delay) or max_delay < 0:
        msg = f"max_delay must be a number >= 0, got {max_delay!r}"
        raise ConfigurationError(msg)
    if not _is_number(multiplier) or multiplier <= 0:
        msg = f"multiplier must be a number > 0, got {multiplier!r}"
        raise ConfigurationError(msg)
    if increment is not None and (not _is_number(increment) or increment < 0):
        msg = f"increment must be a number >= 0, got {increment!r}"
        raise ConfigurationError(msg)
