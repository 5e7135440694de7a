r"""Construction of error matchers from configuration.

This module provides the default matcher used by every backoff strategy
that is not given one explicitly, and ``build_matcher`` to create matchers
from the ``matcher`` section of a step's retry configuration.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_TRANSIENT_ERRORS",
    "DEFAULT_TRANSIENT_MESSAGES",
    "build_matcher",
    "default_transient_matcher",
    "resolve_error_type",
]

import builtins
import importlib
import re
from collections.abc import Mapping
from typing import Any

import httpx

from stepwise.exceptions import ConfigurationError, RetryableError
from stepwise.matchers.always import AlwaysRetryMatcher
from stepwise.matchers.base import ErrorMatcher
from stepwise.matchers.composite import CompositeMatcher
from stepwise.matchers.http_status import RETRYABLE_STATUSES, HttpStatusMatcher
from stepwise.matchers.message import MessageMatcher
from stepwise.matchers.rate_limit import RateLimitMatcher
from stepwise.matchers.type import TypeMatcher

DEFAULT_TRANSIENT_ERRORS: tuple[type[BaseException], ...] = (
    TimeoutError,
    httpx.TimeoutException,
    httpx.NetworkError,
    RetryableError,
)

DEFAULT_TRANSIENT_MESSAGES: tuple[str, ...] = (
    "rate limit",
    "temporarily unavailable",
    "server error",
)


def default_transient_matcher() -> CompositeMatcher:
    """Create the matcher for errors that are transient by default.

    An error is transient if it is a timeout, a network error, a
    ``RetryableError``, or if its message mentions rate limiting, a
    temporarily unavailable service, or a server error.

    Returns:
        A composite matcher over the default transient types and messages.

    Example:
        ```pycon
        >>> from stepwise.matchers import default_transient_matcher
        >>> matcher = default_transient_matcher()
        >>> matcher.matches(TimeoutError("read timed out"))
        True
        >>> matcher.matches(RuntimeError("internal server error"))
        True
        >>> matcher.matches(ValueError("invalid input"))
        False

        ```
    """
    return CompositeMatcher(
        [
            TypeMatcher(DEFAULT_TRANSIENT_ERRORS),
            *(MessageMatcher(message) for message in DEFAULT_TRANSIENT_MESSAGES),
        ],
        operator="any",
    )


def resolve_error_type(name: str) -> type[BaseException]:
    """Resolve an exception type from its name.

    Bare names are looked up in ``builtins``; dotted names are imported,
    e.g. ``"httpx.ReadTimeout"``.

    Args:
        name: The exception type name.

    Returns:
        The exception type.

    Raises:
        ConfigurationError: If the name cannot be resolved to an exception type.

    Example:
        ```pycon
        >>> from stepwise.matchers.factory import resolve_error_type
        >>> resolve_error_type("TimeoutError")
        <class 'TimeoutError'>
        >>> resolve_error_type("httpx.ReadTimeout")
        <class 'httpx.ReadTimeout'>

        ```
    """
    module_name, _, attr = name.rpartition(".")
    try:
        if module_name:
            error_type = getattr(importlib.import_module(module_name), attr)
        else:
            error_type = getattr(builtins, attr)
    except (ImportError, AttributeError) as exc:
        msg = f"Cannot resolve error type {name!r}"
        raise ConfigurationError(msg) from exc
    if not (isinstance(error_type, type) and issubclass(error_type, BaseException)):
        msg = f"{name!r} is not an exception type"
        raise ConfigurationError(msg)
    return error_type


def build_matcher(config: Mapping[str, Any] | None) -> ErrorMatcher | None:
    """Build an error matcher from its configuration.

    Supported ``type`` values:

    - ``error_type``: ``errors`` is a list of exception type names.
    - ``error_message``: ``pattern`` is a substring, or a regular
      expression when ``regex`` is true.
    - ``http_status``: optional ``statuses`` list of integer status codes.
    - ``rate_limit``
    - ``always``
    - ``composite``: ``matchers`` is a non-empty list of nested matcher
      configurations, ``operator`` is ``any`` (default) or ``all``.

    Args:
        config: The matcher configuration, or ``None``.

    Returns:
        The matcher, or ``None`` if ``config`` is ``None``.

    Raises:
        ConfigurationError: If the configuration is invalid.

    Example:
        ```pycon
        >>> from stepwise.matchers import build_matcher
        >>> matcher = build_matcher(
        ...     {
        ...         "type": "composite",
        ...         "operator": "any",
        ...         "matchers": [
        ...             {"type": "error_type", "errors": ["TimeoutError"]},
        ...             {"type": "rate_limit"},
        ...         ],
        ...     }
        ... )
        >>> matcher.matches(RuntimeError("too many requests"))
        True

        ```
    """
    if config is None:
        return None
    if not isinstance(config, Mapping):
        msg = f"matcher configuration must be a mapping, got {type(config).__name__}"
        raise ConfigurationError(msg)

    matcher_type = config.get("type")
    if matcher_type == "error_type":
        errors = config.get("errors") or []
        if isinstance(errors, str):
            errors = [errors]
        if not errors:
            msg = "error_type matcher requires a non-empty 'errors' list"
            raise ConfigurationError(msg)
        return TypeMatcher([resolve_error_type(name) for name in errors])
    if matcher_type == "error_message":
        pattern = config.get("pattern")
        if not isinstance(pattern, str):
            msg = f"error_message matcher requires a string 'pattern', got {pattern!r}"
            raise ConfigurationError(msg)
        if config.get("regex", False):
            try:
                return MessageMatcher(re.compile(pattern))
            except re.error as exc:
                msg = f"Invalid regular expression {pattern!r}: {exc}"
                raise ConfigurationError(msg) from exc
        return MessageMatcher(pattern)
    if matcher_type == "http_status":
        statuses = config.get("statuses") or RETRYABLE_STATUSES
        if isinstance(statuses, int):
            statuses = [statuses]
        if not isinstance(statuses, (list, tuple, set, frozenset)):
            msg = f"http_status matcher requires a list of 'statuses', got {statuses!r}"
            raise ConfigurationError(msg)
        for status in statuses:
            if not isinstance(status, int) or isinstance(status, bool):
                msg = f"http_status matcher requires integer 'statuses', got {status!r}"
                raise ConfigurationError(msg)
        return HttpStatusMatcher(statuses)
    if matcher_type == "rate_limit":
        return RateLimitMatcher()
    if matcher_type == "always":
        return AlwaysRetryMatcher()
    if matcher_type == "composite":
        children = config.get("matchers") or []
        if not children:
            msg = "composite matcher requires a non-empty 'matchers' list"
            raise ConfigurationError(msg)
        return CompositeMatcher(
            [build_matcher(child) for child in children],
            operator=str(config.get("operator", "any")),
        )

    msg = f"Unknown matcher type: {matcher_type!r}"
    raise ConfigurationError(msg)
