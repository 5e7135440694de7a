r"""Error matchers deciding whether a failed attempt is retryable.

This package provides composable predicates over errors: by type, by
message, by HTTP status, by rate-limit indicators, and boolean
composition of other matchers.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_TRANSIENT_ERRORS",
    "DEFAULT_TRANSIENT_MESSAGES",
    "RETRYABLE_STATUSES",
    "AlwaysRetryMatcher",
    "CompositeMatcher",
    "ErrorMatcher",
    "HttpStatusMatcher",
    "MessageMatcher",
    "RateLimitMatcher",
    "TypeMatcher",
    "build_matcher",
    "default_transient_matcher",
]

from stepwise.matchers.always import AlwaysRetryMatcher
from stepwise.matchers.base import ErrorMatcher
from stepwise.matchers.composite import CompositeMatcher
from stepwise.matchers.factory import (
    DEFAULT_TRANSIENT_ERRORS,
    DEFAULT_TRANSIENT_MESSAGES,
    build_matcher,
    default_transient_matcher,
)
from stepwise.matchers.http_status import RETRYABLE_STATUSES, HttpStatusMatcher
from stepwise.matchers.message import MessageMatcher
from stepwise.matchers.rate_limit import RateLimitMatcher
from stepwise.matchers.type import TypeMatcher
