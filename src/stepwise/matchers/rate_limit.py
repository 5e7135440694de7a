r"""Matcher for rate limiting errors."""

from __future__ import annotations

__all__ = ["RATE_LIMIT_KEYWORDS", "RateLimitMatcher"]

from stepwise.matchers.base import ErrorMatcher
from stepwise.utils.response import get_header, get_response, get_status_code

RATE_LIMIT_KEYWORDS = ("rate limit", "too many requests", "quota exceeded")


class RateLimitMatcher(ErrorMatcher):
    """Matcher for errors that indicate rate limiting.

    The checks run in this order and stop at the first hit:

    1. the attached response has status 429;
    2. the ``x-ratelimit-remaining`` response header is ``"0"``;
    3. a ``retry-after`` response header is present;
    4. the error message contains one of ``RATE_LIMIT_KEYWORDS``,
       case-insensitively.

    Example:
        ```pycon
        >>> from stepwise.matchers import RateLimitMatcher
        >>> RateLimitMatcher().matches(RuntimeError("Rate Limit exceeded for key"))
        True
        >>> RateLimitMatcher().matches(RuntimeError("disk full"))
        False

        ```
    """

    def matches(self, error: BaseException) -> bool:
        if get_response(error) is not None:
            if get_status_code(error) == 429:
                return True
            if get_header(error, "x-ratelimit-remaining") == "0":
                return True
            if get_header(error, "retry-after") is not None:
                return True

        message = str(error).lower()
        return any(keyword in message for keyword in RATE_LIMIT_KEYWORDS)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"
