r"""Matcher based on the HTTP status of the response attached to an
error."""

from __future__ import annotations

__all__ = ["RETRYABLE_STATUSES", "HttpStatusMatcher"]

from typing import TYPE_CHECKING

from stepwise.matchers.base import ErrorMatcher
from stepwise.utils.response import get_status_code

if TYPE_CHECKING:
    from collections.abc import Iterable

# HTTP status codes that indicate a transient failure
# 408: Request Timeout
# 429: Too Many Requests - Rate limiting
# 500: Internal Server Error - Temporary server issue
# 502: Bad Gateway - Upstream server error
# 503: Service Unavailable - Server overloaded or down
# 504: Gateway Timeout - Upstream server timeout
RETRYABLE_STATUSES = (408, 429, 500, 502, 503, 504)


class HttpStatusMatcher(ErrorMatcher):
    """Matcher for errors carrying an HTTP response with a given status.

    Errors without an attached response never match.

    Args:
        statuses: The HTTP status codes to match.

    Example:
        ```pycon
        >>> import httpx
        >>> from stepwise.matchers import HttpStatusMatcher
        >>> request = httpx.Request("GET", "https://example.com")
        >>> error = httpx.HTTPStatusError(
        ...     "unavailable", request=request, response=httpx.Response(503, request=request)
        ... )
        >>> HttpStatusMatcher().matches(error)
        True
        >>> HttpStatusMatcher(statuses=[429]).matches(error)
        False
        >>> HttpStatusMatcher().matches(ValueError("no response"))
        False

        ```
    """

    def __init__(self, statuses: Iterable[int] = RETRYABLE_STATUSES) -> None:
        self.statuses: frozenset[int] = frozenset(statuses)

    def matches(self, error: BaseException) -> bool:
        status = get_status_code(error)
        return status is not None and status in self.statuses

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(statuses={sorted(self.statuses)})"
