r"""Matcher based on the error message."""

from __future__ import annotations

__all__ = ["MessageMatcher"]

import re

from stepwise.matchers.base import ErrorMatcher


class MessageMatcher(ErrorMatcher):
    r"""Matcher for errors whose message contains or matches a pattern.

    A ``str`` pattern is a literal, case-sensitive substring. A compiled
    ``re.Pattern`` is searched anywhere in the message.

    Args:
        pattern: A literal substring or a compiled regular expression.

    Raises:
        TypeError: If ``pattern`` is neither a ``str`` nor a ``re.Pattern``.

    Example:
        ```pycon
        >>> import re
        >>> from stepwise.matchers import MessageMatcher
        >>> MessageMatcher("temporarily unavailable").matches(
        ...     RuntimeError("service temporarily unavailable")
        ... )
        True
        >>> MessageMatcher(re.compile(r"HTTP 5\d\d")).matches(RuntimeError("got HTTP 503"))
        True
        >>> MessageMatcher("timeout").matches(RuntimeError("Timeout"))
        False

        ```
    """

    def __init__(self, pattern: str | re.Pattern[str]) -> None:
        if not isinstance(pattern, (str, re.Pattern)):
            msg = f"pattern must be a str or a compiled regular expression, got {type(pattern)}"
            raise TypeError(msg)
        self.pattern = pattern

    def matches(self, error: BaseException) -> bool:
        message = str(error)
        if isinstance(self.pattern, re.Pattern):
            return self.pattern.search(message) is not None
        return self.pattern in message

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(pattern={self.pattern!r})"
