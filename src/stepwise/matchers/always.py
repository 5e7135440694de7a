r"""Matcher that treats every error as retryable."""

from __future__ import annotations

__all__ = ["AlwaysRetryMatcher"]

from stepwise.matchers.base import ErrorMatcher


class AlwaysRetryMatcher(ErrorMatcher):
    """Matcher that matches every error.

    Useful for environments where every failure should be treated as
    transient, for example a flaky test runner.

    Example:
        ```pycon
        >>> from stepwise.matchers import AlwaysRetryMatcher
        >>> AlwaysRetryMatcher().matches(ValueError("bad input"))
        True

        ```
    """

    def matches(self, error: BaseException) -> bool:  # noqa: ARG002
        return True

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"
