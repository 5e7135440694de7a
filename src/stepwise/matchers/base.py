r"""Abstract base class for error matchers."""

from __future__ import annotations

__all__ = ["ErrorMatcher"]

from abc import ABC, abstractmethod


class ErrorMatcher(ABC):
    """Abstract base class for error matchers.

    An error matcher is a stateless predicate deciding whether an error is
    transient and the failed attempt should be retried. Matchers must not
    raise for well-formed errors: missing fields (for example, an error
    without an HTTP response) make the matcher return ``False``.
    """

    @abstractmethod
    def matches(self, error: BaseException) -> bool:
        """Indicate whether the error is considered retryable.

        Args:
            error: The error raised by the failed attempt.

        Returns:
            ``True`` if the error matches, otherwise ``False``.
        """

    def __or__(self, other: ErrorMatcher) -> ErrorMatcher:
        from stepwise.matchers.composite import CompositeMatcher

        return CompositeMatcher([self, other], operator="any")

    def __and__(self, other: ErrorMatcher) -> ErrorMatcher:
        from stepwise.matchers.composite import CompositeMatcher

        return CompositeMatcher([self, other], operator="all")
