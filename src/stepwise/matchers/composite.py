r"""Boolean composition of error matchers."""

from __future__ import annotations

__all__ = ["CompositeMatcher"]

import logging
from typing import TYPE_CHECKING

from stepwise.exceptions import ConfigurationError
from stepwise.matchers.base import ErrorMatcher

if TYPE_CHECKING:
    from collections.abc import Iterable

logger: logging.Logger = logging.getLogger(__name__)

OPERATORS = ("any", "all")


class CompositeMatcher(ErrorMatcher):
    """Matcher combining child matchers with a logical operator.

    With ``operator="any"`` the composite matches when at least one child
    matches (``False`` with no children). With ``operator="all"`` every
    child must match (``True`` with no children). Children are evaluated
    in order and evaluation short-circuits.

    Args:
        matchers: The child matchers.
        operator: ``"any"`` (logical OR) or ``"all"`` (logical AND).

    Raises:
        ConfigurationError: If ``operator`` is unknown.

    Example:
        ```pycon
        >>> from stepwise.matchers import CompositeMatcher, MessageMatcher, TypeMatcher
        >>> matcher = CompositeMatcher(
        ...     [TypeMatcher(RuntimeError), MessageMatcher("busy")], operator="all"
        ... )
        >>> matcher.matches(RuntimeError("server busy"))
        True
        >>> matcher.matches(RuntimeError("disk full"))
        False

        ```
    """

    def __init__(self, matchers: Iterable[ErrorMatcher], operator: str = "any") -> None:
        if operator not in OPERATORS:
            msg = f"Unknown operator: {operator!r} (expected one of {OPERATORS})"
            raise ConfigurationError(msg)
        self.matchers: tuple[ErrorMatcher, ...] = tuple(matchers)
        self.operator = operator
        if not self.matchers:
            logger.warning(
                f"CompositeMatcher created without child matchers; "
                f"operator {operator!r} will always return {operator == 'all'}"
            )

    def matches(self, error: BaseException) -> bool:
        if self.operator == "any":
            return any(matcher.matches(error) for matcher in self.matchers)
        return all(matcher.matches(error) for matcher in self.matchers)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(matchers={list(self.matchers)!r}, "
            f"operator={self.operator!r})"
        )
