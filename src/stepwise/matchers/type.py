r"""Matcher based on the error type."""

from __future__ import annotations

__all__ = ["TypeMatcher"]

from typing import TYPE_CHECKING

from stepwise.matchers.base import ErrorMatcher

if TYPE_CHECKING:
    from collections.abc import Iterable


class TypeMatcher(ErrorMatcher):
    """Matcher for errors of given types, including their subclasses.

    Args:
        types: An exception type or an iterable of exception types.

    Raises:
        TypeError: If any entry is not an exception type.

    Example:
        ```pycon
        >>> from stepwise.matchers import TypeMatcher
        >>> matcher = TypeMatcher([TimeoutError, ConnectionError])
        >>> matcher.matches(TimeoutError("slow"))
        True
        >>> matcher.matches(ConnectionResetError("reset"))
        True
        >>> matcher.matches(ValueError("bad"))
        False

        ```
    """

    def __init__(
        self, types: type[BaseException] | Iterable[type[BaseException]]
    ) -> None:
        if isinstance(types, type):
            types = (types,)
        self.types: tuple[type[BaseException], ...] = tuple(types)
        for error_type in self.types:
            if not (isinstance(error_type, type) and issubclass(error_type, BaseException)):
                msg = f"types must only contain exception types, got {error_type!r}"
                raise TypeError(msg)

    def matches(self, error: BaseException) -> bool:
        return isinstance(error, self.types)

    def __repr__(self) -> str:
        names = ", ".join(t.__qualname__ for t in self.types)
        return f"{self.__class__.__qualname__}(types=({names}))"
