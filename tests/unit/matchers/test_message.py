from __future__ import annotations

import re
import warnings
from pathlib import Path

import pytest

from stepwise.matchers import MessageMatcher
from stepwise.matchers import message as message_module


def test_message_matcher_substring() -> None:
    """Test that a string pattern matches as a substring."""
    matcher = MessageMatcher("temporarily unavailable")
    assert matcher.matches(RuntimeError("service temporarily unavailable, try later"))
    assert not matcher.matches(RuntimeError("service unavailable"))


def test_message_matcher_substring_is_case_sensitive() -> None:
    """Test that substring matching is case-sensitive."""
    matcher = MessageMatcher("timeout")
    assert matcher.matches(RuntimeError("connection timeout"))
    assert not matcher.matches(RuntimeError("Connection Timeout"))


def test_message_matcher_substring_is_literal() -> None:
    """Test that a string pattern is not interpreted as a regular
    expression."""
    matcher = MessageMatcher("HTTP 5.*")
    assert not matcher.matches(RuntimeError("HTTP 503"))
    assert matcher.matches(RuntimeError("pattern HTTP 5.* in message"))


def test_message_matcher_regex() -> None:
    """Test that a compiled pattern is searched in the message."""
    matcher = MessageMatcher(re.compile(r"HTTP 5\d\d"))
    assert matcher.matches(RuntimeError("upstream returned HTTP 503"))
    assert not matcher.matches(RuntimeError("upstream returned HTTP 404"))


def test_message_matcher_regex_flags() -> None:
    """Test that regex flags are honored."""
    matcher = MessageMatcher(re.compile(r"timeout", re.IGNORECASE))
    assert matcher.matches(RuntimeError("Connection TIMEOUT"))


def test_message_matcher_empty_message() -> None:
    """Test matching an error without message."""
    assert not MessageMatcher("timeout").matches(RuntimeError())
    assert MessageMatcher("").matches(RuntimeError())


@pytest.mark.parametrize("pattern", [42, None, [r"timeout"]])
def test_message_matcher_invalid_pattern(pattern: object) -> None:
    """Test that a pattern that is neither a str nor a compiled regex
    raises TypeError."""
    with pytest.raises(TypeError, match=r"pattern must be a str or a compiled regular expression"):
        MessageMatcher(pattern)  # type: ignore[arg-type]


def test_message_module_compiles_without_warnings() -> None:
    """Test that the module source, including the regular expression
    examples in its docstrings, has no invalid escape sequences."""
    source = Path(message_module.__file__).read_text(encoding="utf-8")
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        compile(source, message_module.__file__, "exec")
