r"""Unit tests for ConstantBackoff strategy."""

from __future__ import annotations

import pytest

from stepwise.backoff import ConstantBackoff


@pytest.mark.parametrize("attempt", [1, 2, 3, 10, 100])
def test_constant_backoff_delay_is_base_delay(attempt: int) -> None:
    """Test that the delay is always the base delay."""
    assert ConstantBackoff(base_delay=2.5).delay(attempt) == 2.5


def test_constant_backoff_ignores_max_delay() -> None:
    """Test that max_delay does not cap the constant delay."""
    assert ConstantBackoff(base_delay=5.0, max_delay=1.0).delay(3) == 5.0


def test_constant_backoff_default_values() -> None:
    """Test constant backoff with default values."""
    backoff = ConstantBackoff()
    assert backoff.max_attempts == 3
    assert backoff.base_delay == 1.0
    assert backoff.max_delay == 60.0
    assert backoff.delay(1) == 1.0


def test_constant_backoff_invalid_base_delay() -> None:
    """Test that negative base_delay raises ValueError."""
    with pytest.raises(ValueError, match=r"base_delay must be non-negative"):
        ConstantBackoff(base_delay=-1.0)
