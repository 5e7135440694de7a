from __future__ import annotations

import pytest

from stepwise.retry import Attempt, ExecutionOutcome


def test_attempt_defaults() -> None:
    """Test Attempt default values."""
    attempt = Attempt(number=1)
    assert attempt.number == 1
    assert attempt.error is None
    assert attempt.delay is None


def test_execution_outcome_success() -> None:
    """Test a successful outcome."""
    outcome = ExecutionOutcome(value="built", attempts=2)
    assert outcome.succeeded
    assert outcome.unwrap() == "built"


def test_execution_outcome_success_none_value() -> None:
    """Test a successful outcome whose value is None."""
    outcome = ExecutionOutcome(attempts=1)
    assert outcome.succeeded
    assert outcome.unwrap() is None


def test_execution_outcome_failure() -> None:
    """Test that unwrapping a failure raises the original error."""
    error = TimeoutError("slow")
    outcome = ExecutionOutcome(error=error, attempts=3)
    assert not outcome.succeeded
    with pytest.raises(TimeoutError, match=r"slow") as exc_info:
        outcome.unwrap()
    assert exc_info.value is error
