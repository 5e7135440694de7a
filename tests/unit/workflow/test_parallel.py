from __future__ import annotations

import logging
import threading
import time
from unittest.mock import Mock

import pytest

from stepwise.workflow import ParallelExecutor, StepDispatcher


def _runner(failures: dict[str, Exception] | None = None, calls: list | None = None) -> Mock:
    failures = failures or {}

    def run(command: str) -> str:
        if calls is not None:
            calls.append(command)
        if command in failures:
            raise failures[command]
        return f"{command}: done"

    return Mock(side_effect=run)


def test_parallel_executor_results_in_order() -> None:
    """Test that results are returned in the order of the steps."""
    dispatcher = StepDispatcher(runner=_runner())
    results = ParallelExecutor(dispatcher).execute(["a", "b", "c"])
    assert results == ["a: done", "b: done", "c: done"]


def test_parallel_executor_empty() -> None:
    """Test that no step gives no result."""
    assert ParallelExecutor(StepDispatcher(runner=_runner())).execute([]) == []


def test_parallel_executor_failure_does_not_cancel_siblings() -> None:
    """Test that every step runs when one fails, and its error is
    raised."""
    calls = []
    error = ValueError("step 2 failed")
    dispatcher = StepDispatcher(runner=_runner({"step2": error}, calls))

    with pytest.raises(ValueError, match=r"step 2 failed") as exc_info:
        ParallelExecutor(dispatcher).execute(["step1", "step2", "step3"])

    assert exc_info.value is error
    assert sorted(calls) == ["step1", "step2", "step3"]


def test_parallel_executor_first_error_in_step_order(caplog: pytest.LogCaptureFixture) -> None:
    """Test that the error of the first failing step in step order is
    raised and the others are logged."""
    dispatcher = StepDispatcher(
        runner=_runner({"a": ValueError("a failed"), "c": KeyError("c failed")})
    )
    with caplog.at_level(logging.WARNING), pytest.raises(ValueError, match=r"a failed"):
        ParallelExecutor(dispatcher).execute(["a", "b", "c"])
    assert "also failed with KeyError" in caplog.text


def test_parallel_executor_runs_concurrently() -> None:
    """Test that the steps run at the same time."""
    barrier = threading.Barrier(3, timeout=5)

    def run(command: str) -> str:
        barrier.wait()
        return command

    dispatcher = StepDispatcher(runner=run)
    assert ParallelExecutor(dispatcher).execute(["a", "b", "c"]) == ["a", "b", "c"]


def test_parallel_executor_max_workers() -> None:
    """Test that max_workers caps the number of concurrent steps."""
    lock = threading.Lock()
    running = []
    peak = []

    def run(command: str) -> str:
        with lock:
            running.append(command)
            peak.append(len(running))
        time.sleep(0.01)
        with lock:
            running.remove(command)
        return command

    dispatcher = StepDispatcher(runner=run)
    results = ParallelExecutor(dispatcher, max_workers=2).execute(["a", "b", "c", "d", "e"])
    assert results == ["a", "b", "c", "d", "e"]
    assert max(peak) <= 2


def test_parallel_executor_invalid_max_workers() -> None:
    """Test that max_workers < 1 raises ValueError."""
    with pytest.raises(ValueError, match=r"max_workers must be >= 1"):
        ParallelExecutor(StepDispatcher(runner=_runner()), max_workers=0)


def test_parallel_executor_named_steps_store_outputs() -> None:
    """Test that named parallel steps store their results."""
    dispatcher = StepDispatcher(runner=_runner())
    ParallelExecutor(dispatcher).execute([{"lint": "make lint"}, {"test": "make test"}])
    assert dispatcher.outputs.to_dict() == {
        "lint": "make lint: done",
        "test": "make test: done",
    }


def test_parallel_executor_retries_each_step(mock_sleep: Mock) -> None:
    """Test that each parallel step runs under its own retry policy."""
    attempts: dict[str, int] = {}
    lock = threading.Lock()

    def run(command: str) -> str:
        with lock:
            attempts[command] = attempts.get(command, 0) + 1
            count = attempts[command]
        if command == "flaky" and count < 3:
            raise TimeoutError("slow")
        return command

    dispatcher = StepDispatcher(
        runner=run,
        step_configs={"flaky": {"retry": {"strategy": "constant", "base_delay": 0.0}}},
    )
    assert ParallelExecutor(dispatcher).execute(["flaky", "stable"]) == ["flaky", "stable"]
    assert attempts == {"flaky": 3, "stable": 1}
    assert mock_sleep.call_count == 2
