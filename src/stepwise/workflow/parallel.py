r"""Concurrent execution of sibling steps.

This module provides the ParallelExecutor class. Every step runs in its
own worker thread through the same dispatch and retry path as sequential
steps. The executor waits for every worker before looking at the
outcomes: a failing step never cancels its siblings.
"""

from __future__ import annotations

__all__ = ["ParallelExecutor"]

import logging
from concurrent.futures import ThreadPoolExecutor, wait
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable

    from stepwise.workflow.dispatcher import StepDispatcher

logger: logging.Logger = logging.getLogger(__name__)


class ParallelExecutor:
    """Runs steps concurrently and joins them.

    Args:
        dispatcher: The dispatcher executing each step.
        max_workers: Optional maximum number of concurrent workers.
            Defaults to one worker per step.
    """

    def __init__(self, dispatcher: StepDispatcher, max_workers: int | None = None) -> None:
        if max_workers is not None and max_workers < 1:
            msg = f"max_workers must be >= 1, got {max_workers}"
            raise ValueError(msg)
        self.dispatcher = dispatcher
        self.max_workers = max_workers

    def execute(self, steps: Iterable[Any]) -> list[Any]:
        """Execute steps concurrently.

        Args:
            steps: The steps to execute.

        Returns:
            The results of the steps, in the order the steps were given.

        Raises:
            BaseException: The error of the first failing step in the order
                the steps were given, once every step has finished.
        """
        steps = list(steps)
        if not steps:
            return []

        max_workers = self.max_workers or len(steps)
        logger.debug(f"Running {len(steps)} steps in parallel (max_workers={max_workers})")
        with ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="stepwise-parallel"
        ) as pool:
            futures = [pool.submit(self.dispatcher.execute, step) for step in steps]
            wait(futures)

        errors = [
            (step, future.exception())
            for step, future in zip(steps, futures)
            if future.exception() is not None
        ]
        if errors:
            for step, error in errors[1:]:
                logger.warning(
                    f"Parallel step {step!r} also failed with {type(error).__name__}: {error}"
                )
            raise errors[0][1]
        return [future.result() for future in futures]
