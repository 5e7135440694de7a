r"""Routing of step descriptors to their execution path.

This module provides the StepDispatcher class. Commands and named
commands run through the RetryCoordinator, groups run their steps in
order, parallel sets fan out to the ParallelExecutor, and control steps
are delegated to an external handler.
"""

from __future__ import annotations

__all__ = ["StepDispatcher"]

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from stepwise.exceptions import ConfigurationError
from stepwise.retry.coordinator import RetryCoordinator
from stepwise.workflow.outputs import StepOutputs
from stepwise.workflow.parallel import ParallelExecutor
from stepwise.workflow.steps import (
    CommandStep,
    ControlStep,
    GroupStep,
    NamedStep,
    ParallelStep,
    parse_step,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

logger: logging.Logger = logging.getLogger(__name__)


class StepDispatcher:
    """Executes steps according to their shape.

    The configuration of a step is looked up in ``step_configs`` by the
    step name, or by the command text for a bare command. Besides the
    retry settings read by the coordinator, it may define
    ``exit_on_error`` (default true): when false, a terminal failure of
    the step is logged and swallowed instead of aborting the enclosing
    group.

    Args:
        runner: Callable running one command and returning its result.
            This is the opaque, fallible operation retried on failure.
        coordinator: The retry coordinator. Defaults to a
            ``RetryCoordinator`` with default settings.
        step_configs: Mapping of step name (or command) to configuration.
        outputs: Container receiving the results of named steps.
        control_handler: Callable receiving ``(step, dispatcher)`` for
            ``each``, ``repeat``, ``if`` and ``unless`` steps.
        max_workers: Optional cap on concurrent workers of parallel steps.

    Example:
        ```pycon
        >>> from stepwise.workflow import StepDispatcher
        >>> dispatcher = StepDispatcher(runner=lambda command: command.upper())
        >>> dispatcher.execute_steps([{"greet": "hello"}, ["a", "b"]])
        ['HELLO', ['A', 'B']]
        >>> dispatcher.outputs["greet"]
        'HELLO'

        ```
    """

    def __init__(
        self,
        runner: Callable[[str], Any],
        coordinator: RetryCoordinator | None = None,
        step_configs: Mapping[str, Any] | None = None,
        outputs: StepOutputs | None = None,
        control_handler: Callable[[ControlStep, StepDispatcher], Any] | None = None,
        max_workers: int | None = None,
    ) -> None:
        self.runner = runner
        self.coordinator = coordinator if coordinator is not None else RetryCoordinator()
        self.step_configs: Mapping[str, Any] = step_configs if step_configs is not None else {}
        self.outputs = outputs if outputs is not None else StepOutputs()
        self.control_handler = control_handler
        self.parallel_executor = ParallelExecutor(self, max_workers=max_workers)

    def execute_steps(self, steps: Iterable[Any]) -> list[Any]:
        """Execute steps one after the other.

        Args:
            steps: The steps to execute.

        Returns:
            The result of each step.

        Raises:
            Exception: The error of the first step that fails terminally
                with ``exit_on_error`` enabled. Later steps do not run.
        """
        return [self.execute(step) for step in steps]

    def execute(self, step: Any) -> Any:
        """Execute one step.

        Args:
            step: A raw step or a step descriptor.

        Returns:
            The result of the step: the command result for command and
            named steps, the list of results for group and parallel
            steps, and whatever the control handler returns for control
            steps.

        Raises:
            ConfigurationError: If the step has an unsupported shape, or is
                a control step and no control handler is configured.
        """
        step = parse_step(step)
        if isinstance(step, CommandStep):
            return self._execute_command(step.command, key=step.command)
        if isinstance(step, NamedStep):
            return self._execute_named(step)
        if isinstance(step, GroupStep):
            logger.debug(f"Executing group {step.name!r} ({len(step.steps)} steps)")
            return self.execute_steps(step.steps)
        if isinstance(step, ParallelStep):
            return self.parallel_executor.execute(step.steps)
        if self.control_handler is None:
            msg = f"No control handler configured for {step.keyword!r} steps"
            raise ConfigurationError(msg)
        return self.control_handler(step, self)

    def step_config(self, key: str) -> Mapping[str, Any]:
        """Return the configuration of a step, or an empty mapping.

        Args:
            key: The step name, or the command of a bare command step.

        Returns:
            The step configuration.
        """
        config = self.step_configs.get(key)
        return config if isinstance(config, Mapping) else {}

    def _execute_named(self, step: NamedStep) -> Any:
        succeeded, result = self._run_with_policy(step.command, key=step.name)
        if succeeded:
            self.outputs.set(step.name, result)
        return result

    def _execute_command(self, command: str, key: str) -> Any:
        return self._run_with_policy(command, key=key)[1]

    def _run_with_policy(self, command: str, key: str) -> tuple[bool, Any]:
        config = self.step_config(key)
        logger.info(f"Executing: {key}")
        try:
            result = self.coordinator.execute_with_retry(config, lambda: self.runner(command))
        except Exception as exc:
            if config.get("exit_on_error", True):
                raise
            logger.warning(
                f"Step {key!r} failed with {type(exc).__name__}: {exc} "
                f"(exit_on_error is disabled, continuing)"
            )
            return False, None
        return True, result
