r"""Step dispatch: sequential, grouped, and parallel execution of steps."""

from __future__ import annotations

__all__ = [
    "CONTROL_KEYWORDS",
    "CommandStep",
    "ControlStep",
    "GroupStep",
    "NamedStep",
    "ParallelExecutor",
    "ParallelStep",
    "StepDescriptor",
    "StepDispatcher",
    "StepOutputs",
    "parse_step",
]

from stepwise.workflow.dispatcher import StepDispatcher
from stepwise.workflow.outputs import StepOutputs
from stepwise.workflow.parallel import ParallelExecutor
from stepwise.workflow.steps import (
    CONTROL_KEYWORDS,
    CommandStep,
    ControlStep,
    GroupStep,
    NamedStep,
    ParallelStep,
    StepDescriptor,
    parse_step,
)
