r"""Step descriptors and their classification from raw workflow data.

Workflow files describe steps with plain data. ``parse_step`` turns
that data into immutable descriptors:

- ``"make lint"`` is a ``CommandStep``;
- ``{"lint": "make lint"}`` is a ``NamedStep``, whose result is stored
  under ``lint``;
- ``{"checks": ["make lint", "make test"]}`` is a ``GroupStep`` whose
  steps run in order;
- ``["make lint", "make test"]`` is a ``ParallelStep`` whose steps run
  concurrently;
- ``{"each": ..., "as": ..., "steps": [...]}`` (and ``repeat``, ``if``,
  ``unless``) is a ``ControlStep``, handled by an external collaborator.
"""

from __future__ import annotations

__all__ = [
    "CONTROL_KEYWORDS",
    "CommandStep",
    "ControlStep",
    "GroupStep",
    "NamedStep",
    "ParallelStep",
    "StepDescriptor",
    "parse_step",
]

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from stepwise.exceptions import ConfigurationError

CONTROL_KEYWORDS = ("each", "repeat", "if", "unless")


@dataclass(frozen=True)
class CommandStep:
    """A bare command."""

    command: str


@dataclass(frozen=True)
class NamedStep:
    """A command whose result is stored under a name."""

    name: str
    command: str


@dataclass(frozen=True)
class GroupStep:
    """An ordered sequence of steps nested under a name."""

    name: str
    steps: tuple[Any, ...]


@dataclass(frozen=True)
class ParallelStep:
    """A set of steps executed concurrently. All of them must complete."""

    steps: tuple[Any, ...]


@dataclass(frozen=True)
class ControlStep:
    """An iteration or conditional step (``each``, ``repeat``, ``if``,
    ``unless``)."""

    keyword: str
    body: Mapping[str, Any]


StepDescriptor = Union[CommandStep, NamedStep, GroupStep, ParallelStep, ControlStep]

_DESCRIPTOR_TYPES = (CommandStep, NamedStep, GroupStep, ParallelStep, ControlStep)


def parse_step(raw: Any) -> StepDescriptor:
    """Classify a raw step by its shape.

    Nested steps of groups and parallel sets are kept raw; they are
    classified when they are dispatched.

    Args:
        raw: A string, a mapping, a list, or an already parsed descriptor.

    Returns:
        The step descriptor.

    Raises:
        ConfigurationError: If the step has an unsupported shape.

    Example:
        ```pycon
        >>> from stepwise.workflow import parse_step
        >>> parse_step("make lint")
        CommandStep(command='make lint')
        >>> parse_step({"lint": "make lint"})
        NamedStep(name='lint', command='make lint')
        >>> parse_step(["make lint", "make test"])
        ParallelStep(steps=('make lint', 'make test'))

        ```
    """
    if isinstance(raw, _DESCRIPTOR_TYPES):
        return raw
    if isinstance(raw, str):
        return CommandStep(raw)
    if isinstance(raw, (list, tuple)):
        return ParallelStep(tuple(raw))
    if isinstance(raw, Mapping):
        return _parse_mapping_step(raw)
    msg = f"Unsupported step: {raw!r}"
    raise ConfigurationError(msg)


def _parse_mapping_step(raw: Mapping[str, Any]) -> StepDescriptor:
    if not raw:
        msg = "Empty step mapping"
        raise ConfigurationError(msg)
    key = next(iter(raw))
    if key in CONTROL_KEYWORDS:
        return ControlStep(keyword=key, body=dict(raw))
    if len(raw) != 1:
        msg = f"Step mapping must have a single key, got {list(raw)}"
        raise ConfigurationError(msg)

    value = raw[key]
    if isinstance(value, str):
        return NamedStep(name=str(key), command=value)
    if isinstance(value, (list, tuple)):
        return GroupStep(name=str(key), steps=tuple(value))
    if isinstance(value, Mapping):
        return GroupStep(name=str(key), steps=(value,))
    msg = f"Unsupported value for step {key!r}: {value!r}"
    raise ConfigurationError(msg)
