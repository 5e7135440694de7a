r"""Thread-safe container of step results."""

from __future__ import annotations

__all__ = ["StepOutputs"]

import threading
from typing import Any


class StepOutputs:
    """Mapping of step name to result shared by concurrent workers.

    Every read and write holds a lock, so parallel steps can store their
    results without corrupting each other's entries.

    Example:
        ```pycon
        >>> from stepwise.workflow import StepOutputs
        >>> outputs = StepOutputs()
        >>> outputs.set("lint", "ok")
        >>> outputs["lint"]
        'ok'
        >>> "test" in outputs
        False

        ```
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._data: dict[str, Any] = {}

    def set(self, name: str, value: Any) -> None:
        with self._lock:
            self._data[name] = value

    def get(self, name: str, default: Any = None) -> Any:
        with self._lock:
            return self._data.get(name, default)

    def to_dict(self) -> dict[str, Any]:
        """Return a snapshot copy of the results."""
        with self._lock:
            return dict(self._data)

    def __getitem__(self, name: str) -> Any:
        with self._lock:
            return self._data[name]

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._data

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({self.to_dict()!r})"
