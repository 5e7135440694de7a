r"""Construction of handlers from configuration."""

from __future__ import annotations

__all__ = ["build_handlers"]

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from stepwise.exceptions import ConfigurationError
from stepwise.handlers.instrumentation import DEFAULT_NAMESPACE, InstrumentationHandler
from stepwise.handlers.logging_handler import LoggingHandler
from stepwise.handlers.metrics_handler import MetricsHandler

if TYPE_CHECKING:
    from collections.abc import Iterable

    from stepwise.metrics import MetricsSink


def build_handlers(
    configs: Iterable[Mapping[str, Any]] | None, metrics: MetricsSink | None = None
) -> list[Any]:
    """Build handlers from a list of handler configurations.

    Supported ``type`` values are ``logging``, ``instrumentation`` (with
    an optional ``namespace``), and ``metrics``.

    Args:
        configs: The handler configurations, or ``None``.
        metrics: Metrics sink given to ``metrics`` handlers.

    Returns:
        The handlers, in configuration order.

    Raises:
        ConfigurationError: If a configuration is not a mapping or has an
            unknown type.

    Example:
        ```pycon
        >>> from stepwise.handlers import build_handlers
        >>> handlers = build_handlers([{"type": "logging"}, {"type": "instrumentation"}])
        >>> [type(handler).__name__ for handler in handlers]
        ['LoggingHandler', 'InstrumentationHandler']

        ```
    """
    handlers: list[Any] = []
    for config in configs or ():
        if not isinstance(config, Mapping):
            msg = f"handler configuration must be a mapping, got {config!r}"
            raise ConfigurationError(msg)
        handler_type = config.get("type")
        if handler_type == "logging":
            handlers.append(LoggingHandler())
        elif handler_type == "instrumentation":
            handlers.append(
                InstrumentationHandler(namespace=config.get("namespace") or DEFAULT_NAMESPACE)
            )
        elif handler_type == "metrics":
            handlers.append(MetricsHandler(metrics))
        else:
            msg = f"Unknown handler type: {handler_type!r}"
            raise ConfigurationError(msg)
    return handlers
