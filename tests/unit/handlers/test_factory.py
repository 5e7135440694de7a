from __future__ import annotations

import pytest

from stepwise.exceptions import ConfigurationError
from stepwise.handlers import (
    InstrumentationHandler,
    LoggingHandler,
    MetricsHandler,
    build_handlers,
)
from stepwise.metrics import NullMetrics, RetryMetrics


def test_build_handlers_none() -> None:
    """Test that no configuration gives no handler."""
    assert build_handlers(None) == []
    assert build_handlers([]) == []


def test_build_handlers_all_types() -> None:
    """Test building every supported handler type in order."""
    metrics = RetryMetrics()
    handlers = build_handlers(
        [{"type": "metrics"}, {"type": "logging"}, {"type": "instrumentation", "namespace": "ci"}],
        metrics=metrics,
    )
    assert [type(handler) for handler in handlers] == [
        MetricsHandler,
        LoggingHandler,
        InstrumentationHandler,
    ]
    assert handlers[0].metrics is metrics
    assert handlers[2].namespace == "ci"


def test_build_handlers_instrumentation_default_namespace() -> None:
    """Test the default instrumentation namespace."""
    (handler,) = build_handlers([{"type": "instrumentation"}])
    assert handler.namespace == "stepwise.retry"


def test_build_handlers_metrics_without_sink() -> None:
    """Test that a metrics handler without sink discards records."""
    (handler,) = build_handlers([{"type": "metrics"}])
    assert isinstance(handler.metrics, NullMetrics)


def test_build_handlers_unknown_type() -> None:
    """Test that an unknown handler type raises ConfigurationError."""
    with pytest.raises(ConfigurationError, match=r"Unknown handler type: 'email'"):
        build_handlers([{"type": "email"}])


def test_build_handlers_not_mapping() -> None:
    """Test that a non-mapping handler configuration raises
    ConfigurationError."""
    with pytest.raises(ConfigurationError, match=r"handler configuration must be a mapping"):
        build_handlers(["logging"])
