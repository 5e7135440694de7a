r"""Observers of the retry lifecycle.

Handlers are invoked before each attempt, on each retry, with each
backoff delay, on success, and on terminal failure. They are meant for
logging, metrics, and tracing, and never influence the outcome.
"""

from __future__ import annotations

__all__ = [
    "HOOK_NAMES",
    "HandlerChain",
    "InstrumentationHandler",
    "LoggingHandler",
    "MetricsHandler",
    "RetryHandler",
    "build_handlers",
]

from stepwise.handlers.base import HOOK_NAMES, RetryHandler
from stepwise.handlers.chain import HandlerChain
from stepwise.handlers.factory import build_handlers
from stepwise.handlers.instrumentation import InstrumentationHandler
from stepwise.handlers.logging_handler import LoggingHandler
from stepwise.handlers.metrics_handler import MetricsHandler
