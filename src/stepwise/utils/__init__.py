r"""Utility helpers shared across stepwise modules."""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "clear_run_id",
    "get_header",
    "get_response",
    "get_run_id",
    "get_status_code",
    "log_structured",
    "run_context",
    "set_run_id",
]

from stepwise.utils.response import get_header, get_response, get_status_code
from stepwise.utils.structured_logging import (
    StructuredFormatter,
    clear_run_id,
    get_run_id,
    log_structured,
    run_context,
    set_run_id,
)
