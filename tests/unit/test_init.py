r"""Unit tests for package initialization and metadata."""

from __future__ import annotations

import logging

import stepwise


def test_package_version_is_string() -> None:
    """Test that __version__ is a non-empty string."""
    assert isinstance(stepwise.__version__, str)
    assert "." in stepwise.__version__


def test_all_exports_defined() -> None:
    """Test that all items in __all__ are defined in the module."""
    for name in stepwise.__all__:
        assert hasattr(stepwise, name), f"{name} is in __all__ but not defined in module"


def test_package_logger_has_null_handler() -> None:
    """Test that the package logger is silent by default."""
    handlers = logging.getLogger("stepwise").handlers
    assert any(isinstance(handler, logging.NullHandler) for handler in handlers)
