from __future__ import annotations

import logging

import pytest

from stepwise.exceptions import ConfigurationError
from stepwise.matchers import RateLimitMatcher
from stepwise.retry import RetryConfig
from stepwise.retry.validation import validate_retry_params

#################################
#     Tests for RetryConfig     #
#################################


def test_retry_config_defaults() -> None:
    """Test RetryConfig default values."""
    config = RetryConfig()
    assert config.max_attempts == 3
    assert config.base_delay == 1.0
    assert config.max_delay == 60.0
    assert config.strategy == "exponential"
    assert config.jitter is True
    assert config.multiplier == 2.0
    assert config.increment == 1.0
    assert config.matcher is None
    assert config.handlers == ()


def test_retry_config_increment_defaults_to_base_delay() -> None:
    """Test that the increment defaults to the base delay."""
    assert RetryConfig(base_delay=0.25).increment == 0.25
    assert RetryConfig(base_delay=0.25, increment=2.0).increment == 2.0


def test_retry_config_unknown_strategy(caplog: pytest.LogCaptureFixture) -> None:
    """Test that an unknown strategy falls back to exponential with a
    warning."""
    with caplog.at_level(logging.WARNING):
        config = RetryConfig(strategy="fibonacci")
    assert config.strategy == "exponential"
    assert "Unknown retry strategy 'fibonacci'" in caplog.text


def test_retry_config_is_frozen() -> None:
    """Test that RetryConfig is immutable."""
    config = RetryConfig()
    with pytest.raises(AttributeError):
        config.max_attempts = 5  # type: ignore[misc]


@pytest.mark.parametrize("value", [None, True])
def test_retry_config_from_value_default(value: object) -> None:
    """Test that an absent or ``true`` retry value gives the default
    policy."""
    assert RetryConfig.from_value(value) == RetryConfig()


def test_retry_config_from_value_false() -> None:
    """Test that ``false`` gives the null strategy."""
    assert RetryConfig.from_value(False).strategy == "null"


def test_retry_config_from_value_int() -> None:
    """Test that an integer gives the default policy with that number of
    attempts."""
    config = RetryConfig.from_value(5)
    assert config.max_attempts == 5
    assert config.strategy == "exponential"


def test_retry_config_from_value_mapping() -> None:
    """Test creating a configuration from a mapping."""
    config = RetryConfig.from_value(
        {
            "max_attempts": 4,
            "strategy": "linear",
            "base_delay": 0.5,
            "increment": 0.25,
            "max_delay": 10,
            "matcher": {"type": "rate_limit"},
            "handlers": [{"type": "logging"}],
        }
    )
    assert config.max_attempts == 4
    assert config.strategy == "linear"
    assert config.base_delay == 0.5
    assert config.increment == 0.25
    assert config.max_delay == 10
    assert isinstance(config.matcher, RateLimitMatcher)
    assert config.handlers == ({"type": "logging"},)


def test_retry_config_from_value_single_handler() -> None:
    """Test that a single handler mapping is accepted."""
    config = RetryConfig.from_value({"handlers": {"type": "metrics"}})
    assert config.handlers == ({"type": "metrics"},)


def test_retry_config_from_value_empty_mapping() -> None:
    """Test that an empty mapping gives the default policy."""
    assert RetryConfig.from_value({}) == RetryConfig()


@pytest.mark.parametrize("value", ["3", 1.5, [3]])
def test_retry_config_from_value_invalid_shape(value: object) -> None:
    """Test that unsupported retry values raise ConfigurationError."""
    with pytest.raises(ConfigurationError, match=r"retry configuration must be"):
        RetryConfig.from_value(value)


def test_retry_config_from_value_invalid_field() -> None:
    """Test that invalid fields raise ConfigurationError."""
    with pytest.raises(ConfigurationError, match=r"max_attempts must be an int >= 1"):
        RetryConfig.from_value({"max_attempts": 0})


def test_retry_config_from_value_invalid_matcher() -> None:
    """Test that an invalid matcher raises ConfigurationError."""
    with pytest.raises(ConfigurationError, match=r"Unknown matcher type"):
        RetryConfig.from_value({"matcher": {"type": "unknown"}})


###########################################
#     Tests for validate_retry_params     #
###########################################


def test_validate_retry_params_valid() -> None:
    """Test that valid parameters pass."""
    validate_retry_params(max_attempts=1, base_delay=0, max_delay=0.0, increment=0)


@pytest.mark.parametrize("max_attempts", [0, -1, 2.5, True, "3"])
def test_validate_retry_params_invalid_max_attempts(max_attempts: object) -> None:
    """Test that invalid max_attempts raises ConfigurationError."""
    with pytest.raises(ConfigurationError, match=r"max_attempts must be an int >= 1"):
        validate_retry_params(max_attempts=max_attempts, base_delay=1.0, max_delay=60.0)


@pytest.mark.parametrize("base_delay", [-0.1, "1", None])
def test_validate_retry_params_invalid_base_delay(base_delay: object) -> None:
    """Test that invalid base_delay raises ConfigurationError."""
    with pytest.raises(ConfigurationError, match=r"base_delay must be a number >= 0"):
        validate_retry_params(max_attempts=3, base_delay=base_delay, max_delay=60.0)


def test_validate_retry_params_invalid_max_delay() -> None:
    """Test that negative max_delay raises ConfigurationError."""
    with pytest.raises(ConfigurationError, match=r"max_delay must be a number >= 0"):
        validate_retry_params(max_attempts=3, base_delay=1.0, max_delay=-1.0)


@pytest.mark.parametrize("multiplier", [0, -2.0])
def test_validate_retry_params_invalid_multiplier(multiplier: float) -> None:
    """Test that non-positive multiplier raises ConfigurationError."""
    with pytest.raises(ConfigurationError, match=r"multiplier must be a number > 0"):
        validate_retry_params(max_attempts=3, base_delay=1.0, max_delay=60.0, multiplier=multiplier)


def test_validate_retry_params_invalid_increment() -> None:
    """Test that negative increment raises ConfigurationError."""
    with pytest.raises(ConfigurationError, match=r"increment must be a number >= 0"):
        validate_retry_params(max_attempts=3, base_delay=1.0, max_delay=60.0, increment=-1)
