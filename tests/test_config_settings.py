"""
Tests for mathcustom/config/settings.py and mathcustom/config/logging_setup.py

All tests drive configuration through monkeypatched environment variables;
the autouse fixture in conftest.py clears the settings cache between tests.
"""

import logging

import pytest

from mathcustom.config import logging_setup
from mathcustom.config.logging_setup import configure_logging
from mathcustom.config.settings import (
    LoggingSettings,
    RandomSettings,
    Settings,
    get_settings,
    reset_settings,
)


def test_random_settings_default_has_no_seed():
    """Test that an unset MATHCUSTOM_SEED means OS entropy."""
    assert RandomSettings.from_env().seed is None


def test_random_settings_reads_seed(monkeypatch):
    """Test that MATHCUSTOM_SEED is parsed as an integer."""
    monkeypatch.setenv("MATHCUSTOM_SEED", " 42 ")
    assert RandomSettings.from_env().seed == 42


def test_random_settings_rejects_non_integer(monkeypatch):
    """Test that a non-integer seed fails fast."""
    monkeypatch.setenv("MATHCUSTOM_SEED", "forty-two")

    with pytest.raises(ValueError, match="MATHCUSTOM_SEED must be an integer"):
        RandomSettings.from_env()


def test_random_settings_rejects_negative_seed():
    """Test that numpy-incompatible negative seeds are rejected."""
    with pytest.raises(ValueError, match="non-negative"):
        RandomSettings(seed=-1)


def test_logging_settings_default_and_case(monkeypatch):
    """Test the WARNING default and case-insensitive level names."""
    assert LoggingSettings.from_env().level == "WARNING"

    monkeypatch.setenv("MATHCUSTOM_LOG_LEVEL", "debug")
    settings = LoggingSettings.from_env()
    assert settings.level == "DEBUG"
    assert settings.level_number == logging.DEBUG


def test_logging_settings_rejects_unknown_level():
    """Test that an unknown level name fails fast."""
    with pytest.raises(ValueError, match="MATHCUSTOM_LOG_LEVEL"):
        LoggingSettings(level="LOUD")


def test_get_settings_is_cached(monkeypatch):
    """Test that settings are loaded once until reset_settings is called."""
    monkeypatch.setenv("MATHCUSTOM_SEED", "1")
    first = get_settings()

    monkeypatch.setenv("MATHCUSTOM_SEED", "2")
    assert get_settings() is first
    assert get_settings().random.seed == 1

    reset_settings()
    assert get_settings().random.seed == 2


def test_configure_logging_applies_level_once(monkeypatch):
    """Test that configure_logging sets the level and adds exactly one handler."""
    package_logger = logging.getLogger("mathcustom")
    monkeypatch.setattr(logging_setup, "_handler", None)
    original_level = package_logger.level
    handlers_before = list(package_logger.handlers)

    try:
        settings = Settings(log=LoggingSettings(level="INFO"))
        logger = configure_logging(settings)
        configure_logging(settings)

        assert logger is package_logger
        assert logger.level == logging.INFO
        assert len(logger.handlers) == len(handlers_before) + 1
    finally:
        for handler in list(package_logger.handlers):
            if handler not in handlers_before:
                package_logger.removeHandler(handler)
        package_logger.setLevel(original_level)
