"""Unit tests for wotschain.config module."""

import logging

import pytest

from wotschain.config import (
    ENV_ENFORCE_ONE_TIME,
    ENV_LOG_LEVEL,
    Config,
    KeyConfig,
    LoggingConfig,
)


class TestSections:
    """Test configuration dataclasses."""

    def test_defaults(self):
        """Test default section values."""
        assert KeyConfig().enforce_one_time is True
        assert LoggingConfig().level == "WARNING"


class TestConfig:
    """Test Config manager."""

    def test_default_config(self):
        """Test a default config is valid and enforces one-time use."""
        config = Config()
        assert config.enforce_one_time is True
        assert config.validate() == []

    def test_custom_config_takes_precedence(self):
        """Test custom values override sections."""
        config = Config()
        config.set_custom_config("enforce_one_time", False)
        assert config.get("enforce_one_time") is False
        assert config.enforce_one_time is False

    def test_get_default(self):
        """Test unknown keys return the default."""
        assert Config().get("missing", 7) == 7

    def test_get_from_environment(self, monkeypatch):
        """Test environment variables are preferred when set."""
        monkeypatch.setenv("WOTSCHAIN_TEST_VALUE", "from-env")
        config = Config()
        assert config.get_from_environment("level", "WOTSCHAIN_TEST_VALUE") == "from-env"
        monkeypatch.delenv("WOTSCHAIN_TEST_VALUE")
        assert config.get_from_environment("level", "WOTSCHAIN_TEST_VALUE") == "WARNING"

    def test_from_environment(self, monkeypatch):
        """Test WOTSCHAIN_* variables populate the config."""
        monkeypatch.setenv(ENV_ENFORCE_ONE_TIME, "false")
        monkeypatch.setenv(ENV_LOG_LEVEL, "debug")
        config = Config.from_environment()
        assert config.enforce_one_time is False
        assert config.logging.level == "DEBUG"

    def test_from_environment_rejects_bad_bool(self, monkeypatch):
        """Test unparseable booleans raise ValueError."""
        monkeypatch.setenv(ENV_ENFORCE_ONE_TIME, "maybe")
        with pytest.raises(ValueError):
            Config.from_environment()

    def test_validate_reports_errors(self):
        """Test validation catches bad values."""
        config = Config(logging_config=LoggingConfig(level="LOUD"))
        config.set_custom_config("enforce_one_time", "yes")
        errors = config.validate()
        assert len(errors) == 2

    def test_configure_logging(self):
        """Test the package logger receives the configured level."""
        logger = logging.getLogger("wotschain")
        previous = logger.level
        try:
            Config(logging_config=LoggingConfig(level="debug")).configure_logging()
            assert logger.level == logging.DEBUG
        finally:
            logger.setLevel(previous)

    def test_configure_logging_rejects_unknown_level(self):
        """Test unknown levels raise ValueError."""
        with pytest.raises(ValueError):
            Config(logging_config=LoggingConfig(level="LOUD")).configure_logging()
