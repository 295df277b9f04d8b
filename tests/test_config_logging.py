"""Tests for config and logging."""

import io
import json
import logging
import os
import sys
from unittest.mock import patch

import pytest

from estate_sim.config import DemoConfig, LoggingConfig, PlatformConfig
from estate_sim.exceptions import ConfigurationError
from estate_sim.logging import JsonFormatter, get_logger, setup_logging

ENV_VARS = ["LOG_LEVEL", "LOG_FORMAT", "SEED", "DEMO_USERS", "DEMO_PROPERTIES", "FAKER_LOCALE"]


def _clean_env() -> dict[str, str]:
    return {k: v for k, v in os.environ.items() if k not in ENV_VARS}


class TestLoggingConfig:
    """Tests for LoggingConfig."""

    def test_default_values(self) -> None:
        config = LoggingConfig()

        assert config.level == "WARNING"
        assert config.format_type == "standard"


class TestDemoConfig:
    """Tests for DemoConfig."""

    def test_default_values(self) -> None:
        config = DemoConfig()

        assert config.num_users == 0
        assert config.num_properties == 0
        assert config.locale == "en_US"
        assert config.enabled is False

    def test_enabled_with_users_only(self) -> None:
        assert DemoConfig(num_users=3).enabled is True

    def test_enabled_with_properties_only(self) -> None:
        assert DemoConfig(num_properties=2).enabled is True


class TestPlatformConfig:
    """Tests for PlatformConfig."""

    def test_default_values(self) -> None:
        config = PlatformConfig()

        assert isinstance(config.logging, LoggingConfig)
        assert isinstance(config.demo, DemoConfig)
        assert config.seed is None

    def test_from_env_default(self) -> None:
        """Test creating config from environment with defaults."""
        with patch.dict(os.environ, _clean_env(), clear=True):
            config = PlatformConfig.from_env()

        assert config.logging.level == "WARNING"
        assert config.logging.format_type == "standard"
        assert config.demo.num_users == 0
        assert config.demo.num_properties == 0
        assert config.seed is None

    def test_from_env_custom(self) -> None:
        """Test creating config from custom environment variables."""
        env = {
            "LOG_LEVEL": "DEBUG",
            "LOG_FORMAT": "JSON",
            "SEED": "12345",
            "DEMO_USERS": "4",
            "DEMO_PROPERTIES": "6",
            "FAKER_LOCALE": "en_GB",
        }
        with patch.dict(os.environ, env):
            config = PlatformConfig.from_env()

        assert config.logging.level == "DEBUG"
        assert config.logging.format_type == "json"
        assert config.seed == 12345
        assert config.demo.num_users == 4
        assert config.demo.num_properties == 6
        assert config.demo.locale == "en_GB"

    def test_from_env_non_integer(self) -> None:
        with patch.dict(os.environ, {"DEMO_USERS": "many"}):
            with pytest.raises(ConfigurationError, match="DEMO_USERS"):
                PlatformConfig.from_env()

    def test_validate_accepts_defaults(self) -> None:
        PlatformConfig().validate()

    def test_validate_unknown_log_format(self) -> None:
        config = PlatformConfig(logging=LoggingConfig(format_type="xml"))

        with pytest.raises(ConfigurationError, match="log format"):
            config.validate()

    def test_validate_negative_counts(self) -> None:
        with pytest.raises(ConfigurationError):
            PlatformConfig(demo=DemoConfig(num_users=-1)).validate()
        with pytest.raises(ConfigurationError):
            PlatformConfig(demo=DemoConfig(num_properties=-1)).validate()


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_default(self) -> None:
        setup_logging()

        assert logging.getLogger("estate_sim").level == logging.WARNING

    def test_setup_logging_debug(self) -> None:
        setup_logging(level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_setup_logging_invalid_level(self) -> None:
        """Test logging with invalid level defaults to WARNING."""
        setup_logging(level="INVALID")

        assert logging.getLogger().level == logging.WARNING

    def test_setup_logging_json_format(self) -> None:
        setup_logging(format_type="json")

        logger = logging.getLogger()
        assert any(isinstance(h.formatter, JsonFormatter) for h in logger.handlers)

    def test_setup_logging_writes_to_stderr(self) -> None:
        """Logs must not mix with the menu on stdout."""
        setup_logging()

        handler = logging.getLogger().handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr

    def test_setup_logging_custom_stream(self) -> None:
        stream = io.StringIO()
        setup_logging(level="INFO", stream=stream)

        get_logger("estate_sim.test").info("Registered buyer alice")

        assert "| INFO     | estate_sim.test | Registered buyer alice" in stream.getvalue()

    def test_setup_logging_replaces_handlers(self) -> None:
        logger = logging.getLogger()
        logger.addHandler(logging.StreamHandler())
        logger.addHandler(logging.StreamHandler())

        setup_logging()

        assert len(logger.handlers) == 1

    def test_external_loggers_quieted(self) -> None:
        setup_logging(level="DEBUG")

        assert logging.getLogger("faker").level == logging.WARNING


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def _record(self, **kwargs) -> logging.LogRecord:
        return logging.LogRecord(
            name="test.logger",
            level=kwargs.get("level", logging.INFO),
            pathname="/path/to/file.py",
            lineno=42,
            msg="Test message",
            args=(),
            exc_info=kwargs.get("exc_info"),
        )

    def test_format_basic(self) -> None:
        data = json.loads(JsonFormatter().format(self._record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "test.logger"
        assert data["message"] == "Test message"
        assert "timestamp" in data

    def test_format_with_exception(self) -> None:
        try:
            raise ValueError("Test error")
        except ValueError:
            exc_info = sys.exc_info()

        data = json.loads(JsonFormatter().format(self._record(level=logging.ERROR, exc_info=exc_info)))

        assert data["level"] == "ERROR"
        assert "ValueError" in data["exception"]

    def test_timestamp_taken_from_record(self) -> None:
        record = self._record()
        record.created = 0.0

        data = json.loads(JsonFormatter().format(record))

        assert data["timestamp"] == "1970-01-01T00:00:00+00:00"


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger(self) -> None:
        logger = get_logger("test.module")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "test.module"

    def test_get_logger_same_instance(self) -> None:
        assert get_logger("test.same") is get_logger("test.same")


class TestPackageInit:
    """Tests for estate_sim __init__.py."""

    def test_version_exported(self) -> None:
        from estate_sim import __version__

        assert isinstance(__version__, str)
