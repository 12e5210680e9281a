"""Unit tests for the loguru logger wrapper."""

import pytest

from core.config import Settings
from core.dependencies import build_logger
from pkg.logger.constant import LogLevel
from pkg.logger.logger import ILogger, Logger, LoggerConfig


class TestLoggerConfig:
    """Tests for logger configuration."""

    def test_level_from_string(self):
        assert LoggerConfig(level="debug").level is LogLevel.DEBUG

    def test_invalid_level(self):
        with pytest.raises(ValueError, match="Invalid log level"):
            LoggerConfig(level="verbose")


class TestLogger:
    """Tests for console output and trace context."""

    def test_writes_service_and_trace_id(self, capsys):
        logger = Logger(LoggerConfig(level="DEBUG", colorize=False, service_name="codec-test"))
        with logger.trace_context(trace_id="req_123"):
            assert logger.get_trace_id() == "req_123"
            logger.info("decompressing payload")
        assert logger.get_trace_id() is None

        out = capsys.readouterr().out
        assert "decompressing payload" in out
        assert "codec-test" in out
        assert "req_123" in out

    def test_level_filter(self, capsys):
        logger = Logger(LoggerConfig(level="ERROR", colorize=False))
        logger.info("hidden")
        logger.error("shown")
        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "shown" in out

    def test_protocol(self):
        assert isinstance(Logger(LoggerConfig(enable_console=False)), ILogger)

    def test_debug_flag_wins(self):
        logger = build_logger(Settings(debug=True, log_level="ERROR"))
        assert logger.config.level is LogLevel.DEBUG
