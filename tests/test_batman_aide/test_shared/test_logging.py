"""Tests for correlation-aware logging."""

import io
import logging

import pytest

from batman_aide.shared.config import ENV_LOG_LEVEL, get_config
from batman_aide.shared.logging import (
    PACKAGE_LOGGER_NAME,
    CorrelationLogger,
    configure_logging,
    get_logger,
)


@pytest.fixture
def package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    saved_level = logger.level
    saved_handlers = list(logger.handlers)
    yield logger
    logger.handlers = saved_handlers
    logger.setLevel(saved_level)


class TestCorrelationLogger:
    """Test CorrelationLogger behavior."""

    def test_component_defaults_to_last_name_segment(self):
        """Test that the component falls back to the module name."""
        logger = get_logger("batman_aide.text.strings")

        assert isinstance(logger, CorrelationLogger)
        assert logger.component == "strings"
        assert logger.correlation_id is None

    def test_extra_carries_correlation_info(self, caplog):
        """Test that records carry component, correlation ID and caller extras."""
        logger = get_logger("batman_aide.test", correlation_id="req-42", component="unit")

        with caplog.at_level(logging.INFO, logger="batman_aide.test"):
            logger.info("hello", extra={"charset": "utf-8"})

        record = caplog.records[-1]
        assert record.message == "hello"
        assert record.component == "unit"
        assert record.correlation_id == "req-42"
        assert record.charset == "utf-8"

    @pytest.mark.parametrize("method, level", [
        ("debug", logging.DEBUG),
        ("info", logging.INFO),
        ("warning", logging.WARNING),
    ])
    def test_levels(self, caplog, method, level):
        """Test that each method logs at its own level."""
        logger = get_logger("batman_aide.test.levels")

        with caplog.at_level(logging.DEBUG, logger="batman_aide.test.levels"):
            getattr(logger, method)("message")

        assert caplog.records[-1].levelno == level

    def test_record_points_at_caller(self, caplog):
        """Test that records report the calling function, not the wrapper."""
        logger = get_logger("batman_aide.test.caller")

        with caplog.at_level(logging.WARNING, logger="batman_aide.test.caller"):
            logger.warning("from the test")

        assert caplog.records[-1].funcName == "test_record_points_at_caller"

    def test_only_emitted_levels_are_exposed(self):
        """Test that levels the library never emits are not offered."""
        logger = get_logger("batman_aide.test")

        assert not hasattr(logger, "error")
        assert not hasattr(logger, "critical")



class TestConfigureLogging:
    """Test package logger configuration."""

    def test_explicit_level_and_handler(self, package_logger):
        """Test configuring an explicit level and handler."""
        stream = io.StringIO()

        configured = configure_logging("debug", handler=logging.StreamHandler(stream))
        get_logger("batman_aide.test.configure").debug("visible")

        assert configured is package_logger
        assert package_logger.level == logging.DEBUG
        assert "visible" in stream.getvalue()

    def test_level_defaults_to_configuration(self, package_logger, monkeypatch):
        """Test that the level defaults to the configured one."""
        monkeypatch.setenv(ENV_LOG_LEVEL, "ERROR")
        get_config.cache_clear()

        configure_logging(handler=logging.StreamHandler(io.StringIO()))

        assert package_logger.level == logging.ERROR

    def test_repeated_calls_do_not_stack_handlers(self, package_logger):
        """Test that reconfiguring replaces the package handler."""
        before = len(package_logger.handlers)

        configure_logging("INFO", handler=logging.StreamHandler(io.StringIO()))
        configure_logging("INFO", handler=logging.StreamHandler(io.StringIO()))

        assert len(package_logger.handlers) == before + 1
