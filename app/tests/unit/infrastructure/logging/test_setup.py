"""Unit tests for infrastructure.logging.setup module.

Tests cover:
- configure_logging function
- get_module_logger function
- Test logging suppression in test environment
"""

import logging

import pytest
import structlog

from infrastructure.logging.formatters import add_app_info
from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
    _is_test_environment,
)


@pytest.mark.unit
class TestIsTestEnvironment:
    """Test suite for _is_test_environment helper."""

    def test_detects_pytest_in_sys_modules(self):
        """Returns True when pytest is in sys.modules."""
        assert _is_test_environment() is True


@pytest.mark.unit
class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_configure_logging_returns_bound_logger(self, mock_settings):
        """configure_logging returns a logger with the usual methods."""
        result = configure_logging(settings=mock_settings)

        assert result is not None
        assert hasattr(result, "info")
        assert hasattr(result, "debug")
        assert hasattr(result, "warning")
        assert hasattr(result, "error")

    def test_configure_logging_accepts_extra_processors(self, mock_settings):
        logger = configure_logging(
            settings=mock_settings,
            extra_processors=[add_app_info("adatari-ip-service", "0.1.0")],
        )

        assert logger is not None

    def test_configure_logging_idempotent(self, mock_settings):
        """Multiple configure_logging calls are safe."""
        logger1 = configure_logging(settings=mock_settings)
        logger2 = configure_logging(settings=mock_settings)

        assert logger1 is not None
        assert logger2 is not None

    def test_configure_logging_suppresses_in_test_env(self, mock_settings):
        """In test environment, root logger level is set high to suppress output."""
        configure_logging(settings=mock_settings)

        root_logger = logging.getLogger()
        assert root_logger.level >= logging.CRITICAL

    def test_logging_methods_dont_raise(self, mock_settings):
        """Logging methods execute without raising exceptions."""
        configure_logging(settings=mock_settings)

        log = structlog.get_logger().bind(component="test")

        log.debug("debug message", extra="data")
        log.info("lookup", ip="8.8.8.8", latency_ms=12, request_id="req-1")
        log.warning("warning message")
        log.error("lookup_failed", error_code="CONNECTION_ERROR")


@pytest.mark.unit
class TestGetModuleLogger:
    """Test suite for get_module_logger function."""

    def test_get_module_logger_returns_logger(self, mock_settings):
        """get_module_logger returns a logger with expected methods."""
        configure_logging(settings=mock_settings)

        logger = get_module_logger()

        assert hasattr(logger, "info")
        assert hasattr(logger, "bind")

    def test_get_module_logger_binds_calling_module(self):
        """Context names the calling module."""
        logger = get_module_logger()

        context = structlog.get_context(logger.bind())
        assert context["module_path"].endswith("test_setup")
        assert context["component"] == "test_setup"
