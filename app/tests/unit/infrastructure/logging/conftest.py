"""Fixtures for infrastructure.logging tests."""

import pytest
import structlog
from unittest.mock import MagicMock


@pytest.fixture
def mock_settings():
    """Mock Settings instance for testing."""
    settings = MagicMock()
    settings.LOG_LEVEL = "INFO"
    settings.is_production = False
    return settings


@pytest.fixture(autouse=True)
def clean_contextvars():
    """Start and end every test with an empty logging context."""
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()
