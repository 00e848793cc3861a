"""Fixtures for server integration tests."""

import pytest
from fastapi.testclient import TestClient

from server.server import create_app


@pytest.fixture
def app():
    """Fresh application instance per test."""
    return create_app()


@pytest.fixture
def client(app):
    """Test client with the lifespan running."""
    with TestClient(app) as client:
        yield client
