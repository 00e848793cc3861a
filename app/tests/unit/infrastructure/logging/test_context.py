"""Unit tests for infrastructure.logging.context module.

Tests cover:
- bind_request_context() context manager
- Context isolation and cleanup
"""

import pytest
import structlog

from infrastructure.logging.context import bind_request_context


def _context():
    return structlog.contextvars.get_contextvars()


@pytest.mark.unit
class TestBindRequestContext:
    """Test suite for bind_request_context context manager."""

    def test_bind_request_context_binds_correlation_id(self):
        with bind_request_context(correlation_id="req-abc-123"):
            assert _context().get("correlation_id") == "req-abc-123"

    def test_bind_request_context_binds_request_fields(self):
        """Request path and method are bound to context."""
        with bind_request_context(
            "req-1", request_path="/lookup", request_method="POST"
        ):
            ctx = _context()
            assert ctx.get("request_path") == "/lookup"
            assert ctx.get("request_method") == "POST"

    def test_bind_request_context_omits_unset_fields(self):
        with bind_request_context("req-1"):
            assert "request_path" not in _context()
            assert "request_method" not in _context()

    def test_bind_request_context_binds_extra_context(self):
        """Extra keyword arguments are bound to context."""
        with bind_request_context("req-1", ip_address="8.8.8.8"):
            assert _context().get("ip_address") == "8.8.8.8"

    def test_bind_request_context_cleans_up_on_exit(self):
        """Bound keys are removed when the block exits."""
        with bind_request_context(correlation_id="req-1", request_path="/lookup"):
            pass

        ctx = _context()
        assert "correlation_id" not in ctx
        assert "request_path" not in ctx

    def test_bind_request_context_cleans_up_on_exception(self):
        """Bound keys are removed even when the block raises."""
        with pytest.raises(RuntimeError):
            with bind_request_context(correlation_id="req-2"):
                raise RuntimeError("upstream exploded")

        assert "correlation_id" not in _context()

    def test_bind_request_context_keeps_unrelated_context(self):
        """Context bound outside the block survives it."""
        structlog.contextvars.bind_contextvars(service="adatari-ip-service")

        with bind_request_context(correlation_id="req-3"):
            pass

        assert _context().get("service") == "adatari-ip-service"
