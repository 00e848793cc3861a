"""Unit tests for infrastructure.logging.formatters module."""

import pytest

from infrastructure.logging.formatters import add_app_info


@pytest.mark.unit
class TestAddAppInfo:
    """Test suite for add_app_info processor factory."""

    def test_add_app_info_adds_name_and_version(self):
        """Processor adds app_name and app_version to event dict."""
        processor = add_app_info("adatari-ip-service", "0.1.0")
        event_dict = {"event": "lookup", "ip": "8.8.8.8"}

        result = processor(None, "info", event_dict)

        assert result["app_name"] == "adatari-ip-service"
        assert result["app_version"] == "0.1.0"
        assert result["event"] == "lookup"
        assert result["ip"] == "8.8.8.8"

    def test_add_app_info_with_unknown_version(self):
        """Default version is 'unknown' if not provided."""
        processor = add_app_info("adatari-ip-service")

        result = processor(None, "info", {"event": "startup"})

        assert result["app_version"] == "unknown"
