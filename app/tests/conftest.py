import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `infrastructure.configuration`) works during pytest collection
# regardless of the directory pytest is invoked from.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest

from infrastructure.services.providers import (
    get_ip_api_client,
    get_public_ip_client,
    get_settings,
)


@pytest.fixture(autouse=True)
def reset_providers():
    """Drop cached settings and clients so env overrides apply per test."""
    get_settings.cache_clear()
    get_ip_api_client.cache_clear()
    get_public_ip_client.cache_clear()
    yield
    get_settings.cache_clear()
    get_ip_api_client.cache_clear()
    get_public_ip_client.cache_clear()


@pytest.fixture
def ip_api_payload():
    """Body returned by ip-api.com for 8.8.8.8 with the full field set."""
    return {
        "status": "success",
        "continent": "North America",
        "continentCode": "NA",
        "country": "United States",
        "countryCode": "US",
        "region": "VA",
        "regionName": "Virginia",
        "city": "Ashburn",
        "zip": "20149",
        "lat": 39.03,
        "lon": -77.5,
        "timezone": "America/New_York",
        "isp": "Google LLC",
        "org": "Google Public DNS",
        "as": "AS15169 Google LLC",
        "mobile": False,
        "proxy": False,
        "hosting": True,
        "query": "8.8.8.8",
    }


@pytest.fixture
def public_ip_payload():
    """Body returned by the public IP discovery endpoint."""
    return {
        "ip": "203.0.113.7",
        "hostname": "host-7.example.net",
        "city": "Amsterdam",
        "region": "North Holland",
        "country": "NL",
        "loc": "52.3740,4.8897",
        "org": "AS64500 Example Transit",
        "postal": "1012",
        "timezone": "Europe/Amsterdam",
    }
