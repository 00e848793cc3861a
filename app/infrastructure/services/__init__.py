"""Providers and dependency aliases shared by routes and the service layer."""

from infrastructure.services.dependencies import SettingsDep
from infrastructure.services.providers import (
    get_ip_api_client,
    get_public_ip_client,
    get_settings,
)

__all__ = [
    "SettingsDep",
    "get_settings",
    "get_ip_api_client",
    "get_public_ip_client",
]
