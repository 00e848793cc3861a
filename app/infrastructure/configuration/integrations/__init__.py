"""Integration settings __init__ - exports all integration settings."""

from infrastructure.configuration.integrations.ip_api import IpApiSettings
from infrastructure.configuration.integrations.public_ip import PublicIpSettings

__all__ = [
    "IpApiSettings",
    "PublicIpSettings",
]
