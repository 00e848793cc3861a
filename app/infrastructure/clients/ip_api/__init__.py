"""ip-api.com client for infrastructure layer.

Public API (Package Level):
- IpApiClient: Client for explicit-IP geolocation lookups

Note: Application code should import from infrastructure.services, not directly from this package.

Developer Usage (Recommended):
    from infrastructure.services import get_ip_api_client

    result = get_ip_api_client().lookup(ip_address="8.8.8.8")
    if result.is_success:
        return result.data
"""

from infrastructure.clients.ip_api.client import IpApiClient

__all__ = [
    "IpApiClient",
]
