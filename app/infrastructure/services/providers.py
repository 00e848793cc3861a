"""
Process-wide providers for settings and upstream clients.

Each provider is cached, so the whole process shares one Settings object
and one HTTP session per upstream. Tests reset them with ``cache_clear()``.
"""

from functools import lru_cache

from infrastructure.clients.ip_api import IpApiClient
from infrastructure.clients.public_ip import PublicIpClient
from infrastructure.configuration import Settings


@lru_cache
def get_settings() -> Settings:
    """
    Load settings from the environment once per process.

    Routes receive it through ``SettingsDep`` so tests can override it:
        @router.get("/metrics")
        def get_metrics(settings: SettingsDep):
            return {"service": settings.server.SERVICE_NAME}
    """
    return Settings()


@lru_cache
def get_ip_api_client() -> IpApiClient:
    return IpApiClient(settings=get_settings())


@lru_cache
def get_public_ip_client() -> PublicIpClient:
    return PublicIpClient(settings=get_settings())
