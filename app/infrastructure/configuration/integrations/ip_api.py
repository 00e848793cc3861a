"""ip-api.com integration settings."""

from typing import Optional

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class IpApiSettings(IntegrationSettings):
    """ip-api.com geolocation provider configuration.

    Environment Variables:
        IP_API_BASE_URL: Base URL of the JSON endpoint (default: http://ip-api.com/json)
        IP_API_FIELDS: Field selector passed as the ``fields`` query parameter.
            The default requests the provider's full field set.
        IP_API_TIMEOUT: Request timeout in seconds. Unset means no timeout.

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        base_url = settings.ip_api.IP_API_BASE_URL
        ```
    """

    IP_API_BASE_URL: str = Field(
        default="http://ip-api.com/json", alias="IP_API_BASE_URL"
    )
    IP_API_FIELDS: str = Field(default="66846719", alias="IP_API_FIELDS")
    IP_API_TIMEOUT: Optional[float] = Field(default=None, alias="IP_API_TIMEOUT")
