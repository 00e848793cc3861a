"""Public IP discovery settings."""

from typing import Optional

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class PublicIpSettings(IntegrationSettings):
    """Public IP discovery endpoint used for self-lookups.

    Environment Variables:
        PUBLIC_IP_LOOKUP_URL: Endpoint returning the caller's public address
            as JSON (default: https://ipinfo.io/json)
        PUBLIC_IP_TIMEOUT: Request timeout in seconds. Unset means no timeout.
    """

    PUBLIC_IP_LOOKUP_URL: str = Field(
        default="https://ipinfo.io/json", alias="PUBLIC_IP_LOOKUP_URL"
    )
    PUBLIC_IP_TIMEOUT: Optional[float] = Field(default=None, alias="PUBLIC_IP_TIMEOUT")
