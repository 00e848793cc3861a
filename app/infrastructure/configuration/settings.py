"""Top-level Settings object aggregating every configuration section."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from infrastructure.configuration.infrastructure import ServerSettings
from infrastructure.configuration.integrations import (
    IpApiSettings,
    PublicIpSettings,
)


class Settings(BaseSettings):
    """Service configuration.

    Sections:
        ip_api: explicit-IP provider (IP_API_*)
        public_ip: self-lookup discovery endpoint (PUBLIC_IP_*)
        server: listener and service identity (HOST, PORT, SERVICE_NAME)

    Environment Variables:
        PREFIX: Environment prefix, empty in production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        base_url = settings.ip_api.IP_API_BASE_URL
        ```
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    ip_api: IpApiSettings
    public_ip: PublicIpSettings
    server: ServerSettings

    @property
    def is_production(self) -> bool:
        """Production runs with an empty PREFIX."""
        return not self.PREFIX

    def __init__(self, **kwargs):
        # Sections not passed explicitly are loaded from the environment
        sections = {
            "ip_api": IpApiSettings,
            "public_ip": PublicIpSettings,
            "server": ServerSettings,
        }
        for name, section_class in sections.items():
            kwargs.setdefault(name, section_class())

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
