"""Base classes for the settings sections."""

from pydantic_settings import BaseSettings, SettingsConfigDict

# Every section reads the same environment and optional .env file
_SECTION_CONFIG = SettingsConfigDict(
    env_file=".env",
    case_sensitive=True,
    extra="ignore",
)


class IntegrationSettings(BaseSettings):
    """Settings for an upstream provider (URL, timeout, request options)."""

    model_config = _SECTION_CONFIG


class InfrastructureSettings(BaseSettings):
    """Settings for the process itself (listener, service identity)."""

    model_config = _SECTION_CONFIG
