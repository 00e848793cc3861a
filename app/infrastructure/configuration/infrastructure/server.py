"""Server infrastructure settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class ServerSettings(InfrastructureSettings):
    """Server and application runtime configuration.

    Environment Variables:
        HOST: Interface the HTTP listener binds to (default: 0.0.0.0)
        PORT: TCP port the HTTP listener binds to (default: 8080)
        SERVICE_NAME: Name reported by the metrics endpoint

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        host = settings.server.HOST
        port = settings.server.PORT
        ```
    """

    HOST: str = Field(default="0.0.0.0", alias="HOST")
    PORT: int = Field(default=8080, alias="PORT")
    SERVICE_NAME: str = Field(default="adatari-ip-service", alias="SERVICE_NAME")
