from fastapi import APIRouter
from pydantic import BaseModel, Field

from infrastructure.services import SettingsDep
from server import __version__
from server.state import ProcessStateDep

router = APIRouter(tags=["System"])


class HealthResponse(BaseModel):
    """Liveness report."""

    status: str = Field("ok", description="Always 'ok' while the process serves")
    uptime_sec: int = Field(..., ge=0, description="Seconds since process start")


class MetricsResponse(BaseModel):
    """Service identity and uptime. Not a time-series exporter."""

    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Service build version")
    uptime_sec: int = Field(..., ge=0, description="Seconds since process start")


@router.get("/health", response_model=HealthResponse)
def get_health(process: ProcessStateDep) -> HealthResponse:
    """Healthcheck endpoint."""
    return HealthResponse(status="ok", uptime_sec=process.uptime_seconds())


@router.get("/metrics", response_model=MetricsResponse)
def get_metrics(process: ProcessStateDep, settings: SettingsDep) -> MetricsResponse:
    """Report service name, version and uptime."""
    return MetricsResponse(
        service=settings.server.SERVICE_NAME,
        version=__version__,
        uptime_sec=process.uptime_seconds(),
    )
