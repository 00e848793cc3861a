from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, AsyncIterator

from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from infrastructure.logging import add_app_info, configure_logging
from infrastructure.services import get_settings
from server import __version__
from server.state import ProcessState

if TYPE_CHECKING:
    from infrastructure.configuration import Settings


def _get_logger(settings: "Settings") -> BoundLogger:
    return configure_logging(
        settings=settings,
        extra_processors=[add_app_info(settings.server.SERVICE_NAME, __version__)],
    )


def _list_configs(settings: "Settings", logger: BoundLogger) -> None:
    config_settings: dict[str, list[object]] = {"settings": []}

    for key, value in settings.model_dump().items():
        if isinstance(value, dict):
            config_settings[key] = list(value.keys())
        else:
            config_settings["settings"].append({key: value})

    logger.info("configuration_initialized", base_settings=config_settings["settings"])
    for key, value in config_settings.items():
        if key != "settings":
            logger.info("configuration_loaded", config_setting=key, keys=value)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    logger = _get_logger(settings)

    # Created once, read-only for every request afterwards
    app.state.process = ProcessState()
    app.state.settings = settings

    logger.info(
        "application_startup",
        started_at=app.state.process.started_at.isoformat(),
    )
    _list_configs(settings, logger)

    address = f"{settings.server.HOST}:{settings.server.PORT}"
    logger.info("listening", address=address)
    logger.info(
        "swagger_available",
        swagger_url=f"http://localhost:{settings.server.PORT}{app.docs_url}",
    )

    yield

    logger.warning("shutdown")
