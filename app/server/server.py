from fastapi import FastAPI

from api.router import api_router
from server import __version__
from server.lifespan import lifespan

SWAGGER_URL = "/swagger"
OPENAPI_URL = "/api-doc/openapi.json"


def create_app() -> FastAPI:
    """Build the FastAPI application with its routes and docs surface.

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="IP Lookup Service",
        version=__version__,
        description="IP Intelligence Service",
        docs_url=SWAGGER_URL,
        openapi_url=OPENAPI_URL,
        redoc_url=None,
        openapi_tags=[
            {"name": "adatari-ip", "description": "IP Intelligence Service"},
            {"name": "System", "description": "Health and service information"},
        ],
        lifespan=lifespan,
    )
    app.include_router(api_router)
    return app


handler = create_app()
