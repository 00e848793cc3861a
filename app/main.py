import uvicorn

from infrastructure.services import get_settings
from server.server import handler

server_app = handler


def main():
    """Serve the API until interrupted.

    uvicorn installs the SIGINT/SIGTERM handlers: on the first signal it stops
    accepting connections, lets in-flight requests finish, then runs the
    lifespan shutdown which logs the shutdown notice.
    """
    settings = get_settings()
    uvicorn.run(
        server_app,
        host=settings.server.HOST,
        port=settings.server.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
