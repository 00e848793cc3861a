"""Structlog processors that stamp service identity on every entry."""

from typing import Any


def add_app_info(app_name: str, app_version: str = "unknown"):
    """Build a processor adding ``app_name`` and ``app_version`` to each event.

    Example:
        configure_logging(
            settings=settings,
            extra_processors=[add_app_info("adatari-ip-service", "0.1.0")],
        )
    """

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict["app_name"] = app_name
        event_dict["app_version"] = app_version
        return event_dict

    return processor
