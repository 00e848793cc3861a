"""Structlog configuration for the service.

Development renders colored console lines, production renders one JSON
object per line. Under pytest nothing is emitted.

Usage:
    from infrastructure.logging import configure_logging, get_module_logger

    configure_logging(settings=settings)

    logger = get_module_logger()
    logger.info("lookup", ip="8.8.8.8", latency_ms=12)
"""

import inspect
import logging
import sys
from typing import TYPE_CHECKING, Any, Callable, Optional, Sequence

import structlog
from structlog.stdlib import BoundLogger

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

Processor = Callable[..., Any]

# Above CRITICAL, so the stdlib handlers drop every record
_SILENT = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def _apply(processors: list[Any], level: int) -> None:
    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=level, force=True)


def configure_logging(
    settings: "Settings",
    extra_processors: Optional[Sequence[Processor]] = None,
) -> BoundLogger:
    """Configure structlog and the stdlib root logger.

    Args:
        settings: Provides LOG_LEVEL and is_production (JSON vs console).
        extra_processors: Processors run just before rendering, e.g.
            ``add_app_info("adatari-ip-service", "0.1.0")``.

    Returns:
        A logger for the caller.
    """
    if _is_test_environment():
        _apply(
            [
                structlog.contextvars.merge_contextvars,
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            _SILENT,
        )
        return structlog.stdlib.get_logger()

    processors: list[Any] = [
        # Request id and path bound by bind_request_context
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        *(extra_processors or []),
    ]
    if settings.is_production:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    _apply(processors, level)
    return structlog.stdlib.get_logger()


def get_module_logger() -> BoundLogger:
    """Return a lazy logger tagged with the calling module.

    The logger carries ``component`` (last dotted part) and ``module_path``,
    e.g. ``service`` and ``packages.iplookup.service``. It resolves its
    configuration on first use, so module-level loggers created at import
    time still follow configure_logging().
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module_name = caller.f_globals.get("__name__") if caller is not None else None
    if not module_name:
        return structlog.stdlib.get_logger(component="unknown")

    return structlog.stdlib.get_logger(
        component=module_name.rsplit(".", 1)[-1], module_path=module_name
    )
