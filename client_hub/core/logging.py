"""structlog setup for the Client Hub API.

Events are keyword-style (``logger.info("client_deleted", projects_removed=2)``)
and carry the id of the API call that produced them.
"""

import logging
import sys
from contextvars import ContextVar
from typing import Any

import orjson
import structlog
from structlog.types import EventDict, Processor

from client_hub.core.config import settings

SERVICE_NAME = "client-hub"

# Set by RequestContextMiddleware for the duration of one API call
request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)

# Chatty third-party loggers kept at WARNING unless debugging
_QUIET_LOGGERS = ("sqlalchemy.engine", "uvicorn.access", "aiosqlite")


def _add_request_id(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    if request_id := request_id_ctx.get():
        event_dict["request_id"] = request_id
    return event_dict


def _add_service(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def _orjson_serializer(obj: Any, **kwargs: Any) -> str:
    """Render an event with orjson; dates and enums fall back to ``str``."""
    return orjson.dumps(obj, default=str).decode("utf-8")


def _use_json() -> bool:
    log_format = settings.log_format.lower() if settings.log_format else None
    if log_format is not None:
        return log_format == "json"
    return settings.environment != "development"


def configure_logging() -> None:
    """Configure structlog and the stdlib root logger.

    JSON lines (orjson) are emitted when ``LOG_FORMAT=json`` or, with no
    explicit format, outside development. Otherwise a colored console
    renderer is used.
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        _add_request_id,
    ]

    if _use_json():
        processors: list[Processor] = [
            *shared_processors,
            _add_service,
            structlog.processors.EventRenamer("message"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(serializer=_orjson_serializer),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(level if settings.debug else logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger, usually ``get_logger(__name__)``."""
    return structlog.get_logger(name)
