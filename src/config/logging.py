"""Structured logging for the connector.

Standard output carries the JSON responses of the command line interface,
so every log record is written to standard error.
"""
import logging
import sys
from typing import Any, TextIO

import structlog
from pythonjsonlogger import jsonlogger

from src.config.settings import settings

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Loggers of the HTTP stack, only interesting on failure
QUIET_LOGGERS = ("httpcore", "httpx")


def add_property_id_prefix(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Prefix the event with [property_id] when the record carries one."""
    property_id = event_dict.get("property_id")
    if property_id:
        event_dict["event"] = f"[{property_id}] {event_dict.get('event', '')}"
    return event_dict


def _build_handler(log_format: str, level: int, stream: TextIO) -> logging.Handler:
    handler = logging.StreamHandler(stream)
    if log_format == "json":
        handler.setFormatter(jsonlogger.JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    handler.setLevel(level)
    return handler


def configure_logging(stream: TextIO | None = None) -> None:
    """Route structlog through stdlib logging on standard error.

    Args:
        stream: Destination of log records; sys.stderr when omitted
    """
    log_format = settings.logging.format
    level = getattr(logging, settings.logging.level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(_build_handler(log_format, level, stream or sys.stderr))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    renderer = (
        structlog.processors.JSONRenderer()
        if log_format == "json"
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            add_property_id_prefix,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """Get a structlog logger, typically for __name__."""
    return structlog.get_logger(name)
