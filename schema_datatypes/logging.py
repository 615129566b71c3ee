"""Structured logging configuration.

Configures structlog on top of the stdlib logging module so that every
module can obtain a logger with ``get_logger(__name__)``.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import EventDict


def add_component(_logger: Any, _method_name: str, event_dict: EventDict) -> EventDict:
    """Tag log events with the emitting component."""
    event_dict["component"] = event_dict.get("logger", "schema_datatypes")
    return event_dict


def configure_logging(log_level: str = "WARNING", json_logs: bool = False) -> None:
    """Configure structured logging.

    Args:
        log_level: Logging level (DEBUG/INFO/WARNING/ERROR)
        json_logs: Whether to output JSON format logs
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_level.upper()),
        force=True,
    )

    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        add_component,
        structlog.processors.format_exc_info,
        renderer,
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger.

    Args:
        name: Logger name (typically __name__)

    Returns:
        structlog logger instance
    """
    return structlog.get_logger(name)
