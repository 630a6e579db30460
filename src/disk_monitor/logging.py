"""Structured logging configuration for the disk monitor.

Logs are written to stderr; stdout carries only the disk status notification.
"""

from __future__ import annotations

import logging
import sys
from typing import List, Literal, Optional

import structlog


def configure_logging(
    log_format: Literal["json", "text"] = "text",
    log_level: str = "WARNING",
) -> None:
    """Configure structlog for the application.

    Args:
        log_format: Output format - "json" for machine consumption, "text" for humans.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
    """
    level = getattr(logging, log_level.upper(), logging.WARNING)

    # Common processors for all formats
    shared_processors: List[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if log_format == "json":
        processors: List[structlog.typing.Processor] = [
            *shared_processors,
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # structlog renders the event; stdlib only writes it to stderr
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
    )


def get_logger(name: Optional[str] = None) -> structlog.typing.FilteringBoundLogger:
    """Get a structlog logger backed by the stdlib logger `name`.

    Events always end up in stdlib logging. Until configure_logging() runs,
    the host application's logging setup applies; with none, only WARNING
    and above reach stderr through the stdlib last-resort handler.
    """
    return structlog.wrap_logger(logging.getLogger(name))
