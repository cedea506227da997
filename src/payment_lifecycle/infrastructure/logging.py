"""Logging configuration.

Standard library logging carries the output; structlog shapes the events.
Modules call ``structlog.get_logger(__name__)`` and log key/value pairs.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def setup_stdlib_logging(log_level: str) -> None:
    """Route root logging to stdout at the given level."""
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)


def setup_structlog(json_output: bool = False) -> None:
    """Configure structlog processors and renderer."""
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging(log_level: str = "INFO", json_output: bool = False) -> None:
    """Configure all logging for the application."""
    setup_stdlib_logging(log_level.upper())
    setup_structlog(json_output=json_output)
