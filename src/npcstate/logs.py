"""Structured logging via structlog.

Library modules obtain loggers with get_logger(__name__) and emit
event-style messages with key/value context:

    logger = get_logger(__name__)
    logger.warning("npc_not_defined", entity="YUKES")

Nothing is configured on import. Hosts that want console output call
configure_logging() once at startup; otherwise structlog's defaults apply.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog


def configure_logging(level: str | int = "INFO") -> None:
    """Configure structlog with a console renderer at the given level.

    Args:
        level: Standard logging level name or number.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level!r}")
        level = resolved

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:  # BoundLogger, typed loosely like structlog itself
    """Get a structlog logger bound to a module name."""
    return structlog.get_logger(name)
