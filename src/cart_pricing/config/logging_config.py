"""Structured logging for cart pricing."""
import logging
import sys
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

from .settings import get_settings

_configured = False

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def resolve_level(level: str) -> int:
    """Map a level name to its stdlib value; unknown names fall back to INFO."""
    name = str(level).strip().upper()
    if name not in LOG_LEVELS:
        return logging.INFO
    return getattr(logging, name)


def setup_logging(level: Optional[str] = None, json_format: Optional[bool] = None) -> None:
    """
    Configure structlog on top of stdlib logging.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR); defaults to settings
        json_format: Render JSON instead of console output; defaults to settings
    """
    global _configured
    settings = get_settings()
    level = level or settings.log_level
    if json_format is None:
        json_format = settings.json_logs

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        level=resolve_level(level),
        stream=sys.stderr,
    )
    _configured = True


def get_logger(name: str) -> BoundLogger:
    """
    Get a structured logger, configuring logging on first use.

    Args:
        name: Logger name (usually __name__)
    """
    if not _configured:
        setup_logging()
    return structlog.get_logger(name)
