"""
Logging configuration for MediYap.

Uses structlog; log output goes to stderr so decoded phrases on stdout
stay clean for piping.
"""

import logging
import sys
from typing import List, Optional

import structlog
from structlog.types import Processor

DEFAULT_LOG_LEVEL = "WARNING"


def configure_logging(log_level: Optional[str] = None, json_format: bool = False) -> None:
    """
    Configure structured logging for the package.

    Args:
        log_level: Level name such as "DEBUG" or "warning" (defaults to WARNING)
        json_format: Whether to output JSON (True) or console format (False)
    """
    level = log_level or DEFAULT_LOG_LEVEL
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    shared_processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_format:
        processors: List[Processor] = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer()
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=False)
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        # The CLI reconfigures the level after modules have bound their loggers
        cache_logger_on_first_use=False,
    )


def get_logger(name: str = "mediyap") -> structlog.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


# Leave a host application's structlog setup alone
if not structlog.is_configured():
    configure_logging()
