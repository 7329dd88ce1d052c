"""
Logging Configuration

Structured logging with structlog.

Development output is coloured console text; any other APP_ENV renders one
JSON object per line so log shippers can index the fields:

    {"timestamp": "...", "level": "info", "event": "Snippet forked",
     "request_id": "3f9c1a2b", "snippet_id": "...", "original_id": "..."}

Request-scoped fields (request id, acting user) are bound through
contextvars by the request context middleware and merged into every event
emitted while that request is being handled.

Usage:
======
    from snipshare.shared.core.logging import logger, get_logger, log_context

    logger.info("Snippet created", snippet_id=str(snippet.id))

    db_logger = get_logger("snipshare.db")
    db_logger.warning("View increment failed", snippet_id=str(snippet_id))

    log_context(user_id=str(user.id))
"""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import Processor

from snipshare.config.settings import settings


def setup_logging() -> None:
    """
    Configure stdlib logging and structlog for the process.

    Called once when this module is imported.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    )

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.is_development:
        processors: list[Processor] = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger, optionally named (e.g. ``snipshare.access``)."""
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """
    Bind key-value pairs to every subsequent log call in the current context.

    Example:
        log_context(request_id="3f9c1a2b")
        logger.info("Listing snippets")  # includes request_id
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    """Drop all bound context variables (end of request)."""
    structlog.contextvars.clear_contextvars()


setup_logging()

logger = get_logger("snipshare")
