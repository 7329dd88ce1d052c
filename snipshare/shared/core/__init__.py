"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions

Usage:
======
    from snipshare.shared.core.logging import logger, get_logger
    from snipshare.shared.core.exceptions import SnipshareException, NotFoundError

    logger.info("Snippet created", snippet_id=snippet_id)
"""

from snipshare.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
)
from snipshare.shared.core.exceptions import (
    SnipshareException,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    UserNotFoundError,
    SnippetNotFoundError,
    ValidationError,
    ConflictError,
    DuplicateResourceError,
    ServiceUnavailableError,
    StoreUnavailableError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    # Exceptions
    "SnipshareException",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "UserNotFoundError",
    "SnippetNotFoundError",
    "ValidationError",
    "ConflictError",
    "DuplicateResourceError",
    "ServiceUnavailableError",
    "StoreUnavailableError",
]
