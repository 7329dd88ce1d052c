"""
Custom Exceptions

Application-specific exceptions with HTTP status codes and error codes.

Exception Hierarchy:
====================
    SnipshareException (base)
       │
       ├── AuthenticationError (401)    ← Missing/invalid bearer token
       ├── AuthorizationError (403)     ← Not the owner, private snippet
       ├── NotFoundError (404)          ← Resource not found
       │      ├── UserNotFoundError
       │      └── SnippetNotFoundError
       ├── ValidationError (400)        ← Invalid input data
       ├── ConflictError (409)          ← Resource already exists
       │      └── DuplicateResourceError
       └── ServiceUnavailableError (503)
              └── StoreUnavailableError ← Database call failed

Usage:
======
    from snipshare.shared.core.exceptions import NotFoundError, ValidationError

    # Raise with automatic status code
    raise SnippetNotFoundError(snippet_id)
    # Results in: {"message": "Snippet not found", "code": "NOT_FOUND"}

    # Raise with field errors
    raise ValidationError(errors=[{"field": "q", "message": "too short"}])

Exception Handling:
===================
    Exceptions are caught by the error handler middleware and converted to JSON:
    {
        "message": "Validation failed",
        "code": "VALIDATION_ERROR",
        "errors": [{"field": "title", "message": "Title is required"}]
    }
"""

from typing import Any, Optional


class SnipshareException(Exception):
    """
    Base exception for all Snipshare application errors.

    All custom exceptions inherit from this class, providing:
    - HTTP status code mapping
    - Error code for programmatic handling
    - Optional field-level errors and details
    - Consistent JSON serialization

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (default 500)
        error_code: Machine-readable error code
        errors: Field-level problems (validation only)
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
        errors: Optional[list[dict[str, Any]]] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or "INTERNAL_ERROR"
        self.errors = errors or []
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API response.

        Returns:
            Dictionary with error details for JSON response
        """
        body: dict[str, Any] = {
            "message": self.message,
            "code": self.error_code,
        }
        if self.errors:
            body["errors"] = self.errors
        if self.details:
            body["details"] = self.details
        return body


# ═══════════════════════════════════════════════════════════════════════════════
# AUTHENTICATION & AUTHORIZATION ERRORS (401, 403)
# ═══════════════════════════════════════════════════════════════════════════════


class AuthenticationError(SnipshareException):
    """
    Authentication failed error (401 Unauthorized).

    Raised when:
    - No bearer token on an endpoint that requires one
    - Token expired or malformed
    - Token refers to a user that no longer exists
    - Wrong email/password on login
    """

    def __init__(
        self,
        message: str = "Authentication required",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=401,
            error_code="AUTHENTICATION_ERROR",
            details=details,
        )


class AuthorizationError(SnipshareException):
    """
    Authorization failed error (403 Forbidden).

    Raised when the caller may not perform the action: editing someone
    else's snippet, reading a private snippet, forking or liking a
    private snippet.
    """

    def __init__(
        self,
        message: str = "Access denied",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=403,
            error_code="AUTHORIZATION_ERROR",
            details=details,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# NOT FOUND ERRORS (404)
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(SnipshareException):
    """
    Resource not found error (404 Not Found).

    The message is deliberately generic; the id is kept in details for logs.

    Example:
        raise NotFoundError("Snippet", snippet_id)
        # Message: "Snippet not found"
    """

    def __init__(
        self,
        resource: str,
        resource_id: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        extra_details = details or {}
        if resource_id:
            extra_details["id"] = str(resource_id)
        super().__init__(
            message=f"{resource} not found",
            status_code=404,
            error_code="NOT_FOUND",
            details=extra_details,
        )


class UserNotFoundError(NotFoundError):
    """User not found error."""

    def __init__(self, user_ref: str) -> None:
        super().__init__(resource="User", resource_id=user_ref)


class SnippetNotFoundError(NotFoundError):
    """Snippet not found error."""

    def __init__(self, snippet_id: str) -> None:
        super().__init__(resource="Snippet", resource_id=snippet_id)


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION & CONFLICT ERRORS (400, 409)
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(SnipshareException):
    """
    Validation error (400 Bad Request).

    Raised when input data fails validation. `errors` names each
    offending field.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        errors: Optional[list[dict[str, Any]]] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code="VALIDATION_ERROR",
            errors=errors,
            details=details,
        )


class ConflictError(SnipshareException):
    """
    Resource conflict error (409 Conflict).

    Example:
        raise ConflictError("Email already registered")
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=409,
            error_code="CONFLICT",
            details=details,
        )


class DuplicateResourceError(ConflictError):
    """
    Duplicate resource error.

    Specific case of conflict when trying to create duplicate resource.
    """

    def __init__(
        self,
        message: str = "Resource already exists",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, details=details)


# ═══════════════════════════════════════════════════════════════════════════════
# SERVICE ERRORS (503)
# ═══════════════════════════════════════════════════════════════════════════════


class ServiceUnavailableError(SnipshareException):
    """
    Service temporarily unavailable error (503).
    """

    def __init__(
        self,
        message: str = "Service temporarily unavailable",
        error_code: str = "SERVICE_UNAVAILABLE",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=503,
            error_code=error_code,
            details=details,
        )


class StoreUnavailableError(ServiceUnavailableError):
    """
    Database call failed for infrastructure reasons.

    Reads are safe to retry. Mutations are not: a create may have been
    applied before the connection dropped.
    """

    def __init__(self, retryable: bool) -> None:
        super().__init__(
            message="Storage is temporarily unavailable, please try again later",
            error_code="STORE_UNAVAILABLE",
            details={"retryable": retryable},
        )
