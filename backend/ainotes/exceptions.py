"""
AI Notes Backend — Custom Exception Hierarchy
=============================================

What:  Application-specific exceptions for each user-visible error kind.
Why:   Services raise them without knowing about HTTP; global handlers
       (registered in main.py) turn them into structured JSON responses.
How:   Each exception carries a safe, user-facing message and a private
       context dict that is logged but never returned.

Exception Hierarchy:
    NotesAppError (base)
    ├── UnauthenticatedError     → 401 Unauthorized (no caller identity)
    ├── NotFoundError            → 404 Not Found (missing OR not owned)
    ├── ValidationError          → 400 Bad Request (client can fix)
    ├── ConflictError            → 409 Conflict (store constraint rejected write)
    └── DatabaseError            → 500 Internal Server Error

Not-found vs. not-owned:
    Lookups are always scoped by owner, so a row that exists for another
    user simply is not found. NotFoundError therefore never reveals whether
    the id exists at all; the id is kept in `context` for server logs only.
"""

from typing import Any, Dict, Optional


class NotesAppError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class UnauthenticatedError(NotesAppError):
    """
    Raised when a procedure is called without a valid caller identity.

    When:    No Authorization header, malformed/expired token, or no `sub` claim.
    HTTP:    401 Unauthorized
    """

    def __init__(
        self,
        message: str = "You must be signed in to perform this action.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(NotesAppError):
    """
    Raised when an ownership-scoped lookup matches no row.

    HTTP:    404 Not Found
    Message: "<Resource> not found." (the id is deliberately left out)
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource.capitalize()} not found."
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource


class ValidationError(NotesAppError):
    """
    Raised when client input fails validation.

    HTTP:    400 Bad Request

    Request-body schema failures (pydantic) are converted into the same
    response shape by the handler in main.py, so clients see a single
    `validation_error` code whichever layer caught the problem.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class ConflictError(NotesAppError):
    """
    Raised when the store refuses a write because of an integrity constraint.

    When:    A write trips a unique or check constraint that request
             validation did not catch first.
    HTTP:    409 Conflict
    """

    def __init__(
        self,
        message: str = "The request conflicts with existing data.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(NotesAppError):
    """
    Raised when a database operation fails unexpectedly.

    When:    Connection lost mid-query, driver error, deadlock, etc.
    HTTP:    500 Internal Server Error

    Security Note:
        The message returned to the client is always generic. SQL text and
        driver details go to the server log only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
