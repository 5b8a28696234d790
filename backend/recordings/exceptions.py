"""
Recordings API: Custom Exception Hierarchy
===========================================

What:  Defines application-specific exceptions for different error scenarios.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by the album store and route handlers; caught by global handlers.

Exception Hierarchy:
    RecordingsError (base)   → 500 Internal Server Error
    ├── ValidationError      → 400 Bad Request (client can fix)
    ├── NotFoundError        → 404 Not Found
    └── DatabaseError        → 500 Internal Server Error

Callers match on the exception type. A missing album is a NotFoundError,
never a DatabaseError whose text happens to say "no such album".
"""

from typing import Any, Dict, Optional


class RecordingsError(Exception):
    """
    Base exception for all Recordings API errors.

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


class ValidationError(RecordingsError):
    """
    Raised when client input fails parsing.

    When:    Missing artist name, non-numeric or out-of-range album ID.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "Invalid album ID",
            "details": {"field": "albumId", "value": "abc"}
        }
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


class NotFoundError(RecordingsError):
    """
    Raised when a requested resource does not exist.

    When:    GET /albums/get?albumId=N with an ID the store has never assigned.
    HTTP:    404 Not Found

    The store converts "zero rows" into this exception so the route layer
    can map it to 404 by type.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class DatabaseError(RecordingsError):
    """
    Raised when database operations fail unexpectedly.

    When:    Connection lost, constraint violation, row decode failure,
             operation deadline exceeded.
    HTTP:    500 Internal Server Error

    Security Note:
        The message returned to the client is always generic. The driver
        error text travels in `context` and is logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
