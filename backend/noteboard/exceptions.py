"""
Noteboard Backend: Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for the note service and client.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the matching status code.
Who:   Raised by services and repositories; caught by global handlers.

Exception Hierarchy:
    NoteboardError (base)
    ├── ValidationError     → 400 Bad Request (client can fix)
    ├── NotFoundError       → 404 Not Found
    └── DatabaseError       → 500 Internal Server Error

The client package adds NotesApiError (see noteboard.client.api) under the
same base.
"""

from typing import Any, Dict, Optional


class NoteboardError(Exception):
    """
    Base exception for all Noteboard application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NoteboardError):
    """
    Raised when client input fails validation.

    When:    A note is created without a title or content, or a request body
             cannot be parsed into the expected shape.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "title should not be empty",
            "details": {"field": "title"}
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


class NotFoundError(NoteboardError):
    """
    Raised when a requested resource does not exist.

    When:    GET, PATCH or DELETE /notes/{id} with an id that has no record,
             including ids that are not well-formed identifiers.
    HTTP:    404 Not Found

    Repositories return None for missing records; the service layer converts
    that into this exception.
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
        self.resource_id = resource_id


class DatabaseError(NoteboardError):
    """
    Raised when store operations fail unexpectedly.

    When:    Connection lost mid-query, constraint violation, and similar.
    HTTP:    500 Internal Server Error

    The message returned to the client is always generic. Driver details are
    logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
