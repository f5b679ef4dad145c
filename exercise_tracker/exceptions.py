"""
Exercise Tracker - Custom Exception Hierarchy
===============================================

What:  Application-specific exceptions for the error kinds the API reports.
How:   Each exception carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the matching status code.
Who:   Raised by services; caught by global handlers.

Exception Hierarchy:
    ExerciseTrackerError (base)
    ├── ValidationError   → 400 Bad Request (only with STRICT_INPUT enabled)
    ├── NotFoundError     → 404 Not Found
    └── DatabaseError     → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class ExerciseTrackerError(Exception):
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


class ValidationError(ExerciseTrackerError):
    """
    Raised when client input cannot be coerced and strict input is enabled.

    HTTP: 400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "duration must be a whole number of minutes",
            "details": {"field": "duration", "value": "abc"}
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


class NotFoundError(ExerciseTrackerError):
    """
    Raised when a referenced record does not exist.

    HTTP: 404 Not Found. The message is "User not found" for users; the
    looked-up identifier goes into context, not into the response.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource.capitalize()} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(ExerciseTrackerError):
    """
    Raised when a store operation fails.

    HTTP: 500 Internal Server Error

    The message names the operation that failed ("Server error adding
    exercise"); the driver error is logged server-side and kept in context.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
