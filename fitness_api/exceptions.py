"""
Fitness API — Custom Exception Hierarchy
==========================================

What:  Application-specific exceptions, one per failure category.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the matching status code.
Who:   Raised by services and helpers; caught by global handlers.

Exception Hierarchy:
    FitnessApiError (base)
    ├── ValidationError  → 400 Bad Request (client can fix)
    ├── NotFoundError    → 404 Not Found
    └── DatabaseError    → 500 Internal Server Error

Every response body carries a human-readable `message`. The `context` dict
is logged server-side and only partially exposed (validation details).
"""

from typing import Any, Dict, Optional


class FitnessApiError(Exception):
    """
    Base exception for all Fitness API errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, not returned for server errors)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(FitnessApiError):
    """
    Raised when client input fails validation.

    When:    Malformed identifiers, missing required fields, wrong field types.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "Invalid blog id 'abc'",
            "details": {"field": "id"}
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


class NotFoundError(FitnessApiError):
    """
    Raised when a requested entity does not exist.

    When:    GET /blogs/{id} or PUT /users/{id} with an id nothing was stored under.
    HTTP:    404 Not Found

    The driver returns None for missing documents (not an exception); services
    convert that None into this exception.
    """

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class DatabaseError(FitnessApiError):
    """
    Raised when a MongoDB operation fails.

    When:    Server unreachable, selection timeout, write rejected, connection
             dropped mid-operation, or no database handle at all.
    HTTP:    500 Internal Server Error

    The message is the fixed per-operation text ("Error fetching blogs", ...).
    Driver details stay in `context` and the server log.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
