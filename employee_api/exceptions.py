"""
Employee API - Custom Exception Hierarchy
===========================================

What:  Application-specific exceptions for the error scenarios of the service.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the matching status code.
Who:   Raised by the service layer; caught by global handlers.

Exception Hierarchy:
    EmployeeApiError (base)
    ├── BadRequestError   → 400 Bad Request
    ├── NotFoundError     → 404 Not Found
    └── DatabaseError     → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class EmployeeApiError(Exception):
    """
    Base exception for all Employee API errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, returned only where the handler chooses)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class BadRequestError(EmployeeApiError):
    """
    Raised when client input breaks a business rule.

    When:    Creating an employee with employeeNumber <= 0.
    HTTP:    400 Bad Request

    Schema-level problems (wrong types, missing fields) never reach this
    exception; FastAPI answers those with 422 before the service runs.
    """

    def __init__(
        self,
        message: str = "Bad request",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(EmployeeApiError):
    """
    Raised when a requested resource does not exist.

    When:    GET/PUT/DELETE /v1/api/employees/{id} with an unknown id.
    HTTP:    404 Not Found

    The repository returns None (or an affected-row count of zero) for
    missing rows; the service layer converts that into this exception.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id is not None:
            message = f"{resource} with ID {resource_id} not found."
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(EmployeeApiError):
    """
    Raised when a store operation fails.

    When:    Connection lost, constraint violation (e.g. duplicate
             employeeNumber), malformed statement.
    HTTP:    500 Internal Server Error

    The message returned to the client is always generic; the context
    (original exception type, target id) is logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
