"""
Employee API - Pydantic Request/Response Schemas
==================================================

What:  Pydantic models defining the JSON contract of the employees resource.
How:   FastAPI uses these models to validate request bodies, serialize
       responses, and generate the OpenAPI document.

JSON shape (camelCase on the wire, snake_case in Python):
    {
        "employeeNumber": 1002,
        "lastName": "Murphy",
        "firstName": "Diane",
        "extension": "x5800",
        "email": "dmurphy@classicmodelcars.com",
        "officeCode": "1",
        "reportsTo": null,
        "jobTitle": "President"
    }

Both spellings are accepted on input (populate_by_name).
"""

from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


_CAMEL_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
}


# ══════════════════════════════════════════════════════════════════════════
# Employee Models
# ══════════════════════════════════════════════════════════════════════════


class EmployeeFields(BaseModel):
    """The seven non-key columns, shared by every employee payload."""

    last_name: str = Field(description="Family name")
    first_name: str = Field(description="Given name")
    extension: str = Field(description="Phone extension")
    email: str = Field(description="Work email address")
    office_code: str = Field(description="Code of the office the employee works from")
    reports_to: Optional[int] = Field(
        default=None,
        description="employeeNumber of the manager (null for top-level employees)",
    )
    job_title: str = Field(description="Job title")

    model_config = _CAMEL_CONFIG


class EmployeeCreate(EmployeeFields):
    """
    Body of POST /v1/api/employees.

    employee_number is caller-supplied. Its positivity is a business rule
    checked by EmployeeService (400), not a schema constraint (422).
    """

    employee_number: int = Field(description="Primary key, must be greater than 0")


class EmployeeUpdate(EmployeeFields):
    """
    Body of PUT /v1/api/employees/{id}.

    employee_number is accepted for symmetry with the create body but is
    always replaced by the path id.
    """

    employee_number: Optional[int] = Field(
        default=None,
        description="Ignored; the id in the path is authoritative",
    )


class EmployeeResponse(EmployeeFields):
    """Employee as returned by every read or write endpoint."""

    employee_number: int = Field(description="Primary key")

    model_config = {**_CAMEL_CONFIG, "from_attributes": True}


# ══════════════════════════════════════════════════════════════════════════
# Error & Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Standardized error body for all API errors.

    Example:
        {
            "error": "not_found",
            "message": "Employee with ID 42 not found.",
            "request_id": "1f2e3d4c"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
