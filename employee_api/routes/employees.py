"""
Employee API - Employee Route Handlers
========================================

What:  The five CRUD endpoints of the employees resource.
How:   Each handler composes EmployeeService(EmployeeRepository(db)) around
       the request's session, delegates, and picks the success status code.
       Failures are raised as exceptions and mapped by the global handlers.

Endpoints:
    GET    /v1/api/employees         → 200, list of employees
    GET    /v1/api/employees/{id}    → 200 | 404
    POST   /v1/api/employees         → 201 | 400
    PUT    /v1/api/employees/{id}    → 200 | 404 (path id overrides body id)
    DELETE /v1/api/employees/{id}    → 204 | 404
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.database import get_db_session
from employee_api.repositories.employee_repository import EmployeeRepository
from employee_api.schemas.employee import (
    EmployeeCreate,
    EmployeeResponse,
    EmployeeUpdate,
    ErrorResponse,
)
from employee_api.services.employee_service import EmployeeService

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/v1/api/employees", tags=["Employees"])


def _service(db: AsyncSession) -> EmployeeService:
    return EmployeeService(EmployeeRepository(db))


@router.get(
    "",
    response_model=List[EmployeeResponse],
    responses={
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List all employees",
)
async def list_employees(
    response: Response,
    db: AsyncSession = Depends(get_db_session),
) -> List[EmployeeResponse]:
    """
    Returns every employee in the store, unpaginated.

    X-Total-Count carries the number of records in the body.
    """
    employees = await _service(db).list_employees()
    response.headers["X-Total-Count"] = str(len(employees))
    return employees


@router.get(
    "/{employee_number}",
    response_model=EmployeeResponse,
    responses={
        404: {"description": "Employee not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get a single employee by number",
)
async def get_employee(
    employee_number: int,
    db: AsyncSession = Depends(get_db_session),
) -> EmployeeResponse:
    return await _service(db).get_employee(employee_number)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=EmployeeResponse,
    responses={
        400: {"description": "employeeNumber is not positive", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create an employee",
)
async def create_employee(
    payload: EmployeeCreate,
    db: AsyncSession = Depends(get_db_session),
) -> EmployeeResponse:
    """Creates an employee with the caller-supplied employeeNumber."""
    return await _service(db).create_employee(payload)


@router.put(
    "/{employee_number}",
    response_model=EmployeeResponse,
    responses={
        404: {"description": "Employee not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Replace an employee",
)
async def update_employee(
    employee_number: int,
    payload: EmployeeUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> EmployeeResponse:
    """
    Replaces all non-key fields of an employee.

    The employeeNumber in the path wins over any value in the body:
    PUT /v1/api/employees/5 with {"employeeNumber": 99, ...} updates 5
    and leaves 99 untouched.
    """
    return await _service(db).update_employee(employee_number, payload)


@router.delete(
    "/{employee_number}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        404: {"description": "Employee not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Delete an employee",
)
async def delete_employee(
    employee_number: int,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await _service(db).delete_employee(employee_number)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
