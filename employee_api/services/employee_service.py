"""
Employee API - Employee Service (Business Logic)
==================================================

What:  Business rules sitting between the employee routes and the repository.
How:   Wraps an EmployeeRepository; converts absence into NotFoundError and
       store failures into DatabaseError.
Who:   Constructed per request by route handlers:
           EmployeeService(EmployeeRepository(db))

Rules enforced here:
    - employee_number must be > 0 on create (BadRequestError, storage untouched)
    - update/delete of a missing employee is a NotFoundError

Update and delete are single conditional statements; the affected-row
count decides existence, so no read precedes the write.
"""

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError

from employee_api.exceptions import BadRequestError, DatabaseError, NotFoundError
from employee_api.models.employee import Employee
from employee_api.repositories.employee_repository import EmployeeRepository
from employee_api.schemas.employee import (
    EmployeeCreate,
    EmployeeResponse,
    EmployeeUpdate,
)

logger = logging.getLogger(__name__)

RESOURCE = "Employee"


class EmployeeService:
    """
    Business logic layer for employee operations.

    Error Handling Strategy:
        NotFoundError and BadRequestError are raised directly.
        SQLAlchemyError from the repository is logged and re-raised as
        DatabaseError, whose client-facing message is generic.
    """

    def __init__(self, repository: EmployeeRepository):
        self.repository = repository

    async def list_employees(self) -> List[EmployeeResponse]:
        try:
            employees = await self.repository.find_all()
        except SQLAlchemyError as e:
            logger.error("Database error listing employees: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve employees. Please try again.",
                context={"error_type": type(e).__name__},
            ) from e

        return [EmployeeResponse.model_validate(employee) for employee in employees]

    async def get_employee(self, employee_number: int) -> EmployeeResponse:
        """
        Retrieve a single employee by number.

        Raises:
            NotFoundError: No employee with this number (→ 404)
            DatabaseError: Query execution failed (→ 500)
        """
        try:
            employee = await self.repository.find_by_id(employee_number)
        except SQLAlchemyError as e:
            logger.error("Database error fetching employee %s: %s", employee_number, str(e))
            raise DatabaseError(
                message="Could not retrieve the employee. Please try again.",
                context={"employee_number": employee_number},
            ) from e

        if employee is None:
            raise NotFoundError(resource=RESOURCE, resource_id=employee_number)

        return EmployeeResponse.model_validate(employee)

    async def create_employee(self, payload: EmployeeCreate) -> EmployeeResponse:
        """
        Insert a new employee with its caller-supplied number.

        Only the number is validated; names, email format and reports_to
        references are accepted as given.

        Raises:
            BadRequestError: employee_number <= 0 (→ 400)
            DatabaseError: Insert failed, e.g. duplicate number (→ 500)
        """
        if payload.employee_number <= 0:
            raise BadRequestError(
                message="Employee number must be greater than 0.",
                field="employeeNumber",
            )

        try:
            employee = await self.repository.save(Employee(**payload.model_dump()))
        except SQLAlchemyError as e:
            logger.error(
                "Database error creating employee %s: %s",
                payload.employee_number,
                str(e),
            )
            raise DatabaseError(
                message="Could not create the employee. Please try again.",
                context={
                    "employee_number": payload.employee_number,
                    "error_type": type(e).__name__,
                },
            ) from e

        logger.info("Employee %s created", employee.employee_number)
        return EmployeeResponse.model_validate(employee)

    async def update_employee(
        self, employee_number: int, payload: EmployeeUpdate
    ) -> EmployeeResponse:
        """
        Replace every non-key field of an existing employee.

        The employee_number argument (the path id) is authoritative; any
        number carried in the payload is discarded.

        Raises:
            NotFoundError: No row matched (→ 404), nothing was written
            DatabaseError: Update failed (→ 500)
        """
        values = payload.model_dump(exclude={"employee_number"})

        try:
            affected = await self.repository.update(employee_number, values)
        except SQLAlchemyError as e:
            logger.error("Database error updating employee %s: %s", employee_number, str(e))
            raise DatabaseError(
                message="Could not update the employee. Please try again.",
                context={
                    "employee_number": employee_number,
                    "error_type": type(e).__name__,
                },
            ) from e

        if affected == 0:
            raise NotFoundError(resource=RESOURCE, resource_id=employee_number)

        logger.info("Employee %s updated", employee_number)
        return EmployeeResponse(employee_number=employee_number, **values)

    async def delete_employee(self, employee_number: int) -> None:
        """
        Raises:
            NotFoundError: No row matched (→ 404)
            DatabaseError: Delete failed (→ 500)
        """
        try:
            affected = await self.repository.delete(employee_number)
        except SQLAlchemyError as e:
            logger.error("Database error deleting employee %s: %s", employee_number, str(e))
            raise DatabaseError(
                message="Could not delete the employee. Please try again.",
                context={
                    "employee_number": employee_number,
                    "error_type": type(e).__name__,
                },
            ) from e

        if affected == 0:
            raise NotFoundError(resource=RESOURCE, resource_id=employee_number)

        logger.info("Employee %s deleted", employee_number)
