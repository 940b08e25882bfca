"""
Employee API - Employee Repository (Data-Access Layer)
========================================================

What:  Issues the parameterized statements against the `employees` table.
How:   SQLAlchemy 2.0 select/update/delete constructs bound to the Employee
       model, executed on the request's AsyncSession.
Who:   Constructed by route handlers and handed to EmployeeService.

Statement inventory:
    find_all    SELECT * FROM employees
    find_by_id  SELECT * FROM employees WHERE employeeNumber = :id
    save        INSERT INTO employees (<8 columns>) VALUES (...)
    update      UPDATE employees SET <7 columns> WHERE employeeNumber = :id
    delete      DELETE FROM employees WHERE employeeNumber = :id

Absence is never an exception here: find_by_id returns None, update and
delete return the affected-row count. Everything else the driver raises
(SQLAlchemyError) propagates to the caller.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.models.employee import Employee

logger = logging.getLogger(__name__)


class EmployeeRepository:
    """Data access for Employee rows, scoped to one session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_all(self) -> List[Employee]:
        result = await self.db.execute(select(Employee))
        return list(result.scalars().all())

    async def find_by_id(self, employee_number: int) -> Optional[Employee]:
        """Returns the matching employee, or None when no row matches."""
        result = await self.db.execute(
            select(Employee).where(Employee.employee_number == employee_number)
        )
        return result.scalar_one_or_none()

    async def save(self, employee: Employee) -> Employee:
        """
        Inserts the employee with its caller-supplied key.

        The flush sends the INSERT immediately so constraint violations
        (duplicate key, dangling reportsTo on stores that enforce it) surface
        here rather than at commit time.
        """
        self.db.add(employee)
        await self.db.flush()
        logger.debug("Inserted employee %s", employee.employee_number)
        return employee

    async def update(self, employee_number: int, values: Dict[str, Any]) -> int:
        """
        Replaces every non-key column of one employee.

        Args:
            employee_number: Target primary key
            values: Non-key attribute values keyed by Employee attribute name

        Returns:
            Affected-row count (0 when the employee does not exist)
        """
        result = await self.db.execute(
            update(Employee)
            .where(Employee.employee_number == employee_number)
            .values({
                Employee.last_name: values["last_name"],
                Employee.first_name: values["first_name"],
                Employee.extension: values["extension"],
                Employee.email: values["email"],
                Employee.office_code: values["office_code"],
                Employee.reports_to: values.get("reports_to"),
                Employee.job_title: values["job_title"],
            })
        )
        return result.rowcount

    async def delete(self, employee_number: int) -> int:
        """Deletes one employee by key. Returns the affected-row count."""
        result = await self.db.execute(
            delete(Employee).where(Employee.employee_number == employee_number)
        )
        return result.rowcount
