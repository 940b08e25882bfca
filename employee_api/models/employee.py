"""
Employee API - Employee SQLAlchemy Model
==========================================

What:  ORM model representing the `employees` table.
How:   Inherits from the shared DeclarativeBase; Python attributes are
       snake_case, database columns keep their camelCase names.
Who:   Used by EmployeeRepository for statement construction and row mapping.

Table Design:
    - employeeNumber: caller-supplied primary key, never auto-generated
    - reportsTo: nullable self-reference to another employee's number.
      Stored as a plain key; no relationship() object graph is loaded.
    - Column sizes follow the classic `employees` schema
"""

from typing import Optional

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from employee_api.database import Base


class Employee(Base):
    """
    Represents one employee row.

    Lifecycle:
        1. Inserted with an explicit employee_number (> 0, checked by the service)
        2. Updated in place: every column except the key is replaced
        3. Hard-deleted by key
    """

    __tablename__ = "employees"

    # ── Primary Key ───────────────────────────────────────────────────────
    employee_number: Mapped[int] = mapped_column(
        "employeeNumber",
        Integer,
        primary_key=True,
        autoincrement=False,
    )

    last_name: Mapped[str] = mapped_column("lastName", String(50), nullable=False)
    first_name: Mapped[str] = mapped_column("firstName", String(50), nullable=False)
    extension: Mapped[str] = mapped_column("extension", String(10), nullable=False)
    email: Mapped[str] = mapped_column("email", String(100), nullable=False)
    office_code: Mapped[str] = mapped_column("officeCode", String(10), nullable=False)

    # ── Reporting Line ────────────────────────────────────────────────────
    # NULL for top-level employees; integrity is enforced by the store only.
    reports_to: Mapped[Optional[int]] = mapped_column(
        "reportsTo",
        Integer,
        ForeignKey("employees.employeeNumber"),
        nullable=True,
        default=None,
    )

    job_title: Mapped[str] = mapped_column("jobTitle", String(50), nullable=False)

    def __repr__(self) -> str:
        return (
            f"<Employee(employee_number={self.employee_number}, "
            f"last_name='{self.last_name}', job_title='{self.job_title}')>"
        )
