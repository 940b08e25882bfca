"""
Employee API - Employee Service Unit Tests
============================================

What:  Tests for EmployeeService business rules.
How:   Uses a mock repository (no database).

What we test:
    ✅ Lookup miss raises NotFoundError
    ✅ employee_number <= 0 is rejected before storage is touched
    ✅ Update/delete decide existence from the affected-row count
    ✅ Update uses the path id, never the payload id
    ✅ Store failures surface as DatabaseError
"""

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from employee_api.exceptions import BadRequestError, DatabaseError, NotFoundError
from employee_api.models.employee import Employee
from employee_api.schemas.employee import EmployeeCreate, EmployeeUpdate
from employee_api.services.employee_service import EmployeeService


class TestEmployeeServiceRead:
    """Tests for list_employees and get_employee."""

    @pytest.mark.asyncio
    async def test_list_employees_maps_every_row(self, mock_repository, sample_employee_data):
        second = {**sample_employee_data, "employee_number": 1056, "reports_to": 1002}
        mock_repository.find_all.return_value = [
            Employee(**sample_employee_data),
            Employee(**second),
        ]

        result = await EmployeeService(mock_repository).list_employees()

        assert [e.employee_number for e in result] == [1002, 1056]
        assert result[0].reports_to is None
        assert result[1].reports_to == 1002

    @pytest.mark.asyncio
    async def test_list_employees_empty(self, mock_repository):
        mock_repository.find_all.return_value = []

        assert await EmployeeService(mock_repository).list_employees() == []

    @pytest.mark.asyncio
    async def test_get_employee_found(self, mock_repository, sample_employee_data):
        mock_repository.find_by_id.return_value = Employee(**sample_employee_data)

        result = await EmployeeService(mock_repository).get_employee(1002)

        assert result.model_dump() == sample_employee_data
        mock_repository.find_by_id.assert_awaited_once_with(1002)

    @pytest.mark.asyncio
    async def test_get_employee_not_found(self, mock_repository):
        mock_repository.find_by_id.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await EmployeeService(mock_repository).get_employee(42)

        assert exc_info.value.message == "Employee with ID 42 not found."

    @pytest.mark.asyncio
    async def test_get_employee_store_failure(self, mock_repository):
        mock_repository.find_by_id.side_effect = OperationalError(
            "SELECT", {}, Exception("connection refused")
        )

        with pytest.raises(DatabaseError):
            await EmployeeService(mock_repository).get_employee(1002)


class TestEmployeeServiceCreate:
    """Tests for create_employee."""

    @pytest.mark.asyncio
    async def test_create_employee_success(self, mock_repository, sample_employee_data):
        mock_repository.save.side_effect = lambda employee: employee

        result = await EmployeeService(mock_repository).create_employee(
            EmployeeCreate(**sample_employee_data)
        )

        assert result.model_dump() == sample_employee_data
        saved = mock_repository.save.await_args.args[0]
        assert isinstance(saved, Employee)
        assert saved.employee_number == 1002

    @pytest.mark.asyncio
    @pytest.mark.parametrize("employee_number", [0, -1])
    async def test_create_employee_rejects_non_positive_number(
        self, mock_repository, sample_employee_data, employee_number
    ):
        payload = EmployeeCreate(**{**sample_employee_data, "employee_number": employee_number})

        with pytest.raises(BadRequestError, match="greater than 0"):
            await EmployeeService(mock_repository).create_employee(payload)

        mock_repository.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_employee_accepts_unvalidated_fields(self, mock_repository, sample_employee_data):
        """Only the number is checked; empty names and odd emails pass through."""
        mock_repository.save.side_effect = lambda employee: employee
        payload = EmployeeCreate(**{
            **sample_employee_data,
            "last_name": "",
            "email": "not-an-email",
            "reports_to": 999999,
        })

        result = await EmployeeService(mock_repository).create_employee(payload)

        assert result.email == "not-an-email"
        assert result.reports_to == 999999

    @pytest.mark.asyncio
    async def test_create_employee_duplicate_is_database_error(self, mock_repository, sample_employee_data):
        mock_repository.save.side_effect = IntegrityError(
            "INSERT", {}, Exception("UNIQUE constraint failed")
        )

        with pytest.raises(DatabaseError) as exc_info:
            await EmployeeService(mock_repository).create_employee(
                EmployeeCreate(**sample_employee_data)
            )

        assert exc_info.value.context["error_type"] == "IntegrityError"


class TestEmployeeServiceUpdate:
    """Tests for update_employee."""

    @pytest.mark.asyncio
    async def test_update_uses_path_id(self, mock_repository, sample_employee_data):
        mock_repository.update.return_value = 1
        payload = EmployeeUpdate(**{**sample_employee_data, "employee_number": 99})

        result = await EmployeeService(mock_repository).update_employee(5, payload)

        assert result.employee_number == 5
        expected_values = {k: v for k, v in sample_employee_data.items() if k != "employee_number"}
        mock_repository.update.assert_awaited_once_with(5, expected_values)

    @pytest.mark.asyncio
    async def test_update_missing_employee(self, mock_repository, sample_employee_data):
        mock_repository.update.return_value = 0

        with pytest.raises(NotFoundError, match="Employee with ID 7 not found"):
            await EmployeeService(mock_repository).update_employee(
                7, EmployeeUpdate(**sample_employee_data)
            )

        mock_repository.find_by_id.assert_not_awaited()


class TestEmployeeServiceDelete:
    """Tests for delete_employee."""

    @pytest.mark.asyncio
    async def test_delete_existing(self, mock_repository):
        mock_repository.delete.return_value = 1

        assert await EmployeeService(mock_repository).delete_employee(1002) is None
        mock_repository.delete.assert_awaited_once_with(1002)

    @pytest.mark.asyncio
    async def test_delete_missing(self, mock_repository):
        mock_repository.delete.return_value = 0

        with pytest.raises(NotFoundError):
            await EmployeeService(mock_repository).delete_employee(1002)
