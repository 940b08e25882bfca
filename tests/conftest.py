"""
Employee API - Test Configuration (conftest.py)
=================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_repository: AsyncMock EmployeeRepository (service unit tests)
    ├── sample_employee_data: snake_case field values for one employee
    ├── employees_table: creates/drops the schema on the test SQLite file
    ├── db_session: AsyncSession bound to the test database
    └── test_client: HTTPX AsyncClient talking to the FastAPI app
"""

import os
import tempfile

# Settings are read at import time; point them at a throwaway SQLite file
# before any employee_api module is imported.
_TEST_DB_DIR = tempfile.mkdtemp(prefix="employee_api_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DB_DIR}/test.db"
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import AsyncClient, ASGITransport  # noqa: E402

from employee_api.database import Base, async_session_factory, engine  # noqa: E402
from employee_api.models.employee import Employee  # noqa: E402,F401
from employee_api.repositories.employee_repository import EmployeeRepository  # noqa: E402


# ══════════════════════════════════════════════════════════════════════════
# Unit-Test Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_repository():
    """
    Provides a mock EmployeeRepository.

    Usage:
        async def test_get(mock_repository):
            mock_repository.find_by_id.return_value = None
            service = EmployeeService(mock_repository)
    """
    return AsyncMock(spec=EmployeeRepository)


@pytest.fixture
def sample_employee_data():
    """Field values for one employee, keyed by Python attribute name."""
    return {
        "employee_number": 1002,
        "last_name": "Murphy",
        "first_name": "Diane",
        "extension": "x5800",
        "email": "dmurphy@classicmodelcars.com",
        "office_code": "1",
        "reports_to": None,
        "job_title": "President",
    }


@pytest.fixture
def employee_json():
    """Builds an employee request body in the wire (camelCase) format."""
    def _build(employee_number: int = 1056, **overrides):
        body = {
            "employeeNumber": employee_number,
            "lastName": "Patterson",
            "firstName": "Mary",
            "extension": "x4611",
            "email": "mpatterso@classicmodelcars.com",
            "officeCode": "1",
            "reportsTo": None,
            "jobTitle": "VP Sales",
        }
        body.update(overrides)
        return body
    return _build


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def employees_table():
    """
    Creates the employees table before the test and drops it afterwards.

    The engine is disposed on teardown so pooled connections never outlive
    the event loop of the test that opened them.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(employees_table):
    """An AsyncSession on the test database; uncommitted work is rolled back."""
    async with async_session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def test_client(employees_table):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from employee_api.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
