"""Shared pytest fixtures for timekeep tests."""

import tempfile
import os
from datetime import date, datetime
import pytest

from timekeep.database.factories import create_sqlite_database
from timekeep.domain.balance import VacationService
from timekeep.domain.employee import EmployeeService
from timekeep.domain.leave import LeaveRequestService
from timekeep.domain.workload import WorkloadService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def employee_service(temp_db):
    """Create an EmployeeService with a temporary database."""
    return EmployeeService(temp_db)


@pytest.fixture
def leave_service(temp_db):
    """Create a LeaveRequestService with a temporary database."""
    return LeaveRequestService(temp_db)


@pytest.fixture
def vacation_service(temp_db):
    """Create a VacationService with a temporary database."""
    return VacationService(temp_db)


@pytest.fixture
def workload_service(temp_db):
    """Create a WorkloadService with a temporary database."""
    return WorkloadService(temp_db)


@pytest.fixture
def now():
    """Fixed evaluation instant: Wednesday 2024-01-10 09:00."""
    return datetime(2024, 1, 10, 9, 0)


@pytest.fixture
def sample_employee(employee_service):
    """Create a sample employee hired on 2024-01-15."""
    employee_id = employee_service.create_employee(
        name="Anna Petrova", email="anna@example.com", employment_date=date(2024, 1, 15)
    )
    return employee_service.get_employee(employee_id)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
