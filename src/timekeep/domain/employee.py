"""Employee domain service."""

import logging
from typing import Optional
from datetime import date
from timekeep.database.base import Database
from timekeep.domain import errors
from timekeep.domain.entities import Employee as EmployeeEntity
from timekeep.domain.errors import ConflictError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class EmployeeService:
    """Service for managing employees."""

    def __init__(self, db: Database):
        """Initialize employee service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_employee(
        self, name: str, email: Optional[str] = None, employment_date: Optional[date] = None
    ) -> int:
        """Create a new employee.

        Args:
            name: Employee name
            email: Optional email address
            employment_date: Optional first day of employment

        Returns:
            Employee ID

        Raises:
            ValidationError: If the name is empty
            ConflictError: If an employee with the same name exists
        """
        name = name.strip()
        if not name:
            raise ValidationError("Employee name cannot be empty")
        if self.db.get_employee_by_name(name) is not None:
            raise ConflictError(errors.employee_name_taken(name))

        employee_id = self.db.create_employee(name=name, email=email, employment_date=employment_date)
        logger.info("Created employee %s (%s)", employee_id, name)
        return employee_id

    def get_employee(self, employee_id: int) -> Optional[EmployeeEntity]:
        """Get employee by ID.

        Args:
            employee_id: Employee ID

        Returns:
            Employee entity or None if not found
        """
        return self.db.get_employee(employee_id)

    def require_employee(self, employee_id: int) -> EmployeeEntity:
        """Get employee by ID or raise NotFoundError."""
        employee = self.db.get_employee(employee_id)
        if employee is None:
            raise NotFoundError(errors.employee_not_found(employee_id))
        return employee

    def get_employee_by_name(self, name: str) -> Optional[EmployeeEntity]:
        """Get employee by exact name."""
        return self.db.get_employee_by_name(name)

    def list_employees(self) -> list[EmployeeEntity]:
        """List all employees.

        Returns:
            List of employee entities
        """
        return self.db.list_employees()

    def set_employment_date(self, employee_id: int, employment_date: date) -> None:
        """Record the first day of employment.

        Raises:
            NotFoundError: If employee not found
            ValidationError: If the date is after the recorded termination date
        """
        employee = self.require_employee(employee_id)
        if employee.termination_date is not None and employment_date > employee.termination_date:
            raise ValidationError(
                f"Employment date {employment_date} is after termination date {employee.termination_date}"
            )
        self.db.update_employee_dates(employee_id, employment_date=employment_date)
        logger.info("Employee %s employment date set to %s", employee_id, employment_date)

    def set_termination_date(self, employee_id: int, termination_date: date) -> None:
        """Record the last day of employment.

        Raises:
            NotFoundError: If employee not found
            ValidationError: If the date precedes the employment date
        """
        employee = self.require_employee(employee_id)
        if employee.employment_date is not None and termination_date < employee.employment_date:
            raise ValidationError(
                f"Termination date {termination_date} is before employment date {employee.employment_date}"
            )
        self.db.update_employee_dates(employee_id, termination_date=termination_date)
        logger.info("Employee %s termination date set to %s", employee_id, termination_date)
