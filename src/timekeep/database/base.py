"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date, datetime
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from timekeep.domain.entities import (
    Employee,
    LeaveRequest,
    TaskAssignment,
    TimeSlot,
)


class Database(ABC):
    """Abstract database interface for timekeep."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Employee operations
    @abstractmethod
    def create_employee(
        self, name: str, email: Optional[str] = None, employment_date: Optional[date] = None
    ) -> int:
        """Create an employee. Returns employee ID."""
        pass

    @abstractmethod
    def get_employee(self, employee_id: int) -> Optional[Employee]:
        """Get employee by ID."""
        pass

    @abstractmethod
    def get_employee_by_name(self, name: str) -> Optional[Employee]:
        """Get employee by exact name."""
        pass

    @abstractmethod
    def list_employees(self) -> list[Employee]:
        """List all employees ordered by name."""
        pass

    @abstractmethod
    def update_employee_dates(
        self,
        employee_id: int,
        employment_date: Optional[date] = None,
        termination_date: Optional[date] = None,
    ) -> None:
        """Update employment and/or termination date."""
        pass

    # Leave request operations
    @abstractmethod
    def create_leave_request(
        self,
        employee_id: int,
        leave_type: str,
        start_date: date,
        end_date: date,
        days_count: int,
        reason: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> int:
        """Create a pending leave request. Returns request ID."""
        pass

    @abstractmethod
    def get_leave_request(self, request_id: int) -> Optional[LeaveRequest]:
        """Get leave request by ID."""
        pass

    @abstractmethod
    def list_leave_requests(
        self,
        employee_id: Optional[int] = None,
        leave_type: Optional[str] = None,
        status: Optional[str] = None,
    ) -> list[LeaveRequest]:
        """List leave requests with optional filters, ordered by start date."""
        pass

    @abstractmethod
    def update_leave_status(
        self,
        request_id: int,
        status: str,
        approved_by: Optional[str] = None,
        approved_at: Optional[datetime] = None,
    ) -> None:
        """Set the status of a leave request."""
        pass

    # Task assignment operations
    @abstractmethod
    def create_task_assignment(
        self,
        employee_id: int,
        task: str,
        allocated_hours: Decimal,
        deadline: Optional[date] = None,
        deadline_type: Optional[str] = None,
        priority: str = "medium",
    ) -> int:
        """Create a task assignment. Returns assignment ID."""
        pass

    @abstractmethod
    def get_task_assignment(self, assignment_id: int) -> Optional[TaskAssignment]:
        """Get task assignment by ID."""
        pass

    @abstractmethod
    def list_task_assignments(self, employee_id: Optional[int] = None) -> list[TaskAssignment]:
        """List task assignments, optionally for one employee."""
        pass

    @abstractmethod
    def update_task_assignment_hours(self, assignment_id: int, actual_hours: Decimal) -> None:
        """Set the actual hours of a task assignment."""
        pass

    # Time slot operations
    @abstractmethod
    def create_time_slot(
        self,
        employee_id: int,
        task: str,
        slot_date: date,
        planned_hours: Decimal,
        deadline: Optional[date] = None,
        deadline_type: Optional[str] = None,
        is_assigned_by_admin: bool = True,
    ) -> int:
        """Create a time slot. Returns slot ID."""
        pass

    @abstractmethod
    def get_time_slot(self, slot_id: int) -> Optional[TimeSlot]:
        """Get time slot by ID."""
        pass

    @abstractmethod
    def list_time_slots(self, employee_id: Optional[int] = None) -> list[TimeSlot]:
        """List time slots, optionally for one employee."""
        pass

    @abstractmethod
    def update_time_slot_hours(
        self, slot_id: int, actual_hours: Decimal, status: Optional[str] = None
    ) -> None:
        """Set the actual hours (and optionally status) of a time slot."""
        pass
