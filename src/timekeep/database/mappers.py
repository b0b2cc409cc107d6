"""Mapper functions to convert SQLAlchemy models into domain entities.

Enum-valued columns are stored as plain strings and converted here, so the
domain layer only ever sees enum members.
"""

from decimal import Decimal

from timekeep.domain import entities as domain
from timekeep.database.models import (
    Employee as ORMEmployee,
    LeaveRequest as ORMLeaveRequest,
    TaskAssignment as ORMTaskAssignment,
    TimeSlot as ORMTimeSlot,
)


def _deadline_type(value):
    return domain.DeadlineType(value) if value is not None else None


def employee_to_domain(orm_employee: ORMEmployee) -> domain.Employee:
    """Convert SQLAlchemy Employee model to domain Employee entity."""
    return domain.Employee(
        id=orm_employee.id,
        name=orm_employee.name,
        email=orm_employee.email,
        employment_date=orm_employee.employment_date,
        termination_date=orm_employee.termination_date,
        created_at=orm_employee.created_at,
    )


def leave_request_to_domain(orm_request: ORMLeaveRequest) -> domain.LeaveRequest:
    """Convert SQLAlchemy LeaveRequest model to domain LeaveRequest entity."""
    return domain.LeaveRequest(
        id=orm_request.id,
        employee_id=orm_request.employee_id,
        type=domain.LeaveType(orm_request.type),
        start_date=orm_request.start_date,
        end_date=orm_request.end_date,
        days_count=orm_request.days_count,
        reason=orm_request.reason,
        status=domain.LeaveStatus(orm_request.status),
        approved_by=orm_request.approved_by,
        approved_at=orm_request.approved_at,
        notes=orm_request.notes,
        created_at=orm_request.created_at,
    )


def task_assignment_to_domain(orm_assignment: ORMTaskAssignment) -> domain.TaskAssignment:
    """Convert SQLAlchemy TaskAssignment model to domain TaskAssignment entity."""
    return domain.TaskAssignment(
        id=orm_assignment.id,
        employee_id=orm_assignment.employee_id,
        task=orm_assignment.task,
        allocated_hours=Decimal(orm_assignment.allocated_hours),
        actual_hours=Decimal(orm_assignment.actual_hours or 0),
        deadline=orm_assignment.deadline,
        deadline_type=_deadline_type(orm_assignment.deadline_type),
        priority=domain.TaskPriority(orm_assignment.priority),
        completed_at=orm_assignment.completed_at,
        created_at=orm_assignment.created_at,
    )


def time_slot_to_domain(orm_slot: ORMTimeSlot) -> domain.TimeSlot:
    """Convert SQLAlchemy TimeSlot model to domain TimeSlot entity."""
    return domain.TimeSlot(
        id=orm_slot.id,
        employee_id=orm_slot.employee_id,
        task=orm_slot.task,
        date=orm_slot.date,
        planned_hours=Decimal(orm_slot.planned_hours),
        actual_hours=Decimal(orm_slot.actual_hours or 0),
        status=domain.SlotStatus(orm_slot.status),
        deadline=orm_slot.deadline,
        deadline_type=_deadline_type(orm_slot.deadline_type),
        is_assigned_by_admin=orm_slot.is_assigned_by_admin,
        created_at=orm_slot.created_at,
    )
