"""Task assignment and time slot domain service.

Hours logged beyond the plan are subject to the hard-deadline gate in
``timekeep.domain.deadline``.
"""

import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from timekeep.database.base import Database
from timekeep.domain import errors
from timekeep.domain.deadline import (
    can_exceed_planned_hours_for_assignment,
    can_exceed_planned_hours_for_slot,
    get_days_overdue,
    is_task_assignment_overdue,
    is_time_slot_overdue,
    validate_deadline,
)
from timekeep.domain.entities import (
    DeadlineType,
    OverdueItem,
    SlotStatus,
    TaskAssignment,
    TaskPriority,
    TimeSlot,
)
from timekeep.domain.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class WorkloadService:
    """Service for task assignments, time slots and their deadlines."""

    def __init__(self, db: Database):
        """Initialize workload service.

        Args:
            db: Database instance
        """
        self.db = db

    def _check_employee(self, employee_id: int) -> None:
        if self.db.get_employee(employee_id) is None:
            raise NotFoundError(errors.employee_not_found(employee_id))

    @staticmethod
    def _check_hours(hours: Decimal, label: str) -> None:
        if hours <= 0:
            raise ValidationError(f"{label} must be positive, got {hours}")

    @staticmethod
    def _deadline_fields(
        deadline: Optional[date], deadline_type: Optional[DeadlineType], now: datetime
    ) -> tuple[Optional[date], Optional[str]]:
        """Validate a new deadline and return the values to store."""
        if deadline is None:
            if deadline_type is not None:
                raise ValidationError("A deadline type requires a deadline date")
            return None, None

        validation = validate_deadline(deadline, now)
        if not validation.is_valid:
            raise ValidationError(validation.error)
        return deadline, DeadlineType(deadline_type or DeadlineType.SOFT).value

    def create_assignment(
        self,
        employee_id: int,
        task: str,
        allocated_hours: Decimal,
        now: datetime,
        deadline: Optional[date] = None,
        deadline_type: Optional[DeadlineType] = None,
        priority: TaskPriority = TaskPriority.MEDIUM,
    ) -> int:
        """Allocate task hours to an employee.

        Args:
            employee_id: Employee ID
            task: Task name
            allocated_hours: Hours allocated to the employee
            now: Current instant, used to reject past deadlines
            deadline: Optional deadline date
            deadline_type: Soft (default when a deadline is set) or hard
            priority: Task priority

        Returns:
            Assignment ID

        Raises:
            NotFoundError: If employee doesn't exist
            ValidationError: If hours are not positive or the deadline is in the past
        """
        self._check_employee(employee_id)
        self._check_hours(allocated_hours, "Allocated hours")
        deadline, stored_type = self._deadline_fields(deadline, deadline_type, now)

        assignment_id = self.db.create_task_assignment(
            employee_id=employee_id,
            task=task,
            allocated_hours=allocated_hours,
            deadline=deadline,
            deadline_type=stored_type,
            priority=TaskPriority(priority).value,
        )
        logger.info("Assigned %sh of '%s' to employee %s", allocated_hours, task, employee_id)
        return assignment_id

    def create_slot(
        self,
        employee_id: int,
        task: str,
        slot_date: date,
        planned_hours: Decimal,
        now: datetime,
        deadline: Optional[date] = None,
        deadline_type: Optional[DeadlineType] = None,
        is_assigned_by_admin: bool = True,
    ) -> int:
        """Plan a time slot for an employee.

        Raises:
            NotFoundError: If employee doesn't exist
            ValidationError: If hours are not positive or the deadline is in the past
        """
        self._check_employee(employee_id)
        self._check_hours(planned_hours, "Planned hours")
        deadline, stored_type = self._deadline_fields(deadline, deadline_type, now)

        slot_id = self.db.create_time_slot(
            employee_id=employee_id,
            task=task,
            slot_date=slot_date,
            planned_hours=planned_hours,
            deadline=deadline,
            deadline_type=stored_type,
            is_assigned_by_admin=is_assigned_by_admin,
        )
        logger.info("Planned slot %s on %s for employee %s", slot_id, slot_date, employee_id)
        return slot_id

    def get_assignment(self, assignment_id: int) -> Optional[TaskAssignment]:
        """Get task assignment by ID."""
        return self.db.get_task_assignment(assignment_id)

    def get_slot(self, slot_id: int) -> Optional[TimeSlot]:
        """Get time slot by ID."""
        return self.db.get_time_slot(slot_id)

    def log_slot_hours(
        self,
        slot_id: int,
        hours: Decimal,
        now: datetime,
        complete: bool = False,
        reopen: bool = False,
    ) -> TimeSlot:
        """Add worked hours to a time slot.

        Args:
            slot_id: Time slot ID
            hours: Hours to add
            now: Current instant, used by the hard-deadline gate
            complete: Mark the slot completed
            reopen: Move a completed slot back to in-progress. Without it a
                completed slot stays completed.

        Returns:
            Updated time slot

        Raises:
            NotFoundError: If the slot doesn't exist
            ValidationError: If the new total exceeds the planned hours while
                a hard deadline is still ahead
        """
        self._check_hours(hours, "Logged hours")
        slot = self.db.get_time_slot(slot_id)
        if slot is None:
            raise NotFoundError(errors.time_slot_not_found(slot_id))

        total = slot.actual_hours + hours
        if total > slot.planned_hours and not can_exceed_planned_hours_for_slot(slot, now):
            logger.warning("Refused %sh on slot %s: hard deadline %s", hours, slot_id, slot.deadline)
            raise ValidationError(
                errors.planned_hours_locked("time slot", slot_id, slot.deadline, slot.planned_hours)
            )

        if complete or (slot.status == SlotStatus.COMPLETED and not reopen):
            status = SlotStatus.COMPLETED
        else:
            status = SlotStatus.IN_PROGRESS
        self.db.update_time_slot_hours(slot_id, total, status=status.value)
        return self.db.get_time_slot(slot_id)

    def log_assignment_hours(self, assignment_id: int, hours: Decimal, now: datetime) -> TaskAssignment:
        """Add worked hours to a task assignment.

        Raises:
            NotFoundError: If the assignment doesn't exist
            ValidationError: If the new total exceeds the allocation while
                a hard deadline is still ahead
        """
        self._check_hours(hours, "Logged hours")
        assignment = self.db.get_task_assignment(assignment_id)
        if assignment is None:
            raise NotFoundError(errors.assignment_not_found(assignment_id))

        total = assignment.actual_hours + hours
        if total > assignment.allocated_hours and not can_exceed_planned_hours_for_assignment(
            assignment, now
        ):
            logger.warning(
                "Refused %sh on assignment %s: hard deadline %s", hours, assignment_id, assignment.deadline
            )
            raise ValidationError(
                errors.planned_hours_locked(
                    "task assignment", assignment_id, assignment.deadline, assignment.allocated_hours
                )
            )

        self.db.update_task_assignment_hours(assignment_id, total)
        return self.db.get_task_assignment(assignment_id)

    def overdue_report(self, now: datetime, employee_id: Optional[int] = None) -> list[OverdueItem]:
        """List slots and assignments whose deadline has passed.

        Completed slots and completed assignments are left out. Items are
        ordered by days overdue, most overdue first.
        """
        items = []
        for slot in self.db.list_time_slots(employee_id=employee_id):
            if is_time_slot_overdue(slot, now):
                items.append(
                    OverdueItem(
                        kind="slot",
                        id=slot.id,
                        employee_id=slot.employee_id,
                        task=slot.task,
                        deadline=slot.deadline,
                        deadline_type=slot.deadline_type or DeadlineType.SOFT,
                        days_overdue=get_days_overdue(slot.deadline, now),
                        planned_hours=slot.planned_hours,
                        actual_hours=slot.actual_hours,
                    )
                )

        for assignment in self.db.list_task_assignments(employee_id=employee_id):
            if assignment.completed_at is None and is_task_assignment_overdue(assignment, now):
                items.append(
                    OverdueItem(
                        kind="assignment",
                        id=assignment.id,
                        employee_id=assignment.employee_id,
                        task=assignment.task,
                        deadline=assignment.deadline,
                        deadline_type=assignment.deadline_type or DeadlineType.SOFT,
                        days_overdue=get_days_overdue(assignment.deadline, now),
                        planned_hours=assignment.allocated_hours,
                        actual_hours=assignment.actual_hours,
                    )
                )

        items.sort(key=lambda item: (-item.days_overdue, item.kind, item.id))
        return items
