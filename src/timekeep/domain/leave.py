"""Leave request domain service."""

import logging
from datetime import date, datetime
from typing import Optional

from timekeep.database.base import Database
from timekeep.domain import errors
from timekeep.domain.entities import LeaveRequest as LeaveRequestEntity, LeaveStatus, LeaveType
from timekeep.domain.errors import ConflictError, NotFoundError, ValidationError
from timekeep.domain.vacation import count_leave_days

logger = logging.getLogger(__name__)

# Allowed source statuses for each target status
_TRANSITIONS: dict[LeaveStatus, tuple[LeaveStatus, ...]] = {
    LeaveStatus.APPROVED: (LeaveStatus.PENDING,),
    LeaveStatus.REJECTED: (LeaveStatus.PENDING,),
    LeaveStatus.CANCELLED: (LeaveStatus.PENDING, LeaveStatus.APPROVED),
}


class LeaveRequestService:
    """Service for filing and deciding leave requests."""

    def __init__(self, db: Database):
        """Initialize leave request service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_request(
        self,
        employee_id: int,
        start_date: date,
        end_date: date,
        leave_type: LeaveType = LeaveType.VACATION,
        reason: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> int:
        """File a pending leave request.

        The day count covers every calendar day from start to end inclusive.

        Args:
            employee_id: Employee ID
            start_date: First day of leave
            end_date: Last day of leave
            leave_type: Kind of leave
            reason: Optional reason
            notes: Optional notes

        Returns:
            Leave request ID

        Raises:
            NotFoundError: If employee doesn't exist
            ValidationError: If end date is before start date
        """
        if self.db.get_employee(employee_id) is None:
            raise NotFoundError(errors.employee_not_found(employee_id))

        days_count = count_leave_days(start_date, end_date)
        if days_count <= 0:
            raise ValidationError(errors.invalid_leave_dates(start_date, end_date))

        request_id = self.db.create_leave_request(
            employee_id=employee_id,
            leave_type=LeaveType(leave_type).value,
            start_date=start_date,
            end_date=end_date,
            days_count=days_count,
            reason=reason,
            notes=notes,
        )
        logger.info(
            "Filed %s leave request %s for employee %s: %s..%s (%s days)",
            LeaveType(leave_type).value,
            request_id,
            employee_id,
            start_date,
            end_date,
            days_count,
        )
        return request_id

    def get_request(self, request_id: int) -> Optional[LeaveRequestEntity]:
        """Get leave request by ID."""
        return self.db.get_leave_request(request_id)

    def list_requests(
        self,
        employee_id: Optional[int] = None,
        leave_type: Optional[LeaveType] = None,
        status: Optional[LeaveStatus] = None,
    ) -> list[LeaveRequestEntity]:
        """List leave requests with optional filters."""
        return self.db.list_leave_requests(
            employee_id=employee_id,
            leave_type=LeaveType(leave_type).value if leave_type is not None else None,
            status=LeaveStatus(status).value if status is not None else None,
        )

    def _transition(
        self,
        request_id: int,
        target: LeaveStatus,
        approved_by: Optional[str] = None,
        approved_at: Optional[datetime] = None,
    ) -> None:
        request = self.db.get_leave_request(request_id)
        if request is None:
            raise NotFoundError(errors.leave_request_not_found(request_id))
        if request.status not in _TRANSITIONS[target]:
            raise ConflictError(
                errors.leave_transition_blocked(request_id, request.status.value, target.value)
            )

        self.db.update_leave_status(
            request_id, target.value, approved_by=approved_by, approved_at=approved_at
        )
        logger.info("Leave request %s: %s -> %s", request_id, request.status.value, target.value)

    def approve(self, request_id: int, approved_by: str, approved_at: datetime) -> None:
        """Approve a pending request.

        Raises:
            NotFoundError: If the request doesn't exist
            ConflictError: If the request is not pending
        """
        self._transition(request_id, LeaveStatus.APPROVED, approved_by, approved_at)

    def reject(self, request_id: int) -> None:
        """Reject a pending request."""
        self._transition(request_id, LeaveStatus.REJECTED)

    def cancel(self, request_id: int) -> None:
        """Cancel a pending or approved request."""
        self._transition(request_id, LeaveStatus.CANCELLED)
