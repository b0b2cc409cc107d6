"""Vacation balance domain service."""

from datetime import date

from timekeep.database.base import Database
from timekeep.domain import errors
from timekeep.domain.entities import (
    Employee,
    LeaveRequest,
    LeaveType,
    VacationCalculation,
    VacationEligibility,
    VacationHistoryEntry,
)
from timekeep.domain.errors import NotFoundError, ValidationError
from timekeep.domain.vacation import (
    calculate_vacation_balance,
    can_take_vacation,
    generate_vacation_history,
    sum_used_vacation_days,
)


class VacationService:
    """Feeds stored employees and leave requests into the vacation calculator."""

    def __init__(self, db: Database):
        """Initialize vacation service.

        Args:
            db: Database instance
        """
        self.db = db

    def _employee(self, employee_id: int) -> Employee:
        employee = self.db.get_employee(employee_id)
        if employee is None:
            raise NotFoundError(errors.employee_not_found(employee_id))
        if employee.employment_date is None:
            raise ValidationError(errors.employment_date_missing(employee.name))
        return employee

    def _vacation_requests(self, employee_id: int) -> list[LeaveRequest]:
        return self.db.list_leave_requests(employee_id=employee_id, leave_type=LeaveType.VACATION.value)

    def get_balance(self, employee_id: int, as_of: date) -> VacationCalculation:
        """Vacation balance as of a date.

        Only approved vacations starting on or before ``as_of`` count as used.

        Raises:
            NotFoundError: If employee doesn't exist
            ValidationError: If employee has no employment date
        """
        employee = self._employee(employee_id)
        used = sum_used_vacation_days(self._vacation_requests(employee_id), as_of=as_of)
        return calculate_vacation_balance(employee.employment_date, as_of, used)

    def get_history(
        self, employee_id: int, as_of: date, point_in_time: bool = False
    ) -> list[VacationHistoryEntry]:
        """Accrual and usage ledger up to a date.

        Args:
            employee_id: Employee ID
            as_of: Last date accruals are generated for
            point_in_time: Replay the running balance chronologically
        """
        employee = self._employee(employee_id)
        return generate_vacation_history(
            employee.employment_date,
            as_of,
            self._vacation_requests(employee_id),
            point_in_time=point_in_time,
        )

    def check_request(self, employee_id: int, as_of: date, requested_days: int) -> VacationEligibility:
        """Check whether the employee can take requested_days of vacation.

        Every approved vacation counts as used, including future ones.
        """
        employee = self._employee(employee_id)
        used = sum_used_vacation_days(self._vacation_requests(employee_id))
        return can_take_vacation(employee.employment_date, as_of, used, requested_days)
