"""Deadline calculator and deadline status predicates.

Two independent ways of proposing a deadline live here:

- ``calculate_advanced_deadline`` converts hours to working days, scales them
  by a planning factor and adds a priority buffer measured in days.
- ``calculate_recommended_deadline`` scales the hours by a priority
  multiplier and adds a flat 20% buffer.

They give different dates for the same task and both are in use.

Predicates that depend on the current instant take ``now`` explicitly; only
the application layer reads the clock.
"""

import logging
import math
from datetime import date, timedelta
from decimal import Decimal
from typing import Any, Iterable, Optional

from timekeep.domain import errors
from timekeep.domain.entities import (
    DeadlineBreakdown,
    DeadlineCalculationParams,
    DeadlineCalculationResult,
    DeadlineState,
    DeadlineStatus,
    DeadlineType,
    DeadlineValidation,
    SlotStatus,
    TaskAssignment,
    TaskPriority,
    TimeSlot,
)
from timekeep.domain.errors import ValidationError
from timekeep.utils.calendar import DateLike, as_date, as_datetime, days_ceil, js_weekday

logger = logging.getLogger(__name__)

DEFAULT_PLANNING_FACTOR = Decimal("1.4")

DEFAULT_PRIORITY_BUFFERS: dict[TaskPriority, Decimal] = {
    TaskPriority.URGENT: Decimal("0"),
    TaskPriority.HIGH: Decimal("0.5"),
    TaskPriority.MEDIUM: Decimal("1"),
    TaskPriority.LOW: Decimal("2"),
}

PRIORITY_MULTIPLIERS: dict[TaskPriority, Decimal] = {
    TaskPriority.LOW: Decimal("1.5"),
    TaskPriority.MEDIUM: Decimal("1.0"),
    TaskPriority.HIGH: Decimal("0.7"),
    TaskPriority.URGENT: Decimal("0.5"),
}

RECOMMENDED_BUFFER_RATIO = Decimal("0.2")
APPROACHING_WINDOW_DAYS = 3

# Sunday=0 ... Saturday=6
MONDAY_TO_FRIDAY = frozenset({1, 2, 3, 4, 5})


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _working_date_after(start: date, total_days: Decimal, working_days: Iterable[int]) -> date:
    """Return the date on which the total_days-th working day is reached.

    Counting includes the start date itself when it is a working day.
    """
    current = start
    counted = 0
    while counted < total_days:
        if js_weekday(current) in working_days:
            counted += 1
        current += timedelta(days=1)
    return current - timedelta(days=1)


def calculate_advanced_deadline(params: DeadlineCalculationParams) -> DeadlineCalculationResult:
    """Calculate a deadline from effort, working calendar and priority.

    pure work days = ceil(hours / hours per day)
    planning days  = ceil(pure work days * planning factor)
    total days     = planning days + priority buffer

    The deadline is the day on which ``total days`` working days have been
    counted from the start date (inclusive).

    Raises:
        ValidationError: If hours per day is not positive or no working
            day is given
    """
    working_days = frozenset(params.working_days)
    if not working_days:
        raise ValidationError("At least one working day is required")
    hours_per_day = _to_decimal(params.working_hours_per_day)
    if hours_per_day <= 0:
        raise ValidationError("Working hours per day must be positive")

    priority = TaskPriority(params.priority)
    planning_factor = _to_decimal(params.planning_factor)
    buffers = params.priority_buffers or DEFAULT_PRIORITY_BUFFERS

    pure_work_days = max(0, math.ceil(_to_decimal(params.total_hours) / hours_per_day))
    planning_days = math.ceil(pure_work_days * planning_factor)
    buffer_days = _to_decimal(buffers[priority])
    total_days = planning_days + buffer_days

    start = as_date(params.start_date)
    deadline = _working_date_after(start, total_days, working_days)
    logger.debug(
        "Deadline from %s: %s work days, %s planned, %s buffer -> %s",
        start,
        pure_work_days,
        planning_days,
        buffer_days,
        deadline,
    )

    return DeadlineCalculationResult(
        deadline=deadline,
        working_days_needed=pure_work_days,
        planning_days=planning_days,
        buffer_days=buffer_days,
        total_days=total_days,
        breakdown=DeadlineBreakdown(
            pure_work_days=pure_work_days,
            planning_factor=planning_factor,
            priority_buffer=buffer_days,
        ),
    )


def calculate_recommended_deadline(
    planned_hours: int | float | Decimal,
    priority: TaskPriority | str = TaskPriority.MEDIUM,
    work_days_per_week: int = 5,
    hours_per_day: int | float | Decimal = 8,
    *,
    today: DateLike,
) -> date:
    """Recommend a deadline for a task using priority multipliers.

    The planned hours are scaled by the priority multiplier, converted to
    working days, and padded by 20% (rounded up). Counting starts on the
    day after ``today`` and only includes Monday to Friday.
    ``work_days_per_week`` is accepted but does not change the walk.

    Raises:
        ValidationError: If hours per day is not positive
    """
    hours_per_day = _to_decimal(hours_per_day)
    if hours_per_day <= 0:
        raise ValidationError("Working hours per day must be positive")

    adjusted_hours = _to_decimal(planned_hours) * PRIORITY_MULTIPLIERS[TaskPriority(priority)]
    work_days_needed = math.ceil(adjusted_hours / hours_per_day)
    buffer_days = math.ceil(work_days_needed * RECOMMENDED_BUFFER_RATIO)
    total_days = work_days_needed + buffer_days

    current = as_date(today)
    added = 0
    while added < total_days:
        current += timedelta(days=1)
        if js_weekday(current) in MONDAY_TO_FRIDAY:
            added += 1
    return current


def is_deadline_passed(deadline: DateLike, now: DateLike) -> bool:
    """True once now is later than the deadline instant."""
    return as_datetime(now) > as_datetime(deadline)


def is_deadline_approaching(deadline: DateLike, now: DateLike) -> bool:
    """True when the deadline falls within the next 3 days and has not passed."""
    deadline_at = as_datetime(deadline)
    now_at = as_datetime(now)
    return now_at <= deadline_at <= now_at + timedelta(days=APPROACHING_WINDOW_DAYS)


def get_days_until_deadline(deadline: DateLike, now: DateLike) -> int:
    """Days left until the deadline, rounded up."""
    return days_ceil(as_datetime(deadline) - as_datetime(now))


def get_days_overdue(deadline: DateLike, now: DateLike) -> int:
    """Days elapsed since the deadline, rounded up."""
    return days_ceil(as_datetime(now) - as_datetime(deadline))


def _hard_deadline_blocks(
    deadline_type: Optional[DeadlineType], deadline: Optional[date], now: DateLike
) -> bool:
    return (
        deadline_type == DeadlineType.HARD
        and deadline is not None
        and not is_deadline_passed(deadline, now)
    )


def can_exceed_planned_hours_for_assignment(assignment: TaskAssignment, now: DateLike) -> bool:
    """Whether hours beyond the allocation may be logged on an assignment.

    A hard deadline forbids it until the deadline has passed. Soft deadlines
    and assignments without a deadline always allow it.
    """
    return not _hard_deadline_blocks(assignment.deadline_type, assignment.deadline, now)


def can_exceed_planned_hours_for_slot(slot: TimeSlot, now: DateLike) -> bool:
    """Whether hours beyond the plan may be logged on a time slot.

    Same rule as for assignments. Slots an employee planned for themselves
    are never blocked.
    """
    if not slot.is_assigned_by_admin:
        return True
    return not _hard_deadline_blocks(slot.deadline_type, slot.deadline, now)


def validate_deadline(deadline: DateLike, now: DateLike) -> DeadlineValidation:
    """Reject deadlines that lie before now."""
    if as_datetime(deadline) < as_datetime(now):
        return DeadlineValidation(is_valid=False, error=errors.deadline_in_past())
    return DeadlineValidation(is_valid=True)


def is_task_assignment_overdue(assignment: TaskAssignment, now: DateLike) -> bool:
    """True when the assignment has a deadline that has passed."""
    if assignment.deadline is None:
        return False
    return is_deadline_passed(assignment.deadline, now)


def is_time_slot_overdue(slot: TimeSlot, now: DateLike) -> bool:
    """True when the slot's deadline has passed and the slot is not completed."""
    if slot.deadline is None:
        return False
    return is_deadline_passed(slot.deadline, now) and slot.status != SlotStatus.COMPLETED


def get_deadline_status(
    deadline: DateLike,
    now: DateLike,
    deadline_type: DeadlineType | str = DeadlineType.SOFT,
) -> DeadlineStatus:
    """Classify a deadline as overdue, approaching or normal, with display text."""
    if is_deadline_passed(deadline, now):
        days = get_days_overdue(deadline, now)
        if DeadlineType(deadline_type) == DeadlineType.HARD:
            text = f"Overdue by {days} days"
        else:
            text = f"Exceeded by {days} days"
        return DeadlineStatus(state=DeadlineState.OVERDUE, days=days, text=text)

    days = get_days_until_deadline(deadline, now)
    state = DeadlineState.APPROACHING if is_deadline_approaching(deadline, now) else DeadlineState.NORMAL
    return DeadlineStatus(state=state, days=days, text=f"{days} days left")
