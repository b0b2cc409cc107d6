"""Domain model entities for timekeep.

These are pure data classes representing business concepts, independent of
database schema. Calculator results are plain values created fresh on each
call; records mirror the rows the calculators read.
"""

from dataclasses import dataclass
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional


class LeaveType(str, Enum):
    """Kind of leave an employee requests."""

    VACATION = "vacation"
    SICK_LEAVE = "sick_leave"
    PERSONAL_LEAVE = "personal_leave"
    COMPENSATORY_LEAVE = "compensatory_leave"


class LeaveStatus(str, Enum):
    """Lifecycle state of a leave request."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    CANCELLED = "cancelled"


class TaskPriority(str, Enum):
    """Task priority, drives deadline buffers and multipliers."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class DeadlineType(str, Enum):
    """Soft deadlines may be overrun; hard ones gate extra hours."""

    SOFT = "soft"
    HARD = "hard"


class SlotStatus(str, Enum):
    """Progress of a logged time slot."""

    PLANNED = "planned"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class HistoryEntryType(str, Enum):
    """Kind of vacation ledger entry."""

    EARNED = "earned"
    USED = "used"


class DeadlineState(str, Enum):
    """Display state of a deadline relative to now."""

    NORMAL = "normal"
    APPROACHING = "approaching"
    OVERDUE = "overdue"


@dataclass(frozen=True)
class VacationCalculation:
    """Vacation balance as of a given date."""

    total_worked_months: int
    earned_days: Decimal
    used_days: Decimal
    current_balance: int
    can_take_vacation: bool
    next_earn_date: date
    work_year_start: date
    work_year_end: date


@dataclass(frozen=True)
class VacationHistoryEntry:
    """Single accrual or usage entry in the vacation ledger."""

    date: date
    type: HistoryEntryType
    days: Decimal
    description: str
    balance: Decimal


@dataclass(frozen=True)
class VacationEligibility:
    """Outcome of a vacation request check.

    ``reason`` is only set when ``can_take`` is False.
    """

    can_take: bool
    reason: Optional[str] = None


@dataclass(frozen=True)
class WorkedPeriod:
    """Length of employment split into whole years and remaining months."""

    years: int
    months: int


@dataclass(frozen=True)
class DeadlineCalculationParams:
    """Inputs for the advanced deadline calculation.

    ``working_days`` holds weekday indices with Sunday=0 through Saturday=6.
    ``priority_buffers`` maps each priority to extra working days.
    """

    start_date: date
    total_hours: float | Decimal
    working_hours_per_day: float | Decimal
    working_days: frozenset[int]
    priority: TaskPriority
    planning_factor: float | Decimal = 1.4
    priority_buffers: Optional[dict[TaskPriority, float | Decimal]] = None


@dataclass(frozen=True)
class DeadlineBreakdown:
    """Components of a calculated deadline, kept for display and audit."""

    pure_work_days: int
    planning_factor: Decimal
    priority_buffer: Decimal


@dataclass(frozen=True)
class DeadlineCalculationResult:
    """Calculated deadline with the day counts that produced it."""

    deadline: date
    working_days_needed: int
    planning_days: int
    buffer_days: Decimal
    total_days: Decimal
    breakdown: DeadlineBreakdown


@dataclass(frozen=True)
class DeadlineValidation:
    """Outcome of validating a proposed deadline."""

    is_valid: bool
    error: Optional[str] = None


@dataclass(frozen=True)
class DeadlineStatus:
    """Deadline state label with the day count shown next to it."""

    state: DeadlineState
    days: int
    text: str


@dataclass(frozen=True)
class Employee:
    """Employee domain entity."""

    id: int
    name: str
    email: Optional[str]
    employment_date: Optional[date]
    termination_date: Optional[date]
    created_at: datetime


@dataclass(frozen=True)
class LeaveRequest:
    """Leave request domain entity."""

    id: int
    employee_id: int
    type: LeaveType
    start_date: date
    end_date: date
    days_count: int
    reason: Optional[str]
    status: LeaveStatus
    approved_by: Optional[str]
    approved_at: Optional[datetime]
    notes: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class TaskAssignment:
    """Hours of a task allocated to one employee, with its own deadline."""

    id: int
    employee_id: int
    task: str
    allocated_hours: Decimal
    actual_hours: Decimal
    deadline: Optional[date] = None
    deadline_type: Optional[DeadlineType] = None
    priority: TaskPriority = TaskPriority.MEDIUM
    completed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class TimeSlot:
    """Time logged (or planned) by an employee against a task."""

    id: int
    employee_id: int
    task: str
    date: date
    planned_hours: Decimal
    actual_hours: Decimal
    status: SlotStatus = SlotStatus.PLANNED
    deadline: Optional[date] = None
    deadline_type: Optional[DeadlineType] = None
    is_assigned_by_admin: bool = True
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class OverdueItem:
    """Slot or assignment whose deadline has passed."""

    kind: str
    id: int
    employee_id: int
    task: str
    deadline: date
    deadline_type: DeadlineType
    days_overdue: int
    planned_hours: Decimal
    actual_hours: Decimal
