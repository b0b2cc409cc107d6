"""Vacation balance calculator.

Statutory accrual model: 28 calendar days of vacation per work year, earned
month by month. A month counts towards the total when at least 15 of its
calendar days fall inside the employment period, and vacation can be taken
once 6 such months have been worked.

Every function here is pure. Dates may be given as ``date`` objects or ISO
``YYYY-MM-DD`` strings.
"""

import logging
import math
from collections.abc import Iterable, Mapping
from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Optional

from timekeep.domain import errors
from timekeep.domain.entities import (
    HistoryEntryType,
    LeaveStatus,
    LeaveType,
    VacationCalculation,
    VacationEligibility,
    VacationHistoryEntry,
    WorkedPeriod,
)
from timekeep.utils.calendar import (
    DateLike,
    add_years,
    as_date,
    first_of_next_month,
    inclusive_days,
    iter_month_starts,
    month_end,
)
from timekeep.utils.plurals import get_plural_policy

logger = logging.getLogger(__name__)

ANNUAL_VACATION_DAYS = 28
MONTHS_PER_YEAR = 12
FULL_MONTH_MIN_DAYS = 15
ELIGIBILITY_MONTHS = 6

CENT = Decimal("0.01")
MONTHLY_ACCRUAL = (Decimal(ANNUAL_VACATION_DAYS) / MONTHS_PER_YEAR).quantize(CENT, ROUND_HALF_UP)


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _worked_days_by_month(employment: date, as_of: date) -> Iterable[tuple[date, int]]:
    """Yield (first day of month, days employed in that month) up to as_of."""
    for first_day in iter_month_starts(employment, as_of):
        last_day = min(month_end(first_day), as_of)
        start = max(first_day, employment)
        yield first_day, inclusive_days(start, last_day)


def calculate_worked_months(employment_date: DateLike, as_of_date: DateLike) -> int:
    """Count full months of employment as of a date.

    A month is full when at least 15 of its days fall between the employment
    date and the as-of date (both inclusive). An employment date after the
    as-of date yields 0.
    """
    employment = as_date(employment_date)
    as_of = as_date(as_of_date)
    if employment > as_of:
        return 0

    return sum(
        1
        for _, worked_days in _worked_days_by_month(employment, as_of)
        if worked_days >= FULL_MONTH_MIN_DAYS
    )


def calculate_vacation_balance(
    employment_date: DateLike, as_of_date: DateLike, used_vacation_days: int | float | Decimal
) -> VacationCalculation:
    """Calculate the vacation balance of an employee as of a date.

    Args:
        employment_date: First day of employment
        as_of_date: Date the balance is evaluated at
        used_vacation_days: Days already consumed by approved requests

    Returns:
        VacationCalculation. ``current_balance`` is floored, so fractional
        accrual never rounds in the employee's favour and may go negative
        when vacation was taken in advance.
    """
    employment = as_date(employment_date)
    as_of = as_date(as_of_date)
    used = _to_decimal(used_vacation_days)

    worked_months = calculate_worked_months(employment, as_of)
    earned = (Decimal(worked_months) * ANNUAL_VACATION_DAYS / MONTHS_PER_YEAR).quantize(
        CENT, ROUND_HALF_UP
    )

    calculation = VacationCalculation(
        total_worked_months=worked_months,
        earned_days=earned,
        used_days=used,
        current_balance=math.floor(earned - used),
        can_take_vacation=worked_months >= ELIGIBILITY_MONTHS,
        next_earn_date=first_of_next_month(as_of),
        work_year_start=employment,
        work_year_end=add_years(employment, 1) - timedelta(days=1),
    )
    logger.debug(
        "Vacation balance for employment %s as of %s: %s months, %s earned, %s balance",
        employment,
        as_of,
        worked_months,
        earned,
        calculation.current_balance,
    )
    return calculation


_MISSING = object()


def _request_value(request: Any, *names: str, default: Any = _MISSING) -> Any:
    """Read a field from a LeaveRequest entity or a plain mapping."""
    for name in names:
        if isinstance(request, Mapping):
            if name in request:
                return request[name]
        elif hasattr(request, name):
            return getattr(request, name)
    if default is not _MISSING:
        return default
    raise KeyError(f"Vacation request has none of the fields: {', '.join(names)}")


def _approved_usages(vacation_requests: Iterable[Any]) -> list[tuple[date, Decimal]]:
    """Return (start date, days) of approved requests sorted by start date."""
    usages = []
    for request in vacation_requests:
        status = _request_value(request, "status")
        if status != LeaveStatus.APPROVED:
            continue
        start = as_date(_request_value(request, "start_date", "startDate"))
        days = _to_decimal(_request_value(request, "days_count", "daysCount"))
        usages.append((start, days))
    usages.sort(key=lambda usage: usage[0])
    return usages


def generate_vacation_history(
    employment_date: DateLike,
    as_of_date: DateLike,
    vacation_requests: Iterable[Any],
    point_in_time: bool = False,
) -> list[VacationHistoryEntry]:
    """Build the chronological ledger of accrued and used vacation days.

    Each full month adds an ``earned`` entry of 2.33 days dated at the last
    day of that month. Each approved request adds a ``used`` entry dated at
    its start date. The list is sorted by date.

    By default the running balance is computed the historical way: all
    accruals up to ``as_of_date`` are applied first and the usages are
    subtracted afterwards, so the balance shown on a ``used`` entry does not
    reflect accruals that happen later in time. With ``point_in_time=True``
    the balance is replayed in date order instead.

    Args:
        employment_date: First day of employment
        as_of_date: Last date accruals are generated for
        vacation_requests: LeaveRequest entities or mappings with status,
            start date and day count
        point_in_time: Replay the running balance chronologically

    Returns:
        List of VacationHistoryEntry sorted by date
    """
    employment = as_date(employment_date)
    as_of = as_date(as_of_date)

    earned: list[tuple[date, Decimal, str]] = []
    for first_day, worked_days in _worked_days_by_month(employment, as_of):
        if worked_days >= FULL_MONTH_MIN_DAYS:
            description = f"Earned for {first_day:%B %Y} ({worked_days} days)"
            earned.append((month_end(first_day), MONTHLY_ACCRUAL, description))

    used = [
        (start, days, "Vacation used") for start, days in _approved_usages(vacation_requests)
    ]

    events = [(entry, HistoryEntryType.EARNED) for entry in earned]
    events += [(entry, HistoryEntryType.USED) for entry in used]
    if point_in_time:
        # earned before used on the same day
        events.sort(key=lambda event: (event[0][0], event[1] == HistoryEntryType.USED))

    history = []
    balance = Decimal(0)
    for (entry_date, days, description), entry_type in events:
        if entry_type == HistoryEntryType.EARNED:
            balance += days
        else:
            balance -= days
        history.append(
            VacationHistoryEntry(
                date=entry_date,
                type=entry_type,
                days=days,
                description=description,
                balance=balance.quantize(CENT, ROUND_HALF_UP),
            )
        )

    history.sort(key=lambda entry: entry.date)
    return history


def can_take_vacation(
    employment_date: DateLike,
    as_of_date: DateLike,
    used_vacation_days: int | float | Decimal,
    requested_days: int | float | Decimal,
) -> VacationEligibility:
    """Check whether a vacation of requested_days can be granted.

    Returns:
        VacationEligibility with a reason when the request cannot be granted
    """
    calculation = calculate_vacation_balance(employment_date, as_of_date, used_vacation_days)

    if not calculation.can_take_vacation:
        return VacationEligibility(
            can_take=False, reason=errors.vacation_not_yet_eligible(ELIGIBILITY_MONTHS)
        )

    if calculation.current_balance < _to_decimal(requested_days):
        return VacationEligibility(
            can_take=False,
            reason=errors.insufficient_vacation_balance(calculation.current_balance),
        )

    return VacationEligibility(can_take=True)


def split_worked_period(months: int) -> WorkedPeriod:
    """Split a month count into whole years and remaining months."""
    return WorkedPeriod(years=months // MONTHS_PER_YEAR, months=months % MONTHS_PER_YEAR)


def format_worked_period(months: int, locale: str = "en") -> str:
    """Render a month count as e.g. '2 years 3 months'.

    Raises:
        ValidationError: If no wording is registered for the locale
    """
    policy = get_plural_policy(locale)
    period = split_worked_period(months)

    parts = []
    if period.years > 0:
        parts.append(policy.format_years(period.years))
    if period.months > 0:
        parts.append(policy.format_months(period.months))

    return " ".join(parts) or policy.format_months(0)


def count_leave_days(start_date: DateLike, end_date: DateLike) -> int:
    """Count calendar days of a leave, both ends included.

    The result is zero or negative when the end precedes the start.
    """
    return inclusive_days(as_date(start_date), as_date(end_date))


def sum_used_vacation_days(
    requests: Iterable[Any], as_of: Optional[DateLike] = None
) -> Decimal:
    """Sum days of approved vacation requests.

    Args:
        requests: LeaveRequest entities or mappings
        as_of: If given, only requests starting on or before this date count

    Returns:
        Total used days
    """
    cutoff = as_date(as_of) if as_of is not None else None
    total = Decimal(0)
    for request in requests:
        if _request_value(request, "status") != LeaveStatus.APPROVED:
            continue
        if _request_value(request, "type", default=LeaveType.VACATION) != LeaveType.VACATION:
            continue
        start = as_date(_request_value(request, "start_date", "startDate"))
        if cutoff is not None and start > cutoff:
            continue
        total += _to_decimal(_request_value(request, "days_count", "daysCount"))
    return total
