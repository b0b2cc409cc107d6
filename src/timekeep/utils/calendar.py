"""Calendar-day arithmetic shared by the vacation and deadline calculators.

All helpers work on naive ``date``/``datetime`` values. No timezone is
modelled: a date string such as ``"2024-01-15"`` always means that calendar
day, and a date used where an instant is needed means midnight of that day.
"""

import math
from datetime import date, datetime, timedelta
from typing import Iterator

from dateutil.relativedelta import relativedelta

DateLike = date | datetime | str


def as_date(value: DateLike) -> date:
    """Coerce an ISO string, date or datetime into a date.

    Raises:
        ValueError: If a string is not an ISO date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value.strip()[:10])
    except (AttributeError, ValueError) as e:
        raise ValueError(f"Could not parse date '{value}': {e}")


def as_datetime(value: DateLike) -> datetime:
    """Coerce an ISO string, date or datetime into a datetime.

    Plain dates (and date-only strings) become midnight of that day.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, datetime.min.time())
    try:
        text = value.strip()
        if len(text) == 10:
            return datetime.combine(date.fromisoformat(text), datetime.min.time())
        return datetime.fromisoformat(text)
    except (AttributeError, ValueError) as e:
        raise ValueError(f"Could not parse datetime '{value}': {e}")


def month_start(d: date) -> date:
    """Return the first day of d's month."""
    return d.replace(day=1)


def month_end(d: date) -> date:
    """Return the last day of d's month."""
    return d.replace(day=1) + relativedelta(months=1) - timedelta(days=1)


def first_of_next_month(d: date) -> date:
    """Return the first day of the month following d."""
    return d.replace(day=1) + relativedelta(months=1)


def iter_month_starts(start: date, end: date) -> Iterator[date]:
    """Yield the first day of every month from start's month to end's month."""
    current = month_start(start)
    while current <= end:
        yield current
        current = current + relativedelta(months=1)


def inclusive_days(start: date, end: date) -> int:
    """Number of calendar days in [start, end], counting both ends."""
    return (end - start).days + 1


def add_years(d: date, years: int) -> date:
    """Shift a date by whole years (Feb 29 falls back to Feb 28)."""
    return d + relativedelta(years=years)


def js_weekday(d: date) -> int:
    """Weekday index with Sunday=0 through Saturday=6."""
    return (d.weekday() + 1) % 7


def days_ceil(delta: timedelta) -> int:
    """Round a time span up to whole days."""
    return math.ceil(delta.total_seconds() / 86400)
