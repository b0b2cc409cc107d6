"""Hour amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re

_DURATION = re.compile(r"^(?:(?P<hours>\d+(?:\.\d+)?)\s*h)?\s*(?:(?P<minutes>\d+)\s*m(?:in)?)?$")


def parse_hours(hours_str: str) -> Decimal:
    """Parse an hour amount into a Decimal number of hours.

    Handles various formats:
    - "8"
    - "7.5"
    - "7,5"
    - "7.5h"
    - "7h 30m"
    - "45m" / "45min"

    Args:
        hours_str: Hour amount string

    Returns:
        Decimal hours

    Raises:
        ValueError: If the string cannot be parsed, is not finite or is negative
    """
    if not hours_str or not hours_str.strip():
        raise ValueError("Empty hours string")

    text = hours_str.strip().lower().replace(",", ".")

    match = _DURATION.match(text)
    if match and (match.group("hours") or match.group("minutes")):
        hours = Decimal(match.group("hours") or 0)
        minutes = Decimal(match.group("minutes") or 0)
        return hours + minutes / 60

    try:
        hours = Decimal(text)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse hours '{hours_str}': {e!r}")

    if not hours.is_finite():
        raise ValueError(f"Hours must be a finite number: '{hours_str}'")
    if hours < 0:
        raise ValueError(f"Hours cannot be negative: '{hours_str}'")
    return hours
