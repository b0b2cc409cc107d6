"""Working-day set parsing utilities.

Weekday indices follow the Sunday=0 ... Saturday=6 convention.
"""

_NAMES = {
    "sun": 0,
    "mon": 1,
    "tue": 2,
    "wed": 3,
    "thu": 4,
    "fri": 5,
    "sat": 6,
}
_FULL_NAMES = {
    "sunday": 0,
    "monday": 1,
    "tuesday": 2,
    "wednesday": 3,
    "thursday": 4,
    "friday": 5,
    "saturday": 6,
}


def _parse_day(token: str) -> int:
    token = token.strip().lower()
    if token.isdigit():
        index = int(token)
        if 0 <= index <= 6:
            return index
        raise ValueError(f"Weekday index out of range (0-6): '{token}'")
    if token in _NAMES:
        return _NAMES[token]
    if token in _FULL_NAMES:
        return _FULL_NAMES[token]
    raise ValueError(f"Unknown weekday '{token}'")


def parse_working_days(text: str) -> frozenset[int]:
    """Parse a set of working days.

    Handles various formats:
    - "mon-fri" (ranges wrap around the week, so "sat-mon" works)
    - "mon,wed,fri"
    - "1,2,3,4,5"

    Args:
        text: Working day specification

    Returns:
        Frozen set of weekday indices

    Raises:
        ValueError: If the specification cannot be parsed or is empty
    """
    if not text or not text.strip():
        raise ValueError("Empty working days")

    days: set[int] = set()
    for part in text.split(","):
        part = part.strip()
        if not part:
            continue
        if "-" in part:
            first, last = (_parse_day(p) for p in part.split("-", 1))
            index = first
            days.add(index)
            while index != last:
                index = (index + 1) % 7
                days.add(index)
        else:
            days.add(_parse_day(part))

    if not days:
        raise ValueError(f"No working days in '{text}'")
    return frozenset(days)
