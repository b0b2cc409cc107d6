"""Utility functions for timekeep."""

from timekeep.utils.date_parser import parse_date
from timekeep.utils.hours_parser import parse_hours
from timekeep.utils.weekday_parser import parse_working_days

__all__ = ["parse_date", "parse_hours", "parse_working_days"]
