"""CLI helpers for parsing option values."""

from datetime import date
from decimal import Decimal

import click

from timekeep.utils.date_parser import parse_date
from timekeep.utils.hours_parser import parse_hours
from timekeep.utils.weekday_parser import parse_working_days


def today_of(ctx: click.Context) -> date:
    """Calendar date of the instant the command runs at."""
    return ctx.obj["now"].date()


def parse_date_or_exit(ctx: click.Context, value: str | None, label: str = "date") -> date | None:
    """Parse a date option relative to the command's clock, or exit."""
    if value is None:
        return None
    try:
        return parse_date(value, today=today_of(ctx))
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)


def parse_hours_or_exit(ctx: click.Context, value: str, label: str = "hours") -> Decimal:
    """Parse an hour amount option, or exit."""
    try:
        return parse_hours(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)


def parse_working_days_or_exit(ctx: click.Context, value: str) -> frozenset[int]:
    """Parse a working day set option, or exit."""
    try:
        return parse_working_days(value)
    except ValueError as e:
        click.echo(f"Error: Invalid working days: {e}", err=True)
        ctx.exit(1)
