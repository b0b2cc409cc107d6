"""CLI helpers for employee resolution and error handling."""

from __future__ import annotations

import click
from timekeep.domain.employee import EmployeeService
from timekeep.utils.employee_resolver import resolve_employee


def resolve_employee_or_exit(
    ctx: click.Context, employee_service: EmployeeService, employee: str | int
) -> int:
    """Resolve employee name or ID, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return resolve_employee(employee_service, employee)
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        ctx.exit(1)
