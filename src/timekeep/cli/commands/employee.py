"""Employee management commands."""

import click
from timekeep.cli.employee_resolution import resolve_employee_or_exit
from timekeep.cli.error_handling import handle_domain_error
from timekeep.cli.parsing import parse_date_or_exit, today_of
from timekeep.domain.employee import EmployeeService
from timekeep.domain.vacation import calculate_worked_months, format_worked_period


@click.group()
def employee_group():
    """Manage employees."""
    pass


@employee_group.command("add")
@click.argument("name", metavar="NAME")
@click.option("--email", help="Email address")
@click.option("--employment-date", help="First day of employment (YYYY-MM-DD)")
@click.pass_context
def add_employee(ctx, name: str, email: str | None, employment_date: str | None):
    """Add an employee.

    Examples:
        timekeep employee add "Anna Petrova" --employment-date 2024-01-15
        timekeep employee add "Ivan" --email ivan@example.com
    """
    db = ctx.obj["db"]
    service = EmployeeService(db)
    hired = parse_date_or_exit(ctx, employment_date, "employment date")

    try:
        employee_id = service.create_employee(name=name, email=email, employment_date=hired)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Created employee '{name.strip()}' (ID: {employee_id})")
    if hired is not None:
        click.echo(f"Employment date set to {hired.isoformat()}")


@employee_group.command("list")
@click.pass_context
def list_employees(ctx):
    """List all employees with their length of service."""
    db = ctx.obj["db"]
    service = EmployeeService(db)
    locale = ctx.obj["settings"].locale
    today = today_of(ctx)

    employees = service.list_employees()
    if not employees:
        click.echo("No employees found.")
        return

    click.echo("\nEmployees:")
    click.echo("-" * 80)
    for emp in employees:
        if emp.employment_date is None:
            hired = "-"
            service_length = "no employment date"
        else:
            hired = emp.employment_date.isoformat()
            end = min(today, emp.termination_date) if emp.termination_date else today
            months = calculate_worked_months(emp.employment_date, end)
            service_length = format_worked_period(months, locale=locale)
        click.echo(f"ID: {emp.id:3d} | {emp.name:24s} | Hired: {hired:10s} | {service_length}")


@employee_group.command("set-employment-date")
@click.argument("employee", metavar="EMPLOYEE")
@click.argument("employment_date", metavar="DATE")
@click.pass_context
def set_employment_date(ctx, employee: str, employment_date: str):
    """Set the first day of employment.

    EMPLOYEE can be an employee name or ID.
    """
    db = ctx.obj["db"]
    service = EmployeeService(db)
    employee_id = resolve_employee_or_exit(ctx, service, employee)
    hired = parse_date_or_exit(ctx, employment_date, "employment date")

    try:
        service.set_employment_date(employee_id, hired)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Employment date of employee {employee_id} set to {hired.isoformat()}")


@employee_group.command("terminate")
@click.argument("employee", metavar="EMPLOYEE")
@click.argument("termination_date", metavar="DATE")
@click.pass_context
def terminate_employee(ctx, employee: str, termination_date: str):
    """Record the last day of employment.

    EMPLOYEE can be an employee name or ID.
    """
    db = ctx.obj["db"]
    service = EmployeeService(db)
    employee_id = resolve_employee_or_exit(ctx, service, employee)
    last_day = parse_date_or_exit(ctx, termination_date, "termination date")

    try:
        service.set_termination_date(employee_id, last_day)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Termination date of employee {employee_id} set to {last_day.isoformat()}")


def register_commands(cli):
    """Register employee commands with main CLI."""
    cli.add_command(employee_group, name="employee")
