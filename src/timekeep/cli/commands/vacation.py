"""Vacation balance commands."""

import click
from timekeep.cli.employee_resolution import resolve_employee_or_exit
from timekeep.cli.error_handling import handle_domain_error
from timekeep.cli.parsing import parse_date_or_exit, today_of
from timekeep.domain.balance import VacationService
from timekeep.domain.employee import EmployeeService
from timekeep.domain.entities import VacationCalculation
from timekeep.domain.vacation import calculate_vacation_balance, format_worked_period


@click.group()
def vacation_group():
    """Show vacation balances and history."""
    pass


def _echo_calculation(calculation: VacationCalculation, locale: str) -> None:
    worked = format_worked_period(calculation.total_worked_months, locale=locale)
    click.echo(f"Worked:          {worked} ({calculation.total_worked_months} months)")
    click.echo(f"Earned days:     {calculation.earned_days}")
    click.echo(f"Used days:       {calculation.used_days}")
    click.echo(f"Balance:         {calculation.current_balance}")
    click.echo(f"Can take:        {'yes' if calculation.can_take_vacation else 'no'}")
    click.echo(f"Next accrual:    {calculation.next_earn_date.isoformat()}")
    click.echo(
        f"Work year:       {calculation.work_year_start.isoformat()} - "
        f"{calculation.work_year_end.isoformat()}"
    )


@vacation_group.command("balance")
@click.argument("employee", metavar="EMPLOYEE")
@click.option("--as-of", help="Evaluate the balance on this date (default: today)")
@click.pass_context
def show_balance(ctx, employee: str, as_of: str | None):
    """Show the vacation balance of EMPLOYEE (name or ID).

    Only approved vacations that started on or before the date count as used.
    """
    db = ctx.obj["db"]
    employee_id = resolve_employee_or_exit(ctx, EmployeeService(db), employee)
    as_of_date = parse_date_or_exit(ctx, as_of, "as-of date") or today_of(ctx)

    try:
        calculation = VacationService(db).get_balance(employee_id, as_of_date)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"\nVacation balance as of {as_of_date.isoformat()}")
    click.echo("=" * 60)
    _echo_calculation(calculation, ctx.obj["settings"].locale)


@vacation_group.command("history")
@click.argument("employee", metavar="EMPLOYEE")
@click.option("--as-of", help="Last date accruals are listed for (default: today)")
@click.option(
    "--point-in-time",
    is_flag=True,
    help="Replay the running balance in date order instead of subtracting usage after all accruals",
)
@click.pass_context
def show_history(ctx, employee: str, as_of: str | None, point_in_time: bool):
    """Show the accrual and usage ledger of EMPLOYEE (name or ID)."""
    db = ctx.obj["db"]
    employee_id = resolve_employee_or_exit(ctx, EmployeeService(db), employee)
    as_of_date = parse_date_or_exit(ctx, as_of, "as-of date") or today_of(ctx)

    try:
        history = VacationService(db).get_history(employee_id, as_of_date, point_in_time=point_in_time)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    if not history:
        click.echo("No vacation history.")
        return

    click.echo(f"\n{'Date':<12} {'Type':<8} {'Days':>7} {'Balance':>9}  Description")
    click.echo("-" * 80)
    for entry in history:
        sign = "+" if entry.type.value == "earned" else "-"
        click.echo(
            f"{entry.date.isoformat():<12} {entry.type.value:<8} {sign}{entry.days:>6} "
            f"{entry.balance:>9}  {entry.description}"
        )


@vacation_group.command("check")
@click.argument("employee", metavar="EMPLOYEE")
@click.argument("days", type=int)
@click.option("--as-of", help="Evaluate eligibility on this date (default: today)")
@click.pass_context
def check_vacation(ctx, employee: str, days: int, as_of: str | None):
    """Check whether EMPLOYEE can take DAYS of vacation.

    Exits with status 1 when the vacation cannot be granted.
    """
    db = ctx.obj["db"]
    employee_id = resolve_employee_or_exit(ctx, EmployeeService(db), employee)
    as_of_date = parse_date_or_exit(ctx, as_of, "as-of date") or today_of(ctx)

    try:
        eligibility = VacationService(db).check_request(employee_id, as_of_date, days)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    if eligibility.can_take:
        click.echo(f"OK: {days} days can be taken")
    else:
        click.echo(f"Not allowed: {eligibility.reason}")
        ctx.exit(1)


@vacation_group.command("calc")
@click.option("--employment-date", required=True, help="First day of employment")
@click.option("--as-of", help="Evaluate on this date (default: today)")
@click.option("--used", type=float, default=0, show_default=True, help="Vacation days already used")
@click.pass_context
def calc_vacation(ctx, employment_date: str, as_of: str | None, used: float):
    """Calculate a balance without stored data."""
    hired = parse_date_or_exit(ctx, employment_date, "employment date")
    as_of_date = parse_date_or_exit(ctx, as_of, "as-of date") or today_of(ctx)

    calculation = calculate_vacation_balance(hired, as_of_date, used)
    _echo_calculation(calculation, ctx.obj["settings"].locale)


def register_commands(cli):
    """Register vacation commands with main CLI."""
    cli.add_command(vacation_group, name="vacation")
