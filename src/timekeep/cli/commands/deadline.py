"""Deadline calculation and status commands."""

import click
from timekeep.cli.employee_resolution import resolve_employee_or_exit
from timekeep.cli.error_handling import handle_domain_error
from timekeep.cli.parsing import (
    parse_date_or_exit,
    parse_hours_or_exit,
    parse_working_days_or_exit,
    today_of,
)
from timekeep.domain.deadline import (
    calculate_advanced_deadline,
    calculate_recommended_deadline,
    get_deadline_status,
)
from timekeep.domain.employee import EmployeeService
from timekeep.domain.entities import DeadlineCalculationParams, DeadlineType, TaskPriority
from timekeep.domain.workload import WorkloadService

PRIORITIES = [p.value for p in TaskPriority]
DEADLINE_TYPES = [t.value for t in DeadlineType]


@click.group()
def deadline_group():
    """Propose deadlines and report on them."""
    pass


@deadline_group.command("calculate")
@click.option("--hours", required=True, help="Estimated effort, e.g. 40 or 7h 30m")
@click.option("--start", help="First working day (default: today)")
@click.option("--hours-per-day", default="8", show_default=True, help="Working hours per day")
@click.option(
    "--working-days",
    default="mon-fri",
    show_default=True,
    help="Working days, e.g. mon-fri, mon,wed,fri or 1,2,3 (Sunday=0)",
)
@click.option("--planning-factor", default="1.4", show_default=True, help="Multiplier on work days")
@click.option("--priority", type=click.Choice(PRIORITIES), default="medium", show_default=True)
@click.pass_context
def calculate_deadline(
    ctx,
    hours: str,
    start: str | None,
    hours_per_day: str,
    working_days: str,
    planning_factor: str,
    priority: str,
):
    """Calculate a deadline with planning factor and priority buffer.

    Examples:
        timekeep deadline calculate --hours 40
        timekeep deadline calculate --hours 16 --start 2024-01-01 --priority urgent
    """
    total_hours = parse_hours_or_exit(ctx, hours)
    per_day = parse_hours_or_exit(ctx, hours_per_day, "hours per day")
    days = parse_working_days_or_exit(ctx, working_days)
    factor = parse_hours_or_exit(ctx, planning_factor, "planning factor")
    start_date = parse_date_or_exit(ctx, start, "start date") or today_of(ctx)

    params = DeadlineCalculationParams(
        start_date=start_date,
        total_hours=total_hours,
        working_hours_per_day=per_day,
        working_days=days,
        priority=TaskPriority(priority),
        planning_factor=factor,
    )
    try:
        result = calculate_advanced_deadline(params)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Deadline:          {result.deadline.isoformat()}")
    click.echo(f"Pure work days:    {result.working_days_needed}")
    click.echo(f"Planning days:     {result.planning_days} (x{result.breakdown.planning_factor})")
    click.echo(f"Priority buffer:   {result.buffer_days}")
    click.echo(f"Total working days: {result.total_days}")


@deadline_group.command("recommend")
@click.option("--hours", required=True, help="Planned hours")
@click.option("--priority", type=click.Choice(PRIORITIES), default="medium", show_default=True)
@click.option(
    "--work-days-per-week",
    type=click.IntRange(1, 7),
    default=5,
    show_default=True,
    help="Accepted for compatibility; the count always uses Monday to Friday",
)
@click.option("--hours-per-day", default="8", show_default=True, help="Working hours per day")
@click.pass_context
def recommend_deadline(ctx, hours: str, priority: str, work_days_per_week: int, hours_per_day: str):
    """Recommend a deadline using priority multipliers and a 20% buffer."""
    planned = parse_hours_or_exit(ctx, hours)
    per_day = parse_hours_or_exit(ctx, hours_per_day, "hours per day")

    try:
        deadline = calculate_recommended_deadline(
            planned,
            priority=TaskPriority(priority),
            work_days_per_week=work_days_per_week,
            hours_per_day=per_day,
            today=today_of(ctx),
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Recommended deadline: {deadline.isoformat()}")


@deadline_group.command("status")
@click.argument("deadline", metavar="DATE")
@click.option("--type", "deadline_type", type=click.Choice(DEADLINE_TYPES), default="soft", show_default=True)
@click.pass_context
def deadline_status(ctx, deadline: str, deadline_type: str):
    """Show whether DATE is overdue, approaching or still far off."""
    deadline_date = parse_date_or_exit(ctx, deadline, "deadline")
    status = get_deadline_status(deadline_date, ctx.obj["now"], DeadlineType(deadline_type))
    click.echo(f"{status.state.value}: {status.text}")


@deadline_group.command("overdue")
@click.option("--employee", help="Employee name or ID")
@click.pass_context
def overdue_report(ctx, employee: str | None):
    """List unfinished slots and assignments past their deadline."""
    db = ctx.obj["db"]
    employee_service = EmployeeService(db)
    employee_id = None
    if employee is not None:
        employee_id = resolve_employee_or_exit(ctx, employee_service, employee)

    items = WorkloadService(db).overdue_report(ctx.obj["now"], employee_id=employee_id)
    if not items:
        click.echo("Nothing is overdue.")
        return

    names = {emp.id: emp.name for emp in employee_service.list_employees()}
    click.echo(f"\n{len(items)} overdue item(s):")
    click.echo("-" * 100)
    for item in items:
        status = get_deadline_status(item.deadline, ctx.obj["now"], item.deadline_type)
        click.echo(
            f"{item.kind:<10} {item.id:<5} {names.get(item.employee_id, 'Unknown'):<20} "
            f"{item.task:<24} {item.deadline.isoformat()} {item.deadline_type.value:<4}  "
            f"{item.actual_hours}/{item.planned_hours}h  {status.text}"
        )


def register_commands(cli):
    """Register deadline commands with main CLI."""
    cli.add_command(deadline_group, name="deadline")
