"""Task assignment and time slot commands."""

import click
from timekeep.cli.employee_resolution import resolve_employee_or_exit
from timekeep.cli.error_handling import handle_domain_error
from timekeep.cli.parsing import parse_date_or_exit, parse_hours_or_exit
from timekeep.domain.employee import EmployeeService
from timekeep.domain.entities import DeadlineType, TaskPriority
from timekeep.domain.workload import WorkloadService

PRIORITIES = [p.value for p in TaskPriority]
DEADLINE_TYPES = [t.value for t in DeadlineType]


@click.group()
def work_group():
    """Assign tasks, plan time slots and log hours."""
    pass


@work_group.command("assign")
@click.argument("employee", metavar="EMPLOYEE")
@click.argument("task")
@click.option("--hours", required=True, help="Allocated hours")
@click.option("--deadline", help="Deadline date")
@click.option("--deadline-type", type=click.Choice(DEADLINE_TYPES), help="Deadline type (default: soft)")
@click.option("--priority", type=click.Choice(PRIORITIES), default="medium", show_default=True)
@click.pass_context
def assign_task(
    ctx,
    employee: str,
    task: str,
    hours: str,
    deadline: str | None,
    deadline_type: str | None,
    priority: str,
):
    """Allocate hours of TASK to EMPLOYEE (name or ID).

    Examples:
        timekeep work assign "Anna Petrova" "Quarterly report" --hours 16 --deadline 2024-03-29
    """
    db = ctx.obj["db"]
    employee_id = resolve_employee_or_exit(ctx, EmployeeService(db), employee)
    allocated = parse_hours_or_exit(ctx, hours)
    deadline_date = parse_date_or_exit(ctx, deadline, "deadline")

    try:
        assignment_id = WorkloadService(db).create_assignment(
            employee_id=employee_id,
            task=task,
            allocated_hours=allocated,
            now=ctx.obj["now"],
            deadline=deadline_date,
            deadline_type=DeadlineType(deadline_type) if deadline_type else None,
            priority=TaskPriority(priority),
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Created task assignment {assignment_id}")


@work_group.command("slot")
@click.argument("employee", metavar="EMPLOYEE")
@click.argument("task")
@click.option("--date", "slot_date", required=True, help="Day of the slot")
@click.option("--hours", required=True, help="Planned hours")
@click.option("--deadline", help="Deadline date")
@click.option("--deadline-type", type=click.Choice(DEADLINE_TYPES), help="Deadline type (default: soft)")
@click.option("--self-planned", is_flag=True, help="Slot planned by the employee, not an administrator")
@click.pass_context
def plan_slot(
    ctx,
    employee: str,
    task: str,
    slot_date: str,
    hours: str,
    deadline: str | None,
    deadline_type: str | None,
    self_planned: bool,
):
    """Plan a time slot of TASK for EMPLOYEE (name or ID)."""
    db = ctx.obj["db"]
    employee_id = resolve_employee_or_exit(ctx, EmployeeService(db), employee)
    day = parse_date_or_exit(ctx, slot_date, "slot date")
    planned = parse_hours_or_exit(ctx, hours)
    deadline_date = parse_date_or_exit(ctx, deadline, "deadline")

    try:
        slot_id = WorkloadService(db).create_slot(
            employee_id=employee_id,
            task=task,
            slot_date=day,
            planned_hours=planned,
            now=ctx.obj["now"],
            deadline=deadline_date,
            deadline_type=DeadlineType(deadline_type) if deadline_type else None,
            is_assigned_by_admin=not self_planned,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Created time slot {slot_id}")


@work_group.command("log-slot")
@click.argument("slot_id", type=int)
@click.argument("hours")
@click.option("--complete", is_flag=True, help="Mark the slot completed")
@click.option("--reopen", is_flag=True, help="Move a completed slot back to in-progress")
@click.pass_context
def log_slot(ctx, slot_id: int, hours: str, complete: bool, reopen: bool):
    """Log HOURS worked on a time slot."""
    worked = parse_hours_or_exit(ctx, hours)
    try:
        slot = WorkloadService(ctx.obj["db"]).log_slot_hours(
            slot_id, worked, ctx.obj["now"], complete=complete, reopen=reopen
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Slot {slot.id}: {slot.actual_hours}/{slot.planned_hours}h ({slot.status.value})")


@work_group.command("log-assignment")
@click.argument("assignment_id", type=int)
@click.argument("hours")
@click.pass_context
def log_assignment(ctx, assignment_id: int, hours: str):
    """Log HOURS worked on a task assignment."""
    worked = parse_hours_or_exit(ctx, hours)
    try:
        assignment = WorkloadService(ctx.obj["db"]).log_assignment_hours(
            assignment_id, worked, ctx.obj["now"]
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(
        f"Assignment {assignment.id}: {assignment.actual_hours}/{assignment.allocated_hours}h"
    )


def register_commands(cli):
    """Register work commands with main CLI."""
    cli.add_command(work_group, name="work")
