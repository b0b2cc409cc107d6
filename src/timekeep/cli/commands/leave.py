"""Leave request commands."""

import click
from timekeep.cli.employee_resolution import resolve_employee_or_exit
from timekeep.cli.error_handling import handle_domain_error
from timekeep.cli.parsing import parse_date_or_exit
from timekeep.domain.employee import EmployeeService
from timekeep.domain.entities import LeaveStatus, LeaveType
from timekeep.domain.leave import LeaveRequestService

LEAVE_TYPES = [t.value for t in LeaveType]
LEAVE_STATUSES = [s.value for s in LeaveStatus]


@click.group()
def leave_group():
    """File and decide leave requests."""
    pass


@leave_group.command("request")
@click.argument("employee", metavar="EMPLOYEE")
@click.option("--start", "start_date", required=True, help="First day of leave (YYYY-MM-DD or relative)")
@click.option("--end", "end_date", required=True, help="Last day of leave (YYYY-MM-DD or relative)")
@click.option("--type", "leave_type", type=click.Choice(LEAVE_TYPES), default="vacation", show_default=True)
@click.option("--reason", help="Reason for the leave")
@click.option("--notes", help="Notes")
@click.pass_context
def request_leave(
    ctx,
    employee: str,
    start_date: str,
    end_date: str,
    leave_type: str,
    reason: str | None,
    notes: str | None,
):
    """File a leave request for EMPLOYEE (name or ID).

    Examples:
        timekeep leave request "Anna Petrova" --start 2024-08-05 --end 2024-08-18
        timekeep leave request 2 --start tomorrow --end tomorrow --type sick_leave
    """
    db = ctx.obj["db"]
    employee_id = resolve_employee_or_exit(ctx, EmployeeService(db), employee)
    start = parse_date_or_exit(ctx, start_date, "start date")
    end = parse_date_or_exit(ctx, end_date, "end date")

    service = LeaveRequestService(db)
    try:
        request_id = service.create_request(
            employee_id=employee_id,
            start_date=start,
            end_date=end,
            leave_type=LeaveType(leave_type),
            reason=reason,
            notes=notes,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    request = service.get_request(request_id)
    click.echo(f"Created leave request {request_id} ({request.days_count} days, pending)")


@leave_group.command("approve")
@click.argument("request_id", type=int)
@click.option("--by", "approved_by", default="admin", show_default=True, help="Approver name")
@click.pass_context
def approve_leave(ctx, request_id: int, approved_by: str):
    """Approve a pending leave request."""
    service = LeaveRequestService(ctx.obj["db"])
    try:
        service.approve(request_id, approved_by=approved_by, approved_at=ctx.obj["now"])
    except ValueError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Approved leave request {request_id}")


@leave_group.command("reject")
@click.argument("request_id", type=int)
@click.pass_context
def reject_leave(ctx, request_id: int):
    """Reject a pending leave request."""
    service = LeaveRequestService(ctx.obj["db"])
    try:
        service.reject(request_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Rejected leave request {request_id}")


@leave_group.command("cancel")
@click.argument("request_id", type=int)
@click.pass_context
def cancel_leave(ctx, request_id: int):
    """Cancel a pending or approved leave request."""
    service = LeaveRequestService(ctx.obj["db"])
    try:
        service.cancel(request_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Cancelled leave request {request_id}")


@leave_group.command("list")
@click.option("--employee", help="Employee name or ID")
@click.option("--status", type=click.Choice(LEAVE_STATUSES), help="Only requests with this status")
@click.option("--type", "leave_type", type=click.Choice(LEAVE_TYPES), help="Only requests of this type")
@click.pass_context
def list_leave(ctx, employee: str | None, status: str | None, leave_type: str | None):
    """List leave requests."""
    db = ctx.obj["db"]
    employee_service = EmployeeService(db)
    employee_id = None
    if employee is not None:
        employee_id = resolve_employee_or_exit(ctx, employee_service, employee)

    requests = LeaveRequestService(db).list_requests(
        employee_id=employee_id,
        leave_type=LeaveType(leave_type) if leave_type else None,
        status=LeaveStatus(status) if status else None,
    )
    if not requests:
        click.echo("No leave requests found.")
        return

    names = {emp.id: emp.name for emp in employee_service.list_employees()}
    click.echo(f"\nFound {len(requests)} leave request(s):")
    click.echo("-" * 100)
    click.echo(f"{'ID':<6} {'Employee':<24} {'Type':<20} {'Start':<12} {'End':<12} {'Days':>5}  {'Status':<10}")
    click.echo("-" * 100)
    for req in requests:
        click.echo(
            f"{req.id:<6} {names.get(req.employee_id, 'Unknown'):<24} {req.type.value:<20} "
            f"{req.start_date.isoformat():<12} {req.end_date.isoformat():<12} {req.days_count:>5}  "
            f"{req.status.value:<10}"
        )


def register_commands(cli):
    """Register leave commands with main CLI."""
    cli.add_command(leave_group, name="leave")
