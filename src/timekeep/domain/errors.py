"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations or illegal transitions."""


def employee_not_found(employee_id: int) -> str:
    """Return message for missing employee."""
    return f"Employee {employee_id} not found"


def employee_name_taken(name: str) -> str:
    """Return message for duplicate employee name."""
    return f"Employee with name '{name}' already exists"


def employment_date_missing(name: str) -> str:
    """Return message when an employee has no employment date on record."""
    return f"Employee '{name}' has no employment date"


def leave_request_not_found(request_id: int) -> str:
    """Return message for missing leave request."""
    return f"Leave request {request_id} not found"


def invalid_leave_dates(start, end) -> str:
    """Return message for a leave request whose end precedes its start."""
    return f"Invalid leave dates: {end} is before {start}"


def leave_transition_blocked(request_id: int, status: str, target: str) -> str:
    """Return message when a leave request cannot move to the target status."""
    return f"Cannot mark leave request {request_id} as {target}: it is {status}"


def vacation_not_yet_eligible(required_months: int) -> str:
    """Return reason shown before vacation eligibility is reached."""
    return f"Vacation becomes available after {required_months} months of employment"


def insufficient_vacation_balance(balance: int) -> str:
    """Return reason shown when the balance does not cover a request."""
    return f"Not enough vacation days. Available: {balance} days"


def deadline_in_past() -> str:
    """Return message for a deadline that already lies in the past."""
    return "Deadline cannot be in the past"


def assignment_not_found(assignment_id: int) -> str:
    """Return message for missing task assignment."""
    return f"Task assignment {assignment_id} not found"


def time_slot_not_found(slot_id: int) -> str:
    """Return message for missing time slot."""
    return f"Time slot {slot_id} not found"


def planned_hours_locked(kind: str, item_id: int, deadline, planned) -> str:
    """Return message when a hard deadline forbids exceeding planned hours."""
    return (
        f"Cannot exceed {planned} planned hours on {kind} {item_id}: "
        f"hard deadline {deadline} has not passed yet"
    )
