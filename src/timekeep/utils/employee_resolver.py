"""Utility for resolving employee names to IDs."""

from timekeep.domain.employee import EmployeeService


def resolve_employee(employee_service: EmployeeService, employee: str | int) -> int:
    """Resolve employee name or ID to employee ID.

    Args:
        employee_service: EmployeeService instance
        employee: Employee name (str) or ID (int or string representation of int)

    Returns:
        Employee ID

    Raises:
        ValueError: If employee is not found
    """
    # If it's already an integer, use it as ID
    if isinstance(employee, int):
        if employee_service.get_employee(employee) is None:
            raise ValueError(f"Employee ID {employee} not found")
        return employee

    # Try to parse as integer (handles string IDs like "1")
    try:
        employee_id = int(employee)
    except (ValueError, TypeError):
        employee_id = None

    if employee_id is not None:
        if employee_service.get_employee(employee_id) is None:
            raise ValueError(f"Employee ID {employee_id} not found")
        return employee_id

    found = employee_service.get_employee_by_name(employee)
    if found is None:
        raise ValueError(f"Employee '{employee}' not found")
    return found.id
