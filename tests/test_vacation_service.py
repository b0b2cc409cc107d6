"""Tests for vacation balance service and commands."""

import pytest
from datetime import date, datetime
from decimal import Decimal
from timekeep.cli.main import cli
from timekeep.domain.entities import HistoryEntryType, LeaveType
from timekeep.domain.errors import NotFoundError, ValidationError

APPROVED_AT = datetime(2024, 1, 1, 12, 0)


@pytest.fixture
def veteran(employee_service):
    """Employee with a full first work year in 2023."""
    employee_id = employee_service.create_employee(name="Veteran", employment_date=date(2023, 1, 1))
    return employee_service.get_employee(employee_id)


def _approved_vacation(leave_service, employee_id, start, end, leave_type=LeaveType.VACATION):
    request_id = leave_service.create_request(
        employee_id=employee_id, start_date=start, end_date=end, leave_type=leave_type
    )
    leave_service.approve(request_id, approved_by="hr", approved_at=APPROVED_AT)
    return request_id


def test_balance_without_usage(vacation_service, veteran):
    """Test a full year earns 28 days."""
    calc = vacation_service.get_balance(veteran.id, date(2023, 12, 31))
    assert calc.total_worked_months == 12
    assert calc.earned_days == Decimal("28.00")
    assert calc.current_balance == 28


def test_balance_counts_only_started_approved_vacations(vacation_service, leave_service, veteran):
    """Test which requests reduce the balance."""
    _approved_vacation(leave_service, veteran.id, date(2023, 7, 3), date(2023, 7, 9))  # 7 days
    _approved_vacation(leave_service, veteran.id, date(2024, 2, 1), date(2024, 2, 5))  # future
    _approved_vacation(
        leave_service, veteran.id, date(2023, 9, 4), date(2023, 9, 6), leave_type=LeaveType.SICK_LEAVE
    )
    leave_service.create_request(
        employee_id=veteran.id, start_date=date(2023, 10, 2), end_date=date(2023, 10, 3)
    )

    calc = vacation_service.get_balance(veteran.id, date(2023, 12, 31))
    assert calc.used_days == Decimal("7")
    assert calc.current_balance == 21


def test_cancelled_vacation_is_not_used(vacation_service, leave_service, veteran):
    """Test cancelling an approved vacation restores the balance."""
    request_id = _approved_vacation(leave_service, veteran.id, date(2023, 7, 3), date(2023, 7, 9))
    leave_service.cancel(request_id)

    calc = vacation_service.get_balance(veteran.id, date(2023, 12, 31))
    assert calc.used_days == Decimal("0")


def test_check_request_counts_future_vacations(vacation_service, leave_service, veteran):
    """Test eligibility counts every approved vacation."""
    _approved_vacation(leave_service, veteran.id, date(2024, 2, 1), date(2024, 2, 20))  # 20 days

    result = vacation_service.check_request(veteran.id, date(2023, 12, 31), 10)
    assert result.can_take is False
    assert result.reason == "Not enough vacation days. Available: 8 days"

    assert vacation_service.check_request(veteran.id, date(2023, 12, 31), 8).can_take is True


def test_check_request_before_six_months(vacation_service, sample_employee):
    """Test new employees must wait."""
    result = vacation_service.check_request(sample_employee.id, date(2024, 6, 14), 1)
    assert result.can_take is False
    assert "6 months" in result.reason


def test_history(vacation_service, leave_service, veteran):
    """Test the ledger for stored requests."""
    _approved_vacation(leave_service, veteran.id, date(2023, 2, 6), date(2023, 2, 10))

    history = vacation_service.get_history(veteran.id, date(2023, 3, 31))
    assert [entry.type for entry in history] == [
        HistoryEntryType.EARNED,
        HistoryEntryType.USED,
        HistoryEntryType.EARNED,
        HistoryEntryType.EARNED,
    ]
    assert history[1].balance == Decimal("1.99")

    replayed = vacation_service.get_history(veteran.id, date(2023, 3, 31), point_in_time=True)
    assert replayed[1].balance == Decimal("-2.67")


def test_missing_employee(vacation_service):
    """Test unknown employee IDs."""
    with pytest.raises(NotFoundError):
        vacation_service.get_balance(99, date(2024, 1, 1))


def test_missing_employment_date(vacation_service, employee_service):
    """Test employees without an employment date."""
    employee_id = employee_service.create_employee(name="Contractor")
    with pytest.raises(ValidationError, match="no employment date"):
        vacation_service.get_balance(employee_id, date(2024, 1, 1))


def test_balance_command(cli_runner, temp_db, veteran):
    """Test showing a balance from the CLI."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "vacation", "balance", "Veteran", "--as-of", "2023-12-31"]
    )

    assert result.exit_code == 0
    assert "Vacation balance as of 2023-12-31" in result.output
    assert "Earned days:     28.00" in result.output
    assert "Balance:         28" in result.output
    assert "1 year (12 months)" in result.output


def test_balance_command_defaults_to_now(cli_runner, temp_db, veteran):
    """Test the as-of date defaults to --now."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "--now", "2023-06-30", "vacation", "balance", "Veteran"]
    )

    assert result.exit_code == 0
    assert "Vacation balance as of 2023-06-30" in result.output
    assert "Earned days:     14.00" in result.output


def test_history_command(cli_runner, temp_db, veteran):
    """Test the history listing."""
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "vacation", "history", "Veteran", "--as-of", "2023-02-28"],
    )

    assert result.exit_code == 0
    assert "Earned for January 2023 (31 days)" in result.output
    assert "Earned for February 2023 (28 days)" in result.output


def test_check_command_refused(cli_runner, temp_db, sample_employee):
    """Test a refused vacation check exits with failure."""
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "vacation", "check", "Anna Petrova", "5", "--as-of", "2024-03-01"],
    )

    assert result.exit_code == 1
    assert "Vacation becomes available after 6 months of employment" in result.output


def test_check_command_allowed(cli_runner, temp_db, veteran):
    """Test an allowed vacation check."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "vacation", "check", "Veteran", "14", "--as-of", "2023-12-31"]
    )

    assert result.exit_code == 0
    assert "OK: 14 days can be taken" in result.output


def test_calc_command_needs_no_stored_data(cli_runner, temp_db):
    """Test the standalone calculator."""
    result = cli_runner.invoke(
        cli,
        [
            "--db-path", temp_db.database_path,
            "vacation", "calc", "--employment-date", "2024-01-15", "--as-of", "2024-07-15", "--used", "3",
        ],
    )

    assert result.exit_code == 0
    assert "7 months" in result.output
    assert "Earned days:     16.33" in result.output
    assert "Balance:         13" in result.output


def test_balance_command_unknown_employee(cli_runner, temp_db):
    """Test an unknown employee name fails."""
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "vacation", "balance", "Nobody"])

    assert result.exit_code == 1
    assert "not found" in result.output
