"""Tests for the deadline calculator and status predicates."""

import pytest
from datetime import date, datetime
from decimal import Decimal

from timekeep.domain.deadline import (
    MONDAY_TO_FRIDAY,
    calculate_advanced_deadline,
    calculate_recommended_deadline,
    can_exceed_planned_hours_for_assignment,
    can_exceed_planned_hours_for_slot,
    get_days_overdue,
    get_days_until_deadline,
    get_deadline_status,
    is_deadline_approaching,
    is_deadline_passed,
    is_task_assignment_overdue,
    is_time_slot_overdue,
    validate_deadline,
)
from timekeep.domain.entities import (
    DeadlineCalculationParams,
    DeadlineState,
    DeadlineType,
    SlotStatus,
    TaskAssignment,
    TaskPriority,
    TimeSlot,
)
from timekeep.domain.errors import ValidationError
from timekeep.utils.calendar import js_weekday

NOW = datetime(2024, 1, 10, 9, 0)


def _params(**overrides):
    values = dict(
        start_date=date(2024, 1, 1),  # Monday
        total_hours=16,
        working_hours_per_day=8,
        working_days=MONDAY_TO_FRIDAY,
        priority=TaskPriority.MEDIUM,
    )
    values.update(overrides)
    return DeadlineCalculationParams(**values)


def _assignment(**overrides):
    values = dict(
        id=1,
        employee_id=1,
        task="Report",
        allocated_hours=Decimal("8"),
        actual_hours=Decimal("0"),
    )
    values.update(overrides)
    return TaskAssignment(**values)


def _slot(**overrides):
    values = dict(
        id=1,
        employee_id=1,
        task="Report",
        date=date(2024, 1, 10),
        planned_hours=Decimal("4"),
        actual_hours=Decimal("0"),
    )
    values.update(overrides)
    return TimeSlot(**values)


class TestAdvancedDeadline:
    def test_repeated_calls_give_equal_results(self):
        params = _params(total_hours=40, priority=TaskPriority.URGENT)
        assert calculate_advanced_deadline(params) == calculate_advanced_deadline(params)

    def test_breakdown(self):
        result = calculate_advanced_deadline(_params())
        assert result.working_days_needed == 2
        assert result.planning_days == 3  # ceil(2 * 1.4)
        assert result.buffer_days == Decimal("1")
        assert result.total_days == Decimal("4")
        assert result.breakdown.pure_work_days == 2
        assert result.breakdown.planning_factor == Decimal("1.4")
        assert result.breakdown.priority_buffer == Decimal("1")

    def test_start_date_counts_as_first_working_day(self):
        result = calculate_advanced_deadline(_params())
        assert result.deadline == date(2024, 1, 4)

    def test_walk_skips_weekend(self):
        result = calculate_advanced_deadline(_params(total_hours=40, planning_factor=1.0))
        assert result.total_days == Decimal("6")
        assert result.deadline == date(2024, 1, 8)

    def test_weekend_start(self):
        result = calculate_advanced_deadline(
            _params(start_date=date(2024, 1, 6), total_hours=8, priority=TaskPriority.URGENT)
        )
        assert result.total_days == Decimal("2")
        assert result.deadline == date(2024, 1, 9)

    @pytest.mark.parametrize(
        "priority,buffer,expected",
        [
            (TaskPriority.URGENT, Decimal("0"), date(2024, 1, 3)),
            (TaskPriority.HIGH, Decimal("0.5"), date(2024, 1, 4)),
            (TaskPriority.MEDIUM, Decimal("1"), date(2024, 1, 4)),
            (TaskPriority.LOW, Decimal("2"), date(2024, 1, 5)),
        ],
    )
    def test_priority_buffers(self, priority, buffer, expected):
        result = calculate_advanced_deadline(_params(priority=priority))
        assert result.buffer_days == buffer
        assert result.deadline == expected

    def test_custom_priority_buffers(self):
        result = calculate_advanced_deadline(
            _params(priority_buffers={TaskPriority.MEDIUM: 5})
        )
        assert result.buffer_days == Decimal("5")
        assert result.deadline == date(2024, 1, 10)

    def test_deadline_is_a_working_day(self):
        for hours in range(1, 120, 7):
            result = calculate_advanced_deadline(_params(total_hours=hours, working_days=frozenset({1, 3, 5})))
            assert js_weekday(result.deadline) in {1, 3, 5}

    def test_deadline_is_monotonic_in_hours(self):
        deadlines = [calculate_advanced_deadline(_params(total_hours=h)).deadline for h in range(1, 100)]
        assert deadlines == sorted(deadlines)

    def test_fractional_hours_round_up(self):
        result = calculate_advanced_deadline(_params(total_hours=Decimal("8.5")))
        assert result.working_days_needed == 2

    def test_non_positive_hours_need_no_work_days(self):
        result = calculate_advanced_deadline(_params(total_hours=-5))
        assert result.working_days_needed == 0
        assert result.planning_days == 0
        assert result.total_days == Decimal("1")
        assert result.deadline == date(2024, 1, 1)

    def test_empty_working_days(self):
        with pytest.raises(ValidationError, match="working day"):
            calculate_advanced_deadline(_params(working_days=frozenset()))

    def test_zero_hours_per_day(self):
        with pytest.raises(ValidationError, match="hours per day"):
            calculate_advanced_deadline(_params(working_hours_per_day=0))


class TestRecommendedDeadline:
    def test_medium(self):
        # 16h -> 2 days + ceil(0.4) buffer = 3 working days after Monday
        assert calculate_recommended_deadline(16, today=date(2024, 1, 1)) == date(2024, 1, 4)

    def test_priority_multipliers(self):
        today = date(2024, 1, 1)
        assert calculate_recommended_deadline(16, TaskPriority.URGENT, today=today) == date(2024, 1, 3)
        assert calculate_recommended_deadline(16, "low", today=today) == date(2024, 1, 5)

    def test_counting_starts_after_today_and_skips_weekend(self):
        assert calculate_recommended_deadline(8, today=date(2024, 1, 5)) == date(2024, 1, 9)

    def test_work_days_per_week_does_not_change_the_walk(self):
        for days_per_week in (5, 6, 7):
            result = calculate_recommended_deadline(
                8, work_days_per_week=days_per_week, today=date(2024, 1, 5)
            )
            assert result == date(2024, 1, 9)

    def test_differs_from_advanced_deadline(self):
        recommended = calculate_recommended_deadline(40, today=date(2024, 1, 1))
        advanced = calculate_advanced_deadline(_params(total_hours=40)).deadline
        assert recommended == date(2024, 1, 9)
        assert advanced == date(2024, 1, 10)


class TestPredicates:
    def test_passed(self):
        assert is_deadline_passed(date(2024, 1, 10), NOW) is True
        assert is_deadline_passed(date(2024, 1, 11), NOW) is False
        assert is_deadline_passed("2024-01-10", datetime(2024, 1, 10)) is False

    def test_approaching_window(self):
        assert is_deadline_approaching(date(2024, 1, 12), NOW) is True
        assert is_deadline_approaching(datetime(2024, 1, 13, 9, 0), NOW) is True
        assert is_deadline_approaching(date(2024, 1, 14), NOW) is False
        assert is_deadline_approaching(date(2024, 1, 9), NOW) is False

    def test_day_counts_round_up(self):
        assert get_days_until_deadline(date(2024, 1, 12), NOW) == 2
        assert get_days_overdue(date(2024, 1, 8), NOW) == 3

    def test_validate_deadline(self):
        assert validate_deadline(date(2024, 1, 11), NOW).is_valid is True
        result = validate_deadline(date(2024, 1, 10), NOW)
        assert result.is_valid is False
        assert result.error == "Deadline cannot be in the past"
        assert validate_deadline(date(2024, 1, 10), datetime(2024, 1, 10)).is_valid is True


class TestPlannedHoursGate:
    def test_hard_deadline_ahead_blocks(self):
        assignment = _assignment(deadline=date(2024, 1, 20), deadline_type=DeadlineType.HARD)
        assert can_exceed_planned_hours_for_assignment(assignment, NOW) is False

    def test_hard_deadline_passed_allows(self):
        assignment = _assignment(deadline=date(2024, 1, 5), deadline_type=DeadlineType.HARD)
        assert can_exceed_planned_hours_for_assignment(assignment, NOW) is True

    def test_soft_deadline_allows(self):
        assignment = _assignment(deadline=date(2024, 1, 20), deadline_type=DeadlineType.SOFT)
        assert can_exceed_planned_hours_for_assignment(assignment, NOW) is True

    def test_no_deadline_allows(self):
        assert can_exceed_planned_hours_for_assignment(_assignment(), NOW) is True
        assert can_exceed_planned_hours_for_assignment(_assignment(deadline_type=DeadlineType.HARD), NOW) is True

    def test_slot_rules(self):
        hard = dict(deadline=date(2024, 1, 20), deadline_type=DeadlineType.HARD)
        assert can_exceed_planned_hours_for_slot(_slot(**hard), NOW) is False
        assert can_exceed_planned_hours_for_slot(_slot(is_assigned_by_admin=False, **hard), NOW) is True


class TestOverdue:
    def test_assignment(self):
        assert is_task_assignment_overdue(_assignment(deadline=date(2024, 1, 8)), NOW) is True
        assert is_task_assignment_overdue(_assignment(deadline=date(2024, 1, 12)), NOW) is False
        assert is_task_assignment_overdue(_assignment(), NOW) is False

    def test_completed_slot_is_not_overdue(self):
        assert is_time_slot_overdue(_slot(deadline=date(2024, 1, 8)), NOW) is True
        completed = _slot(deadline=date(2024, 1, 8), status=SlotStatus.COMPLETED)
        assert is_time_slot_overdue(completed, NOW) is False


class TestStatus:
    def test_hard_overdue(self):
        status = get_deadline_status(date(2024, 1, 8), NOW, DeadlineType.HARD)
        assert status.state == DeadlineState.OVERDUE
        assert status.days == 3
        assert status.text == "Overdue by 3 days"

    def test_soft_overdue(self):
        status = get_deadline_status(date(2024, 1, 8), NOW, "soft")
        assert status.text == "Exceeded by 3 days"

    def test_approaching(self):
        status = get_deadline_status(date(2024, 1, 12), NOW)
        assert status.state == DeadlineState.APPROACHING
        assert status.text == "2 days left"

    def test_normal(self):
        status = get_deadline_status(date(2024, 1, 20), NOW)
        assert status.state == DeadlineState.NORMAL
        assert status.days == 10
        assert status.text == "10 days left"
