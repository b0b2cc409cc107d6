"""Tests for domain entities."""

import pytest
from dataclasses import FrozenInstanceError
from datetime import date
from decimal import Decimal
from timekeep.domain.entities import (
    DeadlineType,
    LeaveStatus,
    LeaveType,
    SlotStatus,
    TimeSlot,
    VacationEligibility,
)


def test_enums_compare_equal_to_stored_strings():
    """Test enum members match the strings stored in the database."""
    assert LeaveStatus.APPROVED == "approved"
    assert LeaveType("sick_leave") == LeaveType.SICK_LEAVE
    assert SlotStatus("in-progress") == SlotStatus.IN_PROGRESS
    assert DeadlineType.HARD.value == "hard"


def test_time_slot_defaults():
    """Test time slot default values."""
    slot = TimeSlot(
        id=1,
        employee_id=1,
        task="Review",
        date=date(2024, 1, 11),
        planned_hours=Decimal("4"),
        actual_hours=Decimal("0"),
    )
    assert slot.status == SlotStatus.PLANNED
    assert slot.deadline is None
    assert slot.is_assigned_by_admin is True


def test_entities_are_immutable():
    """Test entities cannot be modified."""
    eligibility = VacationEligibility(can_take=True)
    with pytest.raises(FrozenInstanceError):
        eligibility.can_take = False
