"""Tests for the eligibility policy."""
from datetime import date

import pytest

from shiftrota.engine.eligibility import NOT_EXEMPT, check_exemption, find_leave, is_exempt
from shiftrota.models.absence import Holiday, Leave
from shiftrota.models.constraints import EngineConfig
from shiftrota.models.employee import Employee
from shiftrota.models.shift import LeaveKind, OffReason, Role

FRIDAY = date(2024, 3, 8)
TUESDAY = date(2024, 3, 5)


@pytest.fixture
def lead():
    return Employee(id="e1", name="Tariq", role=Role.TEAM_LEAD)


@pytest.fixture
def junior():
    return Employee(id="e7", name="Eli", role=Role.JUNIOR, rest_day_off=True, holiday_off=True)


class TestLeave:
    def test_sick_leave(self, junior):
        leaves = [Leave("e7", TUESDAY, TUESDAY, LeaveKind.SICK)]
        result = check_exemption(junior, TUESDAY, leaves=leaves)
        assert result.exempt
        assert result.reason == OffReason.SICK

    def test_casual_leave_outside_range(self, junior):
        leaves = [Leave("e7", "2024-03-03", "2024-03-04", LeaveKind.CASUAL)]
        assert not is_exempt(junior, TUESDAY, leaves=leaves)

    def test_other_employee_leave_ignored(self, junior):
        leaves = [Leave("e3", TUESDAY, TUESDAY)]
        assert check_exemption(junior, TUESDAY, leaves=leaves) == NOT_EXEMPT

    def test_unapproved_leave_still_exempts(self, junior):
        leaves = [Leave("e7", TUESDAY, TUESDAY, LeaveKind.SICK, approved=False)]
        assert find_leave(junior, TUESDAY, leaves) is leaves[0]
        assert check_exemption(junior, TUESDAY, leaves=leaves).reason == OffReason.SICK

    def test_leave_beats_role(self, lead):
        leaves = [Leave("e1", FRIDAY, FRIDAY, LeaveKind.CASUAL)]
        assert check_exemption(lead, FRIDAY, leaves=leaves).reason == OffReason.CASUAL


class TestRoleOff:
    def test_lead_off_on_rest_day(self, lead):
        result = check_exemption(lead, FRIDAY)
        assert result
        assert result.reason == OffReason.ROLE_OFF

    def test_manager_off_on_holiday(self):
        manager = Employee(id="e2", name="Maya", role=Role.MANAGER)
        holidays = [Holiday(TUESDAY, "Holiday")]
        assert check_exemption(manager, TUESDAY, holidays=holidays).reason == OffReason.ROLE_OFF

    def test_lead_works_normal_day(self, lead):
        assert not check_exemption(lead, TUESDAY)

    def test_non_lead_works_rest_day(self, junior):
        assert not is_exempt(junior, FRIDAY)
        assert not is_exempt(junior, TUESDAY, holidays=[Holiday(TUESDAY)])


class TestExemptionFlags:
    def test_flags_ignored_by_default(self, junior):
        assert not is_exempt(junior, FRIDAY, config=EngineConfig())

    def test_flags_honored_when_enabled(self, junior):
        cfg = EngineConfig(honor_exemption_flags=True)
        result = check_exemption(junior, FRIDAY, config=cfg)
        assert result.reason == OffReason.EXEMPTION_FLAG
        holiday = check_exemption(junior, TUESDAY, holidays=[Holiday(TUESDAY)], config=cfg)
        assert holiday.reason == OffReason.EXEMPTION_FLAG

    def test_flag_only_applies_to_matching_day(self):
        emp = Employee(id="e9", name="Zoe", rest_day_off=True)
        cfg = EngineConfig(honor_exemption_flags=True)
        assert not is_exempt(emp, TUESDAY, holidays=[Holiday(TUESDAY)], config=cfg)

    def test_role_reason_wins_over_flag(self):
        lead = Employee(id="e1", name="Tariq", role=Role.TEAM_LEAD, rest_day_off=True)
        cfg = EngineConfig(honor_exemption_flags=True)
        assert check_exemption(lead, FRIDAY, config=cfg).reason == OffReason.ROLE_OFF
