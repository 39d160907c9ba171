"""
Property-Based Tests with Hypothesis
====================================
Invariants of generation and rotation that must hold for arbitrary
rosters, weeks and leave.
"""
import random
from datetime import date, timedelta

from hypothesis import HealthCheck, given, settings, strategies as st

from shiftrota.engine.calendar import is_rest_day
from shiftrota.engine.generator import generate_week
from shiftrota.engine.rotation import advance_rotation
from shiftrota.models.absence import Leave
from shiftrota.models.constraints import EngineConfig
from shiftrota.models.employee import Employee
from shiftrota.models.shift import OffReason, Role, ShiftType

member = st.tuples(
    st.sampled_from(list(Role)),
    st.sampled_from([ShiftType.MORNING, ShiftType.EVENING, ShiftType.NIGHT]),
    st.booleans(),
)
rosters = st.lists(member, min_size=0, max_size=12)
week_starts = st.dates(min_value=date(2023, 1, 1), max_value=date(2026, 12, 31))
leave_plans = st.lists(
    st.tuples(st.integers(0, 11), st.integers(0, 6), st.integers(0, 3)),
    max_size=4,
)


def build_roster(members):
    return [
        Employee(
            id=f"e{i}",
            name=f"P{i}",
            role=role,
            current_shift=shift,
            active=active,
            created_at=f"{i:04d}",
        )
        for i, (role, shift, active) in enumerate(members)
    ]


def build_leaves(rows, start):
    return [
        Leave(f"e{emp}", start + timedelta(days=offset), start + timedelta(days=offset + length))
        for emp, offset, length in rows
    ]


class TestGenerationProperties:
    """Every generated week satisfies the assignment invariants."""

    @given(members=rosters, start=week_starts, leave_rows=leave_plans)
    @settings(max_examples=60, deadline=None, suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_each_active_employee_once_per_day(self, members, start, leave_rows):
        roster = build_roster(members)
        week = generate_week(start, roster, [], build_leaves(leave_rows, start), EngineConfig())

        assert len(week) == 7
        assert week.is_complete
        active = sorted(e.name for e in roster if e.active)
        for day in week:
            assert sorted(day.all_names()) == active

    @given(members=rosters, start=week_starts)
    @settings(max_examples=60, deadline=None, suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_capacity_respected(self, members, start):
        week = generate_week(start, build_roster(members), [], [], EngineConfig())
        for day in week:
            assert len(day.night) <= 1
            assert len(day.evening) <= 2
            if is_rest_day(day.date):
                assert len(day.evening) <= 1
                assert len(day.morning) <= 2

    @given(members=rosters, start=week_starts)
    @settings(max_examples=60, deadline=None, suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_night_filled_when_anyone_eligible(self, members, start):
        week = generate_week(start, build_roster(members), [], [], EngineConfig())
        for day in week:
            if day.working_names() or [n for n, r in day.off_reasons.items() if r == OffReason.REST_DAY_UNASSIGNED]:
                assert len(day.night) == 1

    @given(members=rosters, start=week_starts)
    @settings(max_examples=60, deadline=None, suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_leads_never_work_rest_day(self, members, start):
        roster = build_roster(members)
        leads = {e.name for e in roster if e.is_lead}
        week = generate_week(start, roster, [], [], EngineConfig())
        for day in week:
            if is_rest_day(day.date):
                assert not leads & set(day.working_names())

    @given(members=rosters, start=week_starts, leave_rows=leave_plans)
    @settings(max_examples=60, deadline=None, suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_employees_on_leave_are_off(self, members, start, leave_rows):
        roster = build_roster(members)
        leaves = build_leaves(leave_rows, start)
        week = generate_week(start, roster, [], leaves, EngineConfig())
        names = {e.id: e.name for e in roster if e.active}
        for leave in leaves:
            if leave.employee_id not in names:
                continue
            for day in week:
                if leave.covers(day.date):
                    name = names[leave.employee_id]
                    assert name in day.off
                    assert day.off_reasons[name] == OffReason.CASUAL

    @given(members=rosters, start=week_starts, seed=st.integers(0, 1000))
    @settings(max_examples=40, deadline=None, suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_deterministic_under_input_order(self, members, start, seed):
        roster = build_roster(members)
        shuffled = list(roster)
        random.Random(seed).shuffle(shuffled)
        cfg = EngineConfig()
        assert generate_week(start, roster, [], [], cfg) == generate_week(start, shuffled, [], [], cfg)


class TestRotationProperties:
    @given(members=rosters)
    @settings(max_examples=60, deadline=None, suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_six_advances_are_identity(self, members):
        roster = build_roster(members)
        current = roster
        for _ in range(6):
            current = advance_rotation(current)
        assert current == roster

    @given(members=rosters)
    @settings(max_examples=60, deadline=None, suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_leads_keep_shift(self, members):
        roster = build_roster(members)
        for before, after in zip(roster, advance_rotation(roster)):
            if before.is_lead:
                assert after.current_shift == before.current_shift
            else:
                assert after.rotation_step == (before.rotation_step + 1) % 6
