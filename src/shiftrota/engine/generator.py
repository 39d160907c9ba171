"""
Rotation Assignment Generator
=============================
Builds a full week of shift assignments from the roster, holidays and
leave records.

Per day:
- Exempt employees (leave, leads on rest day/holiday) go to ``off``.
- Rest day: Night 1, Evening 1, Morning 1 (2 on a billing rest day).
  Whoever is left after the seats are filled is off.
- Normal day: Night 1, Evening 2, everyone else on Morning.

Each seat is filled by the first remaining employee whose base shift
matches, falling back to the first remaining employee. Generation is
deterministic: the roster is ordered by creation key before any pick.
"""
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional

from shiftrota.engine.calendar import is_billing_rest_day, is_rest_day, week_dates
from shiftrota.engine.eligibility import check_exemption
from shiftrota.models.absence import DateLike, Holiday, Leave, to_date
from shiftrota.models.constraints import EngineConfig
from shiftrota.models.employee import Employee
from shiftrota.models.schedule import DaySchedule, WeekSchedule
from shiftrota.models.shift import OffReason, ShiftType
from shiftrota.utils.logging_setup import EngineLogger, get_logger, log_function_call
from shiftrota.utils.structured_logging import get_structured_logger

logger = get_logger("shiftrota.engine.generator")
audit = get_structured_logger("shiftrota.audit")


class CandidatePool:
    """
    Ordered pool of employees still available for a seat.

    Every ``take_*`` call removes the returned employee, so nobody can
    be seated twice on the same day.
    """

    def __init__(self, employees: Iterable[Employee]):
        self._remaining: List[Employee] = list(employees)

    def __len__(self) -> int:
        return len(self._remaining)

    def __bool__(self) -> bool:
        return bool(self._remaining)

    @property
    def remaining(self) -> List[Employee]:
        return list(self._remaining)

    def _pop(self, index: int) -> Employee:
        return self._remaining.pop(index)

    def take_first(self, avoid_leads: bool = False) -> Optional[Employee]:
        """First remaining employee; with ``avoid_leads``, the first non-lead if any."""
        if not self._remaining:
            return None
        if avoid_leads:
            for i, emp in enumerate(self._remaining):
                if not emp.is_lead:
                    return self._pop(i)
        return self._pop(0)

    def take_preferred(self, shift: ShiftType, avoid_leads: bool = False) -> Optional[Employee]:
        """First remaining employee based on ``shift``, else the fallback pick."""
        for i, emp in enumerate(self._remaining):
            if emp.current_shift == shift:
                return self._pop(i)
        return self.take_first(avoid_leads=avoid_leads)

    def drain(self) -> List[Employee]:
        """Remove and return everyone left, in order."""
        rest, self._remaining = self._remaining, []
        return rest


@dataclass
class CoverageGap:
    """A shift that received fewer names than its seat target."""
    date: date
    shift: ShiftType
    required: int
    assigned: int

    @property
    def missing(self) -> int:
        return self.required - self.assigned


def order_roster(employees: Iterable[Employee]) -> List[Employee]:
    """Active employees in stable creation order."""
    return sorted((e for e in employees if e.active), key=lambda e: e.order_key)


def seat_targets(day: DateLike, config: EngineConfig) -> dict:
    """Seat targets for ``day``; Morning is absent on normal days (uncapped)."""
    if is_rest_day(day, config):
        return config.capacity.rest_day_targets(is_billing_rest_day(day, config))
    return config.capacity.normal_day_targets()


def _fill(schedule: DaySchedule, pool: CandidatePool, shift: ShiftType, seats: int, avoid_leads: bool) -> None:
    for _ in range(seats):
        emp = pool.take_preferred(shift, avoid_leads=avoid_leads)
        if emp is None:
            return
        schedule.names(shift).append(emp.name)
        logger.debug(
            f"{schedule.date} {shift.value}: {emp.name} "
            f"({'preferred' if emp.current_shift == shift else 'fallback'})"
        )


def generate_day(
    day: DateLike,
    roster: List[Employee],
    holidays: Iterable[Holiday] = (),
    leaves: Iterable[Leave] = (),
    config: Optional[EngineConfig] = None,
) -> DaySchedule:
    """
    Assign one day.

    Args:
        day: Calendar date
        roster: Active employees, already in creation order
        holidays: Holiday records
        leaves: Leave records
        config: Engine configuration
    """
    config = config or EngineConfig()
    d = to_date(day)
    schedule = DaySchedule(date=d)

    eligible = []
    for emp in roster:
        exemption = check_exemption(emp, d, holidays, leaves, config)
        if exemption.exempt:
            schedule.mark_off(emp.name, exemption.reason)
        else:
            eligible.append(emp)

    pool = CandidatePool(eligible)
    for shift, seats in seat_targets(d, config).items():
        _fill(schedule, pool, shift, seats, config.leads_avoid_late_shifts)

    if is_rest_day(d, config):
        for emp in pool.drain():
            schedule.mark_off(emp.name, OffReason.REST_DAY_UNASSIGNED)
    else:
        # Morning absorbs everyone not seated on Night/Evening
        schedule.morning.extend(emp.name for emp in pool.drain())

    return schedule


@log_function_call
def generate_week(
    week_start: DateLike,
    employees: Iterable[Employee],
    holidays: Iterable[Holiday] = (),
    leaves: Iterable[Leave] = (),
    config: Optional[EngineConfig] = None,
) -> WeekSchedule:
    """
    Generate seven days of assignments starting at ``week_start``.

    Pure and deterministic: the same inputs always give the same week.
    Never fails; an empty pool simply leaves seats unfilled (see
    ``find_coverage_gaps``).

    Args:
        week_start: First date of the week
        employees: Roster; inactive employees are skipped
        holidays: Holiday records
        leaves: Leave records
        config: Engine configuration

    Returns:
        WeekSchedule with exactly seven DaySchedules
    """
    config = config or EngineConfig()
    holidays = list(holidays or [])
    leaves = list(leaves or [])
    roster = order_roster(employees)

    log = EngineLogger("shiftrota.engine.generator")
    log.phase(f"Week of {to_date(week_start)}")
    log.detail("roster", len(roster))
    log.detail("holidays", len(holidays))
    log.detail("leaves", len(leaves))

    days = []
    for d in week_dates(week_start):
        log.enter(f"{d} {d.strftime('%A')}")
        day = generate_day(d, roster, holidays, leaves, config)
        log.detail("counts", day.counts())
        log.exit()
        days.append(day)
    week = WeekSchedule(week_start=week_start, days=days)

    gaps = find_coverage_gaps(week, config)
    log.step(f"Coverage check: {len(gaps)} gap(s)")
    for gap in gaps:
        log.rule(
            f"{gap.date} {gap.shift.value} coverage",
            False,
            f"{gap.assigned}/{gap.required} seats filled",
        )

    audit.info("week_generated", week_start=week.id, employees=len(roster), coverage_gaps=len(gaps))
    return week


def find_coverage_gaps(week: WeekSchedule, config: Optional[EngineConfig] = None) -> List[CoverageGap]:
    """Seats left unfilled in ``week`` against the day's seat targets."""
    config = config or EngineConfig()
    gaps = []
    for day in week:
        for shift, required in seat_targets(day.date, config).items():
            assigned = day.occupancy(shift)
            if assigned < required:
                gaps.append(CoverageGap(day.date, shift, required, assigned))
    return gaps
