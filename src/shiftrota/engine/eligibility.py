"""
Eligibility Policy
==================
Decides whether an employee is exempt from work on a given date.

Rules, first match wins:
    1. Leave covering the date           -> exempt (Sick / Casual)
    2. Lead on rest day or holiday        -> exempt (RoleOff)
    3. Exemption flags, when enabled      -> exempt (ExemptionFlag)
"""
from dataclasses import dataclass
from typing import Iterable, Optional

from shiftrota.engine.calendar import is_holiday, is_rest_day
from shiftrota.models.absence import DateLike, Holiday, Leave, to_date
from shiftrota.models.constraints import EngineConfig
from shiftrota.models.employee import Employee
from shiftrota.models.shift import OffReason


@dataclass(frozen=True)
class Exemption:
    """Outcome of an eligibility check."""
    exempt: bool
    reason: Optional[OffReason] = None

    def __bool__(self) -> bool:
        return self.exempt


NOT_EXEMPT = Exemption(False)


def find_leave(employee: Employee, day: DateLike, leaves: Iterable[Leave]) -> Optional[Leave]:
    """First leave of ``employee`` covering ``day``; approval state is not consulted."""
    d = to_date(day)
    for leave in leaves or ():
        if leave.employee_id == employee.id and leave.covers(d):
            return leave
    return None


def check_exemption(
    employee: Employee,
    day: DateLike,
    holidays: Iterable[Holiday] = (),
    leaves: Iterable[Leave] = (),
    config: Optional[EngineConfig] = None,
) -> Exemption:
    """Whether ``employee`` is exempt from work on ``day``, and why."""
    config = config or EngineConfig()
    d = to_date(day)

    leave = find_leave(employee, d, leaves)
    if leave is not None:
        return Exemption(True, OffReason.for_leave(leave.kind))

    rest_day = is_rest_day(d, config)
    holiday = is_holiday(d, holidays)

    if employee.is_lead and (rest_day or holiday):
        return Exemption(True, OffReason.ROLE_OFF)

    if config.honor_exemption_flags:
        if (employee.rest_day_off and rest_day) or (employee.holiday_off and holiday):
            return Exemption(True, OffReason.EXEMPTION_FLAG)

    return NOT_EXEMPT


def is_exempt(
    employee: Employee,
    day: DateLike,
    holidays: Iterable[Holiday] = (),
    leaves: Iterable[Leave] = (),
    config: Optional[EngineConfig] = None,
) -> bool:
    return check_exemption(employee, day, holidays, leaves, config).exempt
