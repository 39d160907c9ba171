"""
Roster Editing
==============
Applies accepted moves to a week. Every function returns a new
WeekSchedule and leaves its input untouched; only the one affected
DaySchedule changes.
"""
from typing import Iterable, Optional, Tuple

from shiftrota.engine.validation import MoveResult, validate_move
from shiftrota.models.absence import DateLike, to_date
from shiftrota.models.constraints import EngineConfig
from shiftrota.models.employee import Employee
from shiftrota.models.schedule import WeekSchedule
from shiftrota.models.shift import WORK_SHIFTS, OffReason, ShiftType
from shiftrota.utils.logging_setup import get_logger

logger = get_logger("shiftrota.engine.editing")


def apply_move(week: WeekSchedule, name: str, target_date: DateLike, target_shift: ShiftType) -> WeekSchedule:
    """
    Move ``name`` into ``target_shift`` on ``target_date``.

    The name is removed from whichever list held it that day, then
    appended to the target list.

    Raises:
        ValueError: if the date is not part of ``week``
    """
    d = to_date(target_date)
    shift = ShiftType(target_shift)
    day = week.get_day(d)
    if day is None:
        raise ValueError(f"{d} is not part of week {week.id}")

    day = day.copy()
    previous = day.shift_of(name)
    for s in ShiftType:
        lst = day.names(s)
        while name in lst:
            lst.remove(name)
    day.off_reasons.pop(name, None)
    day.names(shift).append(name)

    logger.info(f"{d}: {name} moved {previous.value if previous else 'unassigned'} -> {shift.value}")
    return week.replace_day(day)


def remove_from_day(
    week: WeekSchedule,
    name: str,
    target_date: DateLike,
    reason: Optional[OffReason] = None,
) -> WeekSchedule:
    """
    Take ``name`` off every working shift on one day, e.g. after leave
    is approved mid-week. Freed seats are not refilled.
    """
    d = to_date(target_date)
    day = week.get_day(d)
    if day is None:
        raise ValueError(f"{d} is not part of week {week.id}")

    day = day.copy()
    for s in WORK_SHIFTS:
        lst = day.names(s)
        while name in lst:
            lst.remove(name)
    if name not in day.off:
        day.off.append(name)
    if reason is not None:
        day.off_reasons[name] = reason

    logger.info(f"{d}: {name} removed from working shifts")
    return week.replace_day(day)


def move_employee(
    employee_id: str,
    target_date: DateLike,
    target_shift: ShiftType,
    week: WeekSchedule,
    employees: Iterable[Employee],
    emergency_override: bool = False,
    config: Optional[EngineConfig] = None,
) -> Tuple[MoveResult, WeekSchedule]:
    """
    Validate a move and apply it when accepted.

    Returns:
        (result, week) where ``week`` is the edited copy on acceptance and
        the unchanged input on rejection.

    Raises:
        ValueError: if an override forces a move for an unknown employee
            or date
    """
    employees = list(employees)
    result = validate_move(
        employee_id, target_date, target_shift, week, employees,
        emergency_override=emergency_override, config=config,
    )
    if not result.accepted:
        return result, week

    employee = next((e for e in employees if e.id == employee_id), None)
    if employee is None:
        # Only reachable under emergency override
        raise ValueError(f"Employee {employee_id} not found")
    return result, apply_move(week, employee.name, result.target_date, result.target_shift)
