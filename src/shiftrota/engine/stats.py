"""
Employee Statistics
===================
Per-employee shift counts over one or more generated weeks. Used for
the workload overview and to keep the running night/shift counters on
Employee up to date.
"""
from dataclasses import dataclass, replace
from typing import Dict, Iterable, List

import pandas as pd

from shiftrota.models.absence import Leave
from shiftrota.models.employee import Employee
from shiftrota.models.schedule import WeekSchedule
from shiftrota.models.shift import ShiftType
from shiftrota.utils.logging_setup import get_logger

logger = get_logger("shiftrota.engine.stats")


@dataclass
class EmployeeStats:
    """Statistics for a single employee."""
    name: str
    morning: int
    evening: int
    night: int
    off: int
    total_shifts: int  # Worked days (morning + evening + night)
    leave_count: int = 0


def _count_names(weeks: Iterable[WeekSchedule]) -> Dict[str, Dict[ShiftType, int]]:
    counts: Dict[str, Dict[ShiftType, int]] = {}
    for week in weeks:
        for day in week:
            for shift in ShiftType:
                for name in day.names(shift):
                    per = counts.setdefault(name, {s: 0 for s in ShiftType})
                    per[shift] += 1
    return counts


def calculate_employee_stats(
    weeks: Iterable[WeekSchedule],
    employees: Iterable[Employee],
    leaves: Iterable[Leave] = (),
) -> List[EmployeeStats]:
    """
    Count shifts for every employee across ``weeks``.

    Args:
        weeks: Generated or edited weeks
        employees: Roster (one row per employee, in given order)
        leaves: Leave records, counted per employee

    Returns:
        List of EmployeeStats, one per employee
    """
    weeks = list(weeks)
    counts = _count_names(weeks)
    leaves = list(leaves or [])

    stats = []
    for emp in employees:
        per = counts.get(emp.name, {s: 0 for s in ShiftType})
        worked = per[ShiftType.MORNING] + per[ShiftType.EVENING] + per[ShiftType.NIGHT]
        stats.append(EmployeeStats(
            name=emp.name,
            morning=per[ShiftType.MORNING],
            evening=per[ShiftType.EVENING],
            night=per[ShiftType.NIGHT],
            off=per[ShiftType.OFF],
            total_shifts=worked,
            leave_count=sum(1 for lv in leaves if lv.employee_id == emp.id),
        ))

    logger.debug(f"Calculated stats for {len(stats)} employees, {len(weeks)} weeks")
    return stats


def stats_to_dataframe(stats: List[EmployeeStats]) -> pd.DataFrame:
    """Stats as a DataFrame for display or export."""
    columns = ["name", "morning", "evening", "night", "off", "total_shifts", "leave_count"]
    if not stats:
        return pd.DataFrame(columns=columns)
    return pd.DataFrame([vars(s) for s in stats], columns=columns)


def update_counters(employees: Iterable[Employee], week: WeekSchedule) -> List[Employee]:
    """Copies of ``employees`` with total_night_count / total_shift_count bumped by ``week``."""
    counts = _count_names([week])
    updated = []
    for emp in employees:
        per = counts.get(emp.name)
        if not per:
            updated.append(replace(emp))
            continue
        worked = per[ShiftType.MORNING] + per[ShiftType.EVENING] + per[ShiftType.NIGHT]
        updated.append(replace(
            emp,
            total_night_count=emp.total_night_count + per[ShiftType.NIGHT],
            total_shift_count=emp.total_shift_count + worked,
        ))
    return updated
