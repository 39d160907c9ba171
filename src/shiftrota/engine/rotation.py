"""
Rotation Advancer
=================
Moves every non-lead employee one week along the rotation cycle:

    Morning -> Evening -> Evening -> Night -> Night -> Morning -> (Morning)

The cycle has six positions, so six advances bring an employee back
to where they started. Leads keep their base shift.
"""
from dataclasses import replace
from typing import Iterable, List, Optional, Tuple

from shiftrota.models.employee import Employee
from shiftrota.models.shift import ROTATION_CYCLE, ShiftType
from shiftrota.utils.logging_setup import get_logger
from shiftrota.utils.structured_logging import get_structured_logger

logger = get_logger("shiftrota.engine.rotation")
audit = get_structured_logger("shiftrota.audit")


def next_shift(shift: ShiftType, step: Optional[int] = None) -> Tuple[ShiftType, int]:
    """
    One step along the cycle.

    Args:
        shift: Current base shift
        step: Current cycle position; derived from ``shift`` when None

    Returns:
        (next shift, next step)
    """
    shift = ShiftType(shift)
    if step is None or ROTATION_CYCLE[step % len(ROTATION_CYCLE)] != shift:
        step = ROTATION_CYCLE.index(shift) if shift.is_work else len(ROTATION_CYCLE) - 1
    step = (step + 1) % len(ROTATION_CYCLE)
    return ROTATION_CYCLE[step], step


def advance_employee(employee: Employee) -> Employee:
    """Copy of ``employee`` with the base shift advanced one week."""
    if employee.is_lead:
        return replace(employee)
    shift, step = next_shift(employee.current_shift, employee.rotation_step)
    return replace(employee, current_shift=shift, rotation_step=step)


def advance_rotation(employees: Iterable[Employee]) -> List[Employee]:
    """
    Advance the whole roster one week. Inputs are left untouched.

    Call once per week, after that week's schedule is accepted, so the
    next generation sees the new base shifts.
    """
    advanced = [advance_employee(e) for e in employees]
    moved = sum(1 for e in advanced if not e.is_lead)
    logger.info(f"Rotation advanced for {moved} of {len(advanced)} employees")
    audit.info("rotation_advanced", employees=len(advanced), advanced=moved)
    return advanced
