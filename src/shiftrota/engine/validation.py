"""
Shift Move Validator
====================
Admission check for a single interactive move (employee -> date, shift)
against the current week. Rejections are returned as values carrying a
stable reason identifier; nothing is mutated here.

Rules, first failure wins (all skipped under emergency override):
    1. Employee exists                       EmployeeNotFound
    2. Date belongs to the week              InvalidDate
    3. TeamLead not on Evening/Night         RoleShiftConflict
    4. No lead on the rest day               RestDayRoleConflict
    5. Target shift below capacity           ShiftFull
"""
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Dict, Iterable, Optional

from shiftrota.engine.calendar import is_rest_day
from shiftrota.models.absence import DateLike, to_date
from shiftrota.models.constraints import EngineConfig
from shiftrota.models.employee import Employee
from shiftrota.models.schedule import WeekSchedule
from shiftrota.models.shift import Role, ShiftType
from shiftrota.utils.logging_setup import get_logger
from shiftrota.utils.structured_logging import get_structured_logger

logger = get_logger("shiftrota.engine.validation")
audit = get_structured_logger("shiftrota.audit")


class RejectReason(str, Enum):
    """Stable identifiers for rejected moves."""
    EMPLOYEE_NOT_FOUND = "EmployeeNotFound"
    INVALID_DATE = "InvalidDate"
    ROLE_SHIFT_CONFLICT = "RoleShiftConflict"
    REST_DAY_ROLE_CONFLICT = "RestDayRoleConflict"
    SHIFT_FULL = "ShiftFull"


@dataclass(frozen=True)
class MoveResult:
    """Accept, or reject with a reason and enough context to render it."""
    accepted: bool
    employee_id: str
    target_date: date
    target_shift: ShiftType
    reason: Optional[RejectReason] = None
    emergency: bool = False
    capacity: Optional[int] = None

    def __bool__(self) -> bool:
        return self.accepted

    @property
    def message(self) -> str:
        """Default English rendering of the outcome."""
        if self.accepted:
            return "Move accepted (emergency override)" if self.emergency else "Move accepted"
        shift = self.target_shift.value
        return {
            RejectReason.EMPLOYEE_NOT_FOUND: f"Employee {self.employee_id} not found",
            RejectReason.INVALID_DATE: f"{self.target_date} is not part of this week",
            RejectReason.ROLE_SHIFT_CONFLICT: f"Team Leads cannot be assigned to {shift} shifts",
            RejectReason.REST_DAY_ROLE_CONFLICT: "Team Leads and Managers are off on the rest day",
            RejectReason.SHIFT_FULL: f"{shift} shift is full (max {self.capacity})",
        }[self.reason]

    def to_dict(self) -> Dict:
        return {
            "accepted": self.accepted,
            "employee_id": self.employee_id,
            "target_date": self.target_date.isoformat(),
            "target_shift": self.target_shift.value,
            "reason": self.reason.value if self.reason else None,
            "emergency": self.emergency,
            "message": self.message,
        }


def validate_move(
    employee_id: str,
    target_date: DateLike,
    target_shift: ShiftType,
    current_week: WeekSchedule,
    employees: Iterable[Employee],
    emergency_override: bool = False,
    config: Optional[EngineConfig] = None,
) -> MoveResult:
    """
    Decide whether ``employee_id`` may be placed on ``target_shift`` at
    ``target_date``.

    Args:
        employee_id: Employee being moved
        target_date: Day of the move
        target_shift: Morning, Evening or Night
        current_week: Snapshot of the week being edited
        employees: Roster
        emergency_override: Bypass every rule; must be passed explicitly
        config: Engine configuration (rest day, capacities)

    Returns:
        MoveResult

    Raises:
        ValueError: if ``target_shift`` is not a working shift
    """
    config = config or EngineConfig()
    shift = target_shift if isinstance(target_shift, ShiftType) else ShiftType.from_string(target_shift)
    if not shift.is_work:
        raise ValueError(f"Move target must be a working shift, got {shift.value}")
    d = to_date(target_date)

    def reject(reason: RejectReason, capacity: Optional[int] = None) -> MoveResult:
        result = MoveResult(False, employee_id, d, shift, reason=reason, capacity=capacity)
        logger.warning(f"Move rejected: {employee_id} -> {d} {shift.value}: {reason.value}")
        audit.info("move_rejected", employee_id=employee_id, date=d.isoformat(),
                   shift=shift.value, reason=reason.value)
        return result

    if emergency_override:
        logger.warning(f"Emergency override: {employee_id} -> {d} {shift.value} accepted without checks")
        audit.info("move_accepted", employee_id=employee_id, date=d.isoformat(),
                   shift=shift.value, emergency=True)
        return MoveResult(True, employee_id, d, shift, emergency=True)

    employee = next((e for e in employees if e.id == employee_id), None)
    if employee is None:
        return reject(RejectReason.EMPLOYEE_NOT_FOUND)

    day = current_week.get_day(d)
    if day is None:
        return reject(RejectReason.INVALID_DATE)

    if employee.role == Role.TEAM_LEAD and shift in (ShiftType.EVENING, ShiftType.NIGHT):
        return reject(RejectReason.ROLE_SHIFT_CONFLICT)

    if is_rest_day(d, config) and employee.is_lead:
        return reject(RejectReason.REST_DAY_ROLE_CONFLICT)

    if config.capacity.is_full(shift, day.occupancy(shift)):
        return reject(RejectReason.SHIFT_FULL, capacity=config.capacity.capacity(shift))

    logger.debug(f"Move accepted: {employee_id} -> {d} {shift.value}")
    audit.info("move_accepted", employee_id=employee_id, date=d.isoformat(),
               shift=shift.value, emergency=False)
    return MoveResult(True, employee_id, d, shift)
