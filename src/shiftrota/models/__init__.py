# shiftrota/models - Data models for the rotation engine
from .absence import Holiday, Leave, to_date
from .constraints import EngineConfig
from .employee import Employee
from .rules import DEFAULT_CAPACITY, DEFAULT_TEMPLATES, ShiftCapacityPolicy, ShiftTemplate, get_active_template
from .schedule import DaySchedule, WeekSchedule
from .shift import ROTATION_CYCLE, WORK_SHIFTS, LeaveKind, OffReason, Role, ShiftType

__all__ = [
    "Employee", "Leave", "Holiday", "to_date",
    "ShiftType", "Role", "LeaveKind", "OffReason", "WORK_SHIFTS", "ROTATION_CYCLE",
    "DaySchedule", "WeekSchedule",
    "EngineConfig",
    "ShiftCapacityPolicy", "DEFAULT_CAPACITY",
    "ShiftTemplate", "DEFAULT_TEMPLATES", "get_active_template",
]
