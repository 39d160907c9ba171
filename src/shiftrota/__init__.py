# shiftrota - weekly shift rotation and move validation engine
from shiftrota.engine import advance_rotation, generate_week, validate_move
from shiftrota.models import DaySchedule, Employee, EngineConfig, Holiday, Leave, ShiftType, WeekSchedule

__version__ = "0.1.0"

__all__ = [
    "generate_week",
    "advance_rotation",
    "validate_move",
    "Employee",
    "Leave",
    "Holiday",
    "ShiftType",
    "DaySchedule",
    "WeekSchedule",
    "EngineConfig",
]
