"""Shift, role and day-off reason definitions."""
from enum import Enum


class ShiftType(str, Enum):
    """Types of shifts in the rotation."""
    MORNING = "Morning"
    EVENING = "Evening"
    NIGHT = "Night"
    OFF = "Off"

    @property
    def is_work(self) -> bool:
        """True if this is a working shift (not off)."""
        return self is not ShiftType.OFF

    @property
    def key(self) -> str:
        """Attribute name of the matching list on DaySchedule."""
        return self.value.lower()

    @classmethod
    def from_string(cls, s: str) -> "ShiftType":
        """Parse shift from various string formats."""
        mapping = {
            "m": cls.MORNING, "morning": cls.MORNING, "am": cls.MORNING,
            "e": cls.EVENING, "evening": cls.EVENING, "pm": cls.EVENING,
            "n": cls.NIGHT, "night": cls.NIGHT,
            "off": cls.OFF, "o": cls.OFF, "rest": cls.OFF,
        }
        key = str(s).strip().lower()
        if key in mapping:
            return mapping[key]
        raise ValueError(f"Unknown shift: {s!r}")


WORK_SHIFTS = (ShiftType.MORNING, ShiftType.EVENING, ShiftType.NIGHT)

# Six-week cycle for non-lead employees; index is Employee.rotation_step
ROTATION_CYCLE = (
    ShiftType.MORNING,
    ShiftType.EVENING,
    ShiftType.EVENING,
    ShiftType.NIGHT,
    ShiftType.NIGHT,
    ShiftType.MORNING,
)


class Role(str, Enum):
    """Employee roles."""
    TEAM_LEAD = "TeamLead"
    MANAGER = "Manager"
    SENIOR = "Senior"
    JUNIOR = "Junior"

    @property
    def is_lead(self) -> bool:
        """TeamLeads and Managers are off on rest days and holidays."""
        return self in (Role.TEAM_LEAD, Role.MANAGER)

    @classmethod
    def from_string(cls, s: str) -> "Role":
        """Parse role, accepting the short 'TL' form."""
        mapping = {
            "tl": cls.TEAM_LEAD, "teamlead": cls.TEAM_LEAD, "team lead": cls.TEAM_LEAD,
            "manager": cls.MANAGER,
            "senior": cls.SENIOR,
            "junior": cls.JUNIOR,
        }
        key = str(s).strip().lower()
        if key in mapping:
            return mapping[key]
        raise ValueError(f"Unknown role: {s!r}")


class LeaveKind(str, Enum):
    """Kinds of leave."""
    SICK = "Sick"
    CASUAL = "Casual"


class OffReason(str, Enum):
    """Why an employee is listed in a day's off list."""
    SICK = "Sick"
    CASUAL = "Casual"
    ROLE_OFF = "RoleOff"
    EXEMPTION_FLAG = "ExemptionFlag"
    REST_DAY_UNASSIGNED = "RestDayUnassigned"

    @classmethod
    def for_leave(cls, kind: LeaveKind) -> "OffReason":
        return cls(LeaveKind(kind).value)
