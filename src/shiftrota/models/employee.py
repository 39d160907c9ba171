"""Employee model for roster members."""
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .shift import ROTATION_CYCLE, Role, ShiftType


@dataclass
class Employee:
    """Represents a roster member and their rotation state."""

    id: str
    name: str
    role: Role = Role.JUNIOR
    active: bool = True

    # Exemption flags (weekly rest day / public holidays)
    rest_day_off: bool = False
    holiday_off: bool = False

    # Rotation
    current_shift: ShiftType = ShiftType.MORNING
    rotation_step: Optional[int] = None  # Position in ROTATION_CYCLE

    # Creation-order key, ISO timestamp or any sortable string
    created_at: str = ""

    # Running counters kept by the persistence layer
    total_night_count: int = field(default=0, compare=False)
    total_shift_count: int = field(default=0, compare=False)

    def __post_init__(self):
        """Validate and normalize fields."""
        self.id = str(self.id).strip()
        self.name = str(self.name).strip()
        if not isinstance(self.role, Role):
            self.role = Role.from_string(self.role)
        if not isinstance(self.current_shift, ShiftType):
            self.current_shift = ShiftType.from_string(self.current_shift)
        if not self.current_shift.is_work:
            self.current_shift = ShiftType.MORNING
        self.created_at = str(self.created_at or "")

        # Keep step consistent with the declared shift
        if (
            self.rotation_step is None
            or not 0 <= self.rotation_step < len(ROTATION_CYCLE)
            or ROTATION_CYCLE[self.rotation_step] != self.current_shift
        ):
            self.rotation_step = ROTATION_CYCLE.index(self.current_shift)

    @property
    def is_lead(self) -> bool:
        return self.role.is_lead

    @property
    def order_key(self) -> Tuple[str, str]:
        """Stable creation-order sort key."""
        return (self.created_at, self.id)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "role": self.role.value,
            "active": self.active,
            "rest_day_off": self.rest_day_off,
            "holiday_off": self.holiday_off,
            "current_shift": self.current_shift.value,
            "rotation_step": self.rotation_step,
            "created_at": self.created_at,
            "total_night_count": self.total_night_count,
            "total_shift_count": self.total_shift_count,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Employee":
        """Create from dictionary."""
        step = d.get("rotation_step")
        return cls(
            id=str(d.get("id", "")),
            name=d.get("name", ""),
            role=d.get("role", Role.JUNIOR.value),
            active=bool(d.get("active", True)),
            rest_day_off=bool(d.get("rest_day_off", False)),
            holiday_off=bool(d.get("holiday_off", False)),
            current_shift=d.get("current_shift", ShiftType.MORNING.value),
            rotation_step=int(step) if step not in (None, "") else None,
            created_at=str(d.get("created_at", "")),
            total_night_count=int(d.get("total_night_count", 0)),
            total_shift_count=int(d.get("total_shift_count", 0)),
        )
