"""
Business Rules and Constants
============================
Central source of truth for shift capacities and shift timing templates.
Both the generator and the move validator read seat limits from here.
"""
from dataclasses import dataclass
from typing import Dict, List, Optional

from .shift import ShiftType


@dataclass(frozen=True)
class ShiftCapacityPolicy:
    """Seats per shift per day. ``None`` means unbounded."""

    night: int = 1
    evening: int = 2
    morning: Optional[int] = None

    # Rest-day staffing
    rest_day_night: int = 1
    rest_day_evening: int = 1
    rest_day_morning: int = 1
    billing_rest_day_morning: int = 2

    def capacity(self, shift: ShiftType) -> Optional[int]:
        """Normal-day seat limit used by the move validator."""
        return {
            ShiftType.NIGHT: self.night,
            ShiftType.EVENING: self.evening,
            ShiftType.MORNING: self.morning,
        }.get(ShiftType(shift))

    def is_full(self, shift: ShiftType, occupancy: int) -> bool:
        limit = self.capacity(shift)
        return limit is not None and occupancy >= limit

    def rest_day_targets(self, billing: bool) -> Dict[ShiftType, int]:
        """Seat targets on the weekly rest day, in pick order."""
        return {
            ShiftType.NIGHT: self.rest_day_night,
            ShiftType.EVENING: self.rest_day_evening,
            ShiftType.MORNING: self.billing_rest_day_morning if billing else self.rest_day_morning,
        }

    def normal_day_targets(self) -> Dict[ShiftType, int]:
        """Seat targets for Night and Evening; Morning absorbs the rest."""
        return {
            ShiftType.NIGHT: self.night,
            ShiftType.EVENING: self.evening,
        }

    def to_dict(self) -> dict:
        return {
            "night": self.night,
            "evening": self.evening,
            "morning": self.morning,
            "rest_day_night": self.rest_day_night,
            "rest_day_evening": self.rest_day_evening,
            "rest_day_morning": self.rest_day_morning,
            "billing_rest_day_morning": self.billing_rest_day_morning,
        }


DEFAULT_CAPACITY = ShiftCapacityPolicy()


@dataclass
class ShiftTiming:
    start_time: str
    end_time: str


@dataclass
class ShiftTemplate:
    """Named set of shift timings (Normal, Ramadan, ...)."""
    id: str
    name: str
    morning: ShiftTiming
    evening: ShiftTiming
    night: ShiftTiming
    active: bool = False

    def timing(self, shift: ShiftType) -> Optional[ShiftTiming]:
        shift = ShiftType(shift)
        if not shift.is_work:
            return None
        return getattr(self, shift.key)


DEFAULT_TEMPLATES: List[ShiftTemplate] = [
    ShiftTemplate(
        id="normal",
        name="Normal",
        morning=ShiftTiming("09:00", "18:00"),
        evening=ShiftTiming("14:00", "22:00"),
        night=ShiftTiming("22:00", "09:00"),
        active=True,
    ),
    ShiftTemplate(
        id="ramadan",
        name="Ramadan",
        morning=ShiftTiming("08:00", "15:00"),
        evening=ShiftTiming("15:00", "21:00"),
        night=ShiftTiming("21:00", "08:00"),
        active=False,
    ),
]


def get_active_template(templates: List[ShiftTemplate] = None) -> ShiftTemplate:
    """First active template, else the Normal default."""
    for t in templates or []:
        if t.active:
            return t
    return DEFAULT_TEMPLATES[0]
