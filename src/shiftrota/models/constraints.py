"""Engine configuration."""
from dataclasses import dataclass, field, fields
from typing import Dict

from .rules import DEFAULT_CAPACITY, ShiftCapacityPolicy

WEEKDAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


@dataclass
class EngineConfig:
    """Configuration shared by generation and move validation."""

    # Calendar (0 = Monday ... 6 = Sunday)
    rest_weekday: int = 4  # Friday
    week_start_weekday: int = 5  # Saturday

    # Extra Morning seat on rest days early in the month
    billing_mode: bool = True
    billing_cutoff_day: int = 12

    # Also honor Employee.rest_day_off / holiday_off, not just roles
    honor_exemption_flags: bool = False

    # Fallback picks for Night/Evening skip leads while a non-lead remains
    leads_avoid_late_shifts: bool = False

    capacity: ShiftCapacityPolicy = field(default_factory=lambda: DEFAULT_CAPACITY)

    def __post_init__(self):
        for name in ("rest_weekday", "week_start_weekday"):
            if not 0 <= getattr(self, name) <= 6:
                raise ValueError(f"{name} must be 0 (Monday) .. 6 (Sunday), got {getattr(self, name)}")

    @property
    def rest_day_name(self) -> str:
        return WEEKDAY_NAMES[self.rest_weekday]

    def to_dict(self) -> Dict:
        """Serialize to dictionary."""
        return {
            "rest_weekday": self.rest_weekday,
            "week_start_weekday": self.week_start_weekday,
            "billing_mode": self.billing_mode,
            "billing_cutoff_day": self.billing_cutoff_day,
            "honor_exemption_flags": self.honor_exemption_flags,
            "leads_avoid_late_shifts": self.leads_avoid_late_shifts,
            "capacity": self.capacity.to_dict(),
        }

    @classmethod
    def from_dict(cls, d: Dict) -> "EngineConfig":
        """Create from dictionary; keys that are not config fields are ignored."""
        known = {f.name for f in fields(cls)}
        kwargs = {k: v for k, v in d.items() if k in known}
        if isinstance(kwargs.get("capacity"), dict):
            kwargs["capacity"] = ShiftCapacityPolicy(**kwargs["capacity"])
        return cls(**kwargs)
