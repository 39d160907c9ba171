"""Day and week schedule models."""
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Any, Dict, Iterator, List, Optional

import pandas as pd

from .absence import DateLike, to_date
from .shift import OffReason, ShiftType

DAYS_PER_WEEK = 7


@dataclass
class DaySchedule:
    """Assignments for a single calendar date, by employee name."""

    date: date
    morning: List[str] = field(default_factory=list)
    evening: List[str] = field(default_factory=list)
    night: List[str] = field(default_factory=list)
    off: List[str] = field(default_factory=list)

    # name -> why they are off
    off_reasons: Dict[str, OffReason] = field(default_factory=dict)

    def __post_init__(self):
        self.date = to_date(self.date)

    def names(self, shift: ShiftType) -> List[str]:
        """The name list backing ``shift``."""
        return getattr(self, ShiftType(shift).key)

    def occupancy(self, shift: ShiftType) -> int:
        return len(self.names(shift))

    def shift_of(self, name: str) -> Optional[ShiftType]:
        """Which list ``name`` sits in, or None."""
        for shift in ShiftType:
            if name in self.names(shift):
                return shift
        return None

    def all_names(self) -> List[str]:
        return self.morning + self.evening + self.night + self.off

    def working_names(self) -> List[str]:
        return self.morning + self.evening + self.night

    def mark_off(self, name: str, reason: OffReason) -> None:
        self.off.append(name)
        self.off_reasons[name] = reason

    def copy(self) -> "DaySchedule":
        return DaySchedule(
            date=self.date,
            morning=list(self.morning),
            evening=list(self.evening),
            night=list(self.night),
            off=list(self.off),
            off_reasons=dict(self.off_reasons),
        )

    def counts(self) -> Dict[str, int]:
        return {s.key: self.occupancy(s) for s in ShiftType}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "morning": list(self.morning),
            "evening": list(self.evening),
            "night": list(self.night),
            "off": list(self.off),
            "off_reasons": {n: r.value for n, r in self.off_reasons.items()},
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "DaySchedule":
        return cls(
            date=d["date"],
            morning=list(d.get("morning", [])),
            evening=list(d.get("evening", [])),
            night=list(d.get("night", [])),
            off=list(d.get("off", [])),
            off_reasons={n: OffReason(r) for n, r in d.get("off_reasons", {}).items()},
        )


@dataclass
class WeekSchedule:
    """Seven consecutive day schedules, identified by the start date."""

    week_start: date
    days: List[DaySchedule] = field(default_factory=list)

    def __post_init__(self):
        self.week_start = to_date(self.week_start)

    def __iter__(self) -> Iterator[DaySchedule]:
        return iter(self.days)

    def __len__(self) -> int:
        return len(self.days)

    @property
    def id(self) -> str:
        return self.week_start.isoformat()

    @property
    def dates(self) -> List[date]:
        return [d.date for d in self.days]

    @property
    def is_complete(self) -> bool:
        """Exactly seven consecutive days from week_start."""
        expected = [self.week_start + timedelta(days=i) for i in range(DAYS_PER_WEEK)]
        return self.dates == expected

    def get_day(self, day: DateLike) -> Optional[DaySchedule]:
        """Day schedule for ``day``, or None if not in this week."""
        target = to_date(day)
        for d in self.days:
            if d.date == target:
                return d
        return None

    def replace_day(self, day: DaySchedule) -> "WeekSchedule":
        """Copy of this week with one day swapped in."""
        days = [day if d.date == day.date else d.copy() for d in self.days]
        return WeekSchedule(week_start=self.week_start, days=days)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "week_start": self.week_start.isoformat(),
            "days": [d.to_dict() for d in self.days],
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "WeekSchedule":
        return cls(
            week_start=d["week_start"],
            days=[DaySchedule.from_dict(x) for x in d.get("days", [])],
        )

    def to_dataframe(self) -> pd.DataFrame:
        """Flatten to one row per (date, name)."""
        rows = [
            {"date": d.date, "name": name, "shift": shift.value}
            for d in self.days
            for shift in ShiftType
            for name in d.names(shift)
        ]
        if not rows:
            return pd.DataFrame(columns=["date", "name", "shift"])
        return pd.DataFrame(rows)

    def to_matrix(self) -> pd.DataFrame:
        """Name × date matrix of shift labels."""
        df = self.to_dataframe()
        if df.empty:
            return pd.DataFrame()
        return df.pivot_table(
            index="name",
            columns="date",
            values="shift",
            aggfunc=lambda x: "/".join(sorted(set(str(v) for v in x))),
            fill_value="",
        )

    def counts(self) -> pd.DataFrame:
        """Per-day head counts for each shift."""
        rows = [{"date": d.date, **d.counts()} for d in self.days]
        return pd.DataFrame(rows, columns=["date"] + [s.key for s in ShiftType])
