"""Leave and holiday records."""
from dataclasses import dataclass
from datetime import date, datetime
from typing import Union

from .shift import LeaveKind

DateLike = Union[date, datetime, str]


def to_date(value: DateLike) -> date:
    """Reduce a date, datetime or ISO string to a calendar date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        raise ValueError(f"Unparseable date: {value!r}") from None


@dataclass
class Leave:
    """Time off for one employee over a closed date interval."""
    employee_id: str
    start_date: date
    end_date: date
    kind: LeaveKind = LeaveKind.CASUAL
    approved: bool = True
    id: str = ""

    def __post_init__(self):
        self.employee_id = str(self.employee_id).strip()
        self.start_date = to_date(self.start_date)
        self.end_date = to_date(self.end_date)
        if not isinstance(self.kind, LeaveKind):
            self.kind = LeaveKind(str(self.kind).strip().capitalize())
        if self.end_date < self.start_date:
            raise ValueError(
                f"Leave for {self.employee_id} ends ({self.end_date}) before it starts ({self.start_date})"
            )

    def covers(self, day: DateLike) -> bool:
        """True if ``day`` falls inside [start_date, end_date]."""
        return self.start_date <= to_date(day) <= self.end_date

    @property
    def days(self) -> int:
        return (self.end_date - self.start_date).days + 1

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employee_id": self.employee_id,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "kind": self.kind.value,
            "approved": self.approved,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Leave":
        return cls(
            employee_id=d.get("employee_id", ""),
            start_date=d["start_date"],
            end_date=d["end_date"],
            kind=d.get("kind", LeaveKind.CASUAL.value),
            approved=bool(d.get("approved", True)),
            id=str(d.get("id", "")),
        )


@dataclass
class Holiday:
    """A public holiday."""
    date: date
    label: str = ""

    def __post_init__(self):
        self.date = to_date(self.date)
        self.label = str(self.label).strip()

    def to_dict(self) -> dict:
        return {"date": self.date.isoformat(), "label": self.label}

    @classmethod
    def from_dict(cls, d: dict) -> "Holiday":
        return cls(date=d["date"], label=d.get("label", ""))
