"""CSV loading and saving for roster, holiday and leave data."""
from pathlib import Path
from typing import List, Union

import pandas as pd

from shiftrota.models.absence import Holiday, Leave
from shiftrota.models.employee import Employee
from shiftrota.models.shift import LeaveKind, Role, ShiftType

Source = Union[str, Path, pd.DataFrame]

EMPLOYEE_COLUMNS = [
    "id", "name", "role", "active", "rest_day_off", "holiday_off",
    "current_shift", "rotation_step", "created_at",
    "total_night_count", "total_shift_count",
]
BOOL_COLUMNS = ["active", "rest_day_off", "holiday_off"]


def _safe_int(value, default: int = 0) -> int:
    """Safely convert value to int."""
    try:
        return int(float(value))
    except (ValueError, TypeError):
        return default


def _safe_bool(value, default: bool = False) -> bool:
    """Safely convert value to bool."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        if not value.strip():
            return default
        return value.strip().lower() in ("1", "1.0", "true", "yes", "y")
    return default


def _read(source: Source) -> pd.DataFrame:
    if isinstance(source, pd.DataFrame):
        df = source.copy().fillna("").astype(str)
    else:
        df = pd.read_csv(source, dtype=str).fillna("")
    return df


def load_employees(source: Source) -> List[Employee]:
    """
    Load the roster from a CSV file or DataFrame.

    Rows without a name are skipped. Missing ids default to the row
    number and missing creation keys to a zero-padded row number, so
    file order becomes creation order.

    Raises:
        ValueError: if there is no 'name' column, or a role/shift is unknown
    """
    df = _read(source)
    if "name" not in df.columns:
        raise ValueError("CSV must have a 'name' column")

    employees = []
    for pos, (_, row) in enumerate(df.iterrows()):
        name = str(row["name"]).strip()
        if not name:
            continue

        step = str(row.get("rotation_step", "")).strip()
        employees.append(Employee(
            id=str(row.get("id", "")).strip() or str(pos),
            name=name,
            role=Role.from_string(str(row.get("role", "")).strip() or Role.JUNIOR.value),
            active=_safe_bool(row.get("active", True), default=True),
            rest_day_off=_safe_bool(row.get("rest_day_off")),
            holiday_off=_safe_bool(row.get("holiday_off")),
            current_shift=ShiftType.from_string(str(row.get("current_shift", "")).strip() or "Morning"),
            rotation_step=_safe_int(step) if step else None,
            created_at=str(row.get("created_at", "")).strip() or f"{pos:06d}",
            total_night_count=_safe_int(row.get("total_night_count")),
            total_shift_count=_safe_int(row.get("total_shift_count")),
        ))
    return employees


def save_employees(employees: List[Employee], path: Union[str, Path]) -> None:
    """Save the roster to CSV; booleans are written as 1/0."""
    if not employees:
        df = pd.DataFrame(columns=EMPLOYEE_COLUMNS)
    else:
        df = pd.DataFrame([e.to_dict() for e in employees], columns=EMPLOYEE_COLUMNS)

    for col in BOOL_COLUMNS:
        if col in df.columns:
            df[col] = df[col].astype(int)

    df.to_csv(path, index=False)


def load_holidays(source: Source) -> List[Holiday]:
    """Load holidays (columns: date, label)."""
    df = _read(source)
    if "date" not in df.columns:
        raise ValueError("Holiday CSV must have a 'date' column")
    return [
        Holiday(date=str(row["date"]).strip(), label=str(row.get("label", "")))
        for _, row in df.iterrows()
        if str(row["date"]).strip()
    ]


def load_leaves(source: Source) -> List[Leave]:
    """Load leave records (columns: employee_id, start_date, end_date, kind, approved)."""
    df = _read(source)
    missing = {"employee_id", "start_date", "end_date"} - set(df.columns)
    if missing:
        raise ValueError(f"Leave CSV missing columns: {', '.join(sorted(missing))}")

    leaves = []
    for pos, (_, row) in enumerate(df.iterrows()):
        emp_id = str(row["employee_id"]).strip()
        if not emp_id:
            continue
        leaves.append(Leave(
            employee_id=emp_id,
            start_date=str(row["start_date"]).strip(),
            end_date=str(row["end_date"]).strip(),
            kind=str(row.get("kind", "")).strip() or LeaveKind.CASUAL.value,
            approved=_safe_bool(row.get("approved", True), default=True),
            id=str(row.get("id", "")).strip() or str(pos),
        ))
    return leaves


def employees_to_dataframe(employees: List[Employee]) -> pd.DataFrame:
    """Convert roster to DataFrame for display."""
    if not employees:
        return pd.DataFrame(columns=EMPLOYEE_COLUMNS)
    return pd.DataFrame([e.to_dict() for e in employees], columns=EMPLOYEE_COLUMNS)
