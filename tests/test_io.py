"""Tests for CSV loading and saving."""
import pandas as pd
import pytest

from shiftrota.io.csv_loader import (
    EMPLOYEE_COLUMNS,
    employees_to_dataframe,
    load_employees,
    load_holidays,
    load_leaves,
    save_employees,
)
from shiftrota.models.shift import LeaveKind, Role, ShiftType


class TestLoadEmployees:
    def test_from_dataframe(self):
        df = pd.DataFrame({
            "name": ["Tariq", "Alice", "Bob"],
            "role": ["TL", "Senior", ""],
            "current_shift": ["Morning", "evening", "Night"],
        })
        employees = load_employees(df)
        assert [e.name for e in employees] == ["Tariq", "Alice", "Bob"]
        assert [e.id for e in employees] == ["0", "1", "2"]
        assert employees[0].role == Role.TEAM_LEAD
        assert employees[1].current_shift == ShiftType.EVENING
        assert employees[2].role == Role.JUNIOR
        assert employees[2].rotation_step == 3

    def test_row_order_is_creation_order(self):
        employees = load_employees(pd.DataFrame({"name": ["B", "A"]}))
        assert employees[0].order_key < employees[1].order_key

    def test_blank_names_skipped(self):
        df = pd.DataFrame({"name": ["Alice", "", None]})
        assert len(load_employees(df)) == 1

    def test_flag_parsing(self):
        df = pd.DataFrame({
            "name": ["A", "B"],
            "active": ["0", ""],
            "rest_day_off": ["yes", "1.0"],
        })
        a, b = load_employees(df)
        assert a.active is False
        assert b.active is True
        assert a.rest_day_off and b.rest_day_off
        assert not a.holiday_off

    def test_missing_name_column(self):
        with pytest.raises(ValueError, match="name"):
            load_employees(pd.DataFrame({"id": ["e1"]}))

    def test_unknown_role(self):
        with pytest.raises(ValueError):
            load_employees(pd.DataFrame({"name": ["A"], "role": ["Wizard"]}))


class TestSaveEmployees:
    def test_roundtrip(self, roster, tmp_path):
        path = tmp_path / "employees.csv"
        save_employees(roster, path)
        loaded = load_employees(path)
        assert loaded == roster
        assert [e.rotation_step for e in loaded] == [e.rotation_step for e in roster]

    def test_booleans_written_as_ints(self, roster, tmp_path):
        path = tmp_path / "employees.csv"
        save_employees(roster, path)
        df = pd.read_csv(path, dtype=str)
        assert set(df["active"]) == {"1"}
        assert df.loc[0, "rest_day_off"] == "1"
        assert df.loc[2, "rest_day_off"] == "0"

    def test_empty_roster(self, tmp_path):
        path = tmp_path / "employees.csv"
        save_employees([], path)
        assert list(pd.read_csv(path).columns) == EMPLOYEE_COLUMNS

    def test_to_dataframe(self, roster):
        df = employees_to_dataframe(roster)
        assert list(df.columns) == EMPLOYEE_COLUMNS
        assert len(df) == len(roster)


class TestLoadHolidays:
    def test_load(self):
        df = pd.DataFrame({"date": ["2024-03-26", ""], "label": ["Independence Day", ""]})
        holidays = load_holidays(df)
        assert len(holidays) == 1
        assert holidays[0].label == "Independence Day"

    def test_missing_date_column(self):
        with pytest.raises(ValueError, match="date"):
            load_holidays(pd.DataFrame({"label": ["x"]}))


class TestLoadLeaves:
    def test_load(self, tmp_path):
        path = tmp_path / "leaves.csv"
        path.write_text(
            "employee_id,start_date,end_date,kind,approved\n"
            "e4,2024-03-04,2024-03-05,sick,1\n"
            "e3,2024-03-06,2024-03-06,,0\n",
            encoding="utf-8",
        )
        sick, casual = load_leaves(path)
        assert sick.kind == LeaveKind.SICK
        assert sick.days == 2
        assert sick.approved
        assert casual.kind == LeaveKind.CASUAL
        assert not casual.approved

    def test_missing_columns(self):
        with pytest.raises(ValueError, match="end_date"):
            load_leaves(pd.DataFrame({"employee_id": ["e1"], "start_date": ["2024-03-04"]}))
