"""Tests for calendar predicates."""
from datetime import date, datetime

from shiftrota.engine.calendar import (
    is_billing_rest_day,
    is_holiday,
    is_rest_day,
    week_dates,
    week_start_for,
)
from shiftrota.models.absence import Holiday
from shiftrota.models.constraints import EngineConfig


class TestRestDay:
    def test_friday_is_rest_day(self):
        assert is_rest_day(date(2024, 3, 8))
        assert not is_rest_day(date(2024, 3, 9))

    def test_datetime_and_string_inputs(self):
        assert is_rest_day(datetime(2024, 3, 8, 23, 30))
        assert is_rest_day("2024-03-08")

    def test_configured_weekday(self):
        cfg = EngineConfig(rest_weekday=6)
        assert is_rest_day(date(2024, 3, 10), cfg)
        assert not is_rest_day(date(2024, 3, 8), cfg)


class TestHoliday:
    def test_match_by_calendar_day(self):
        holidays = [Holiday(datetime(2024, 3, 26, 9, 0), "Independence Day")]
        assert is_holiday(date(2024, 3, 26), holidays)
        assert is_holiday(datetime(2024, 3, 26, 22, 0), holidays)
        assert not is_holiday(date(2024, 3, 27), holidays)

    def test_no_holidays(self):
        assert not is_holiday(date(2024, 3, 26), [])
        assert not is_holiday(date(2024, 3, 26), None)


class TestBillingRestDay:
    """Billing applies to rest days on days 1..12 of the month."""

    def test_day_twelve_is_billing(self):
        assert is_billing_rest_day(date(2024, 1, 12))

    def test_day_thirteen_is_not_billing(self):
        assert not is_billing_rest_day(date(2023, 10, 13))
        assert not is_billing_rest_day(date(2024, 9, 13))

    def test_first_friday_is_billing(self):
        assert is_billing_rest_day(date(2024, 3, 1))

    def test_non_rest_day_never_billing(self):
        assert not is_billing_rest_day(date(2024, 3, 2))

    def test_billing_mode_off(self):
        assert not is_billing_rest_day(date(2024, 1, 12), EngineConfig(billing_mode=False))

    def test_custom_cutoff(self):
        cfg = EngineConfig(billing_cutoff_day=7)
        assert is_billing_rest_day(date(2024, 3, 1), cfg)
        assert not is_billing_rest_day(date(2024, 3, 8), cfg)


class TestWeeks:
    def test_week_start_is_saturday(self):
        assert week_start_for(date(2024, 3, 5)) == date(2024, 3, 2)
        assert week_start_for(date(2024, 3, 8)) == date(2024, 3, 2)
        assert week_start_for(date(2024, 3, 2)) == date(2024, 3, 2)
        assert week_start_for(date(2024, 3, 9)) == date(2024, 3, 9)

    def test_week_dates(self):
        dates = week_dates("2024-03-02")
        assert len(dates) == 7
        assert dates[0] == date(2024, 3, 2)
        assert dates[-1] == date(2024, 3, 8)

    def test_week_crosses_month(self):
        dates = week_dates(date(2024, 2, 24))
        assert dates[-1] == date(2024, 3, 1)
