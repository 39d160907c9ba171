"""
Calendar Rules
==============
Pure predicates over dates: weekly rest day, public holiday, billing
rest day. Datetimes are compared by calendar day.
"""
from datetime import date, timedelta
from typing import Iterable, List, Optional

from shiftrota.models.absence import DateLike, Holiday, to_date
from shiftrota.models.constraints import EngineConfig
from shiftrota.models.schedule import DAYS_PER_WEEK


def is_rest_day(day: DateLike, config: Optional[EngineConfig] = None) -> bool:
    """True if ``day`` falls on the configured weekly rest weekday."""
    config = config or EngineConfig()
    return to_date(day).weekday() == config.rest_weekday


def is_holiday(day: DateLike, holidays: Iterable[Holiday]) -> bool:
    """True if any holiday falls on the same calendar day."""
    target = to_date(day)
    return any(to_date(h.date) == target for h in holidays or ())


def is_billing_rest_day(day: DateLike, config: Optional[EngineConfig] = None) -> bool:
    """Rest day within the first ``billing_cutoff_day`` days of the month."""
    config = config or EngineConfig()
    if not config.billing_mode:
        return False
    d = to_date(day)
    return is_rest_day(d, config) and 1 <= d.day <= config.billing_cutoff_day


def week_start_for(day: DateLike, config: Optional[EngineConfig] = None) -> date:
    """Start date of the rota week containing ``day``."""
    config = config or EngineConfig()
    d = to_date(day)
    offset = (d.weekday() - config.week_start_weekday) % DAYS_PER_WEEK
    return d - timedelta(days=offset)


def week_dates(week_start: DateLike) -> List[date]:
    """The seven consecutive dates beginning at ``week_start``."""
    start = to_date(week_start)
    return [start + timedelta(days=i) for i in range(DAYS_PER_WEEK)]
