"""Pytest configuration and fixtures."""
import logging
import sys
from datetime import date
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from shiftrota.engine.generator import generate_week
from shiftrota.models.constraints import EngineConfig
from shiftrota.models.employee import Employee
from shiftrota.models.shift import Role, ShiftType
from shiftrota.utils.logging_setup import ROOT_LOGGER
from shiftrota.utils.structured_logging import configure_structlog

configure_structlog()

# Saturday; the Friday of this week (2024-03-08) is a billing rest day
WEEK_START = date(2024, 3, 2)


@pytest.fixture
def roster():
    """Eight employees in creation order: two leads, six rotating staff."""
    staff = [
        ("e1", "Tariq", Role.TEAM_LEAD, ShiftType.MORNING),
        ("e2", "Maya", Role.MANAGER, ShiftType.MORNING),
        ("e3", "Alice", Role.SENIOR, ShiftType.EVENING),
        ("e4", "Bob", Role.JUNIOR, ShiftType.NIGHT),
        ("e5", "Chen", Role.SENIOR, ShiftType.MORNING),
        ("e6", "Dana", Role.JUNIOR, ShiftType.EVENING),
        ("e7", "Eli", Role.JUNIOR, ShiftType.MORNING),
        ("e8", "Fay", Role.JUNIOR, ShiftType.NIGHT),
    ]
    return [
        Employee(
            id=emp_id,
            name=name,
            role=role,
            current_shift=shift,
            rest_day_off=role.is_lead,
            holiday_off=role.is_lead,
            created_at=f"2024-01-01T00:00:{i:02d}",
        )
        for i, (emp_id, name, role, shift) in enumerate(staff)
    ]


@pytest.fixture
def week_start():
    return WEEK_START


@pytest.fixture
def config():
    """Default engine configuration."""
    return EngineConfig()


@pytest.fixture
def week(roster, config):
    """Generated week starting on WEEK_START with no holidays or leave."""
    return generate_week(WEEK_START, roster, [], [], config)


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by setup_logging so they never outlive a test's captured stdout."""
    yield
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
