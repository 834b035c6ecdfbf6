"""Pytest configuration and shared fixtures."""
import logging
from datetime import datetime

import pytest

from celebration_records.contract.schemas.calendar import Month
from celebration_records.contract.schemas.holiday import NationalHoliday
from celebration_records.core.logging import PACKAGE_LOGGER


@pytest.fixture
def bday_args():
    """Arguments for the reference birthday."""
    return {
        "name": "My Bday",
        "day": 20,
        "month": Month.OCTOBER,
        "created": datetime(2020, 3, 15, 10, 30, 0),
    }


@pytest.fixture
def brazil():
    """National holiday payload."""
    return NationalHoliday(country="Brazil")


@pytest.fixture
def clean_package_logger():
    """Restore the package logger after a test configures it."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    saved_level = package_logger.level
    saved_handlers = list(package_logger.handlers)
    yield package_logger
    package_logger.handlers[:] = saved_handlers
    package_logger.setLevel(saved_level)
