"""Shared test fixtures and utilities for datetools tests."""

import pytest
from datetime import datetime

from datetools.dates import Calendar
from datetools.period import TimePeriod
from datetools.timeago.timeagolocale import _load_table


def at(hour: int, minute: int = 0, day: int = 1) -> datetime:
    """Naive datetime on Jan 2025 at the given hour, used across period tests."""
    return datetime(2025, 1, day, hour, minute)


@pytest.fixture
def period_a():
    """A = [10:00, 12:00]"""
    return TimePeriod(at(10), at(12))


@pytest.fixture
def period_b():
    """B = [09:00, 13:00], contains A"""
    return TimePeriod(at(9), at(13))


@pytest.fixture
def period_c():
    """C = [12:00, 14:00], touches A at 12:00"""
    return TimePeriod(at(12), at(14))


@pytest.fixture
def period_d():
    """D = [13:00, 14:00], disjoint from A"""
    return TimePeriod(at(13), at(14))


@pytest.fixture
def utc_calendar():
    return Calendar.utc()


@pytest.fixture
def clean_locale_env(monkeypatch):
    """Remove every locale-related environment variable.

    Also clears the string-table cache so each test sees its own
    configuration.
    """
    for var in ("DATETOOLS_LOCALE", "LC_ALL", "LC_MESSAGES", "LANG", "DATETOOLS_STRINGS_PATH"):
        monkeypatch.delenv(var, raising=False)
    _load_table.cache_clear()
    yield monkeypatch
    _load_table.cache_clear()
