"""Dates module for calendar context and calendar-unit arithmetic.

Public API:
    Calendar
        Calendar context (time zone) used for date-component calculations

    date_with(year, month, day, hour, minute, second, calendar=None) -> datetime
        Build a date from components

    date_by_adding(dt, **units) / date_by_subtracting(dt, **units) -> datetime
        Calendar-aware arithmetic (years, months, weeks, days, hours, ...)

    seconds_from / minutes_from / hours_from(dt, other) -> float
        Signed differences between two dates

Examples:
    >>> from datetools.dates import Calendar, date_with, date_by_adding
    >>> start = date_with(2025, 1, 31, calendar=Calendar.utc())
    >>> date_by_adding(start, months=1).day
    28
"""

from datetools.dates.datecalendar import Calendar
from datetools.dates.dateapi import (
    date_with,
    date_by_adding,
    date_by_subtracting,
    seconds_from,
    minutes_from,
    hours_from,
)

__all__ = [
    "Calendar",
    "date_with",
    "date_by_adding",
    "date_by_subtracting",
    "seconds_from",
    "minutes_from",
    "hours_from",
]
