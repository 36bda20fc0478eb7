"""Date arithmetic API.

Component-based date construction and calendar-unit arithmetic.
Calendar rollover (month lengths, leap years) is delegated to
dateutil.relativedelta; nothing here re-derives it.
"""

from datetime import datetime
from typing import Optional

try:
    from dateutil.relativedelta import relativedelta
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

from datetools.dates.datecalendar import Calendar


SECONDS_IN_MINUTE = 60
SECONDS_IN_HOUR = 3600


def date_with(
    year: int = 1970,
    month: int = 1,
    day: int = 1,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    *,
    calendar: Optional[Calendar] = None,
) -> datetime:
    """
    Build a datetime from components in the calendar's time zone.

    Args:
        year, month, day, hour, minute, second: Date components
        calendar: Calendar context (default: Calendar.current())

    Returns:
        Aware datetime in the calendar's zone

    Raises:
        ValueError: If the components do not form a valid date

    Examples:
        >>> date_with(2025, 1, 6, calendar=Calendar.utc())
        datetime.datetime(2025, 1, 6, 0, 0, tzinfo=tzutc())
    """
    if calendar is None:
        calendar = Calendar.current()
    return datetime(year, month, day, hour, minute, second, tzinfo=calendar.tz)


def _delta(years=0, months=0, weeks=0, days=0, hours=0, minutes=0, seconds=0) -> relativedelta:
    return relativedelta(
        years=years,
        months=months,
        weeks=weeks,
        days=days,
        hours=hours,
        minutes=minutes,
        seconds=seconds,
    )


def date_by_adding(
    dt: datetime,
    *,
    years: int = 0,
    months: int = 0,
    weeks: int = 0,
    days: int = 0,
    hours: int = 0,
    minutes: int = 0,
    seconds: int = 0,
) -> datetime:
    """
    Add calendar units to a date.

    Month and year additions clamp to the end of the target month:
    Jan 31 + 1 month is Feb 28 (or Feb 29 in a leap year).

    Examples:
        >>> date_by_adding(datetime(2025, 1, 31), months=1)
        datetime.datetime(2025, 2, 28, 0, 0)

        >>> date_by_adding(datetime(2024, 2, 29), years=1)
        datetime.datetime(2025, 2, 28, 0, 0)
    """
    return dt + _delta(years, months, weeks, days, hours, minutes, seconds)


def date_by_subtracting(
    dt: datetime,
    *,
    years: int = 0,
    months: int = 0,
    weeks: int = 0,
    days: int = 0,
    hours: int = 0,
    minutes: int = 0,
    seconds: int = 0,
) -> datetime:
    """Subtract calendar units from a date (mirror of date_by_adding)."""
    return dt - _delta(years, months, weeks, days, hours, minutes, seconds)


def seconds_from(dt: datetime, other: datetime) -> float:
    """Signed number of seconds from `other` to `dt`."""
    return (dt - other).total_seconds()


def minutes_from(dt: datetime, other: datetime) -> float:
    return seconds_from(dt, other) / SECONDS_IN_MINUTE


def hours_from(dt: datetime, other: datetime) -> float:
    return seconds_from(dt, other) / SECONDS_IN_HOUR


__all__ = [
    "date_with",
    "date_by_adding",
    "date_by_subtracting",
    "seconds_from",
    "minutes_from",
    "hours_from",
]
