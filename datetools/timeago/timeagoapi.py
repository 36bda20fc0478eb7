"""Relative-time formatting API.

Turns a datetime into a human-readable phrase relative to now (or to an
explicit `asof_ts`): "3 hours ago", "Yesterday", "2w".

Gaps under 24 hours are measured in hours, minutes and seconds. Longer
gaps compare calendar dates only (time of day dropped) and are measured
in years, months, weeks and days.
"""

import logging
from datetime import datetime
from enum import Enum
from typing import Optional

try:
    from dateutil.relativedelta import relativedelta
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

from datetools.timeago.timeagolocale import plural_suffix, string_for, table_locale

logger = logging.getLogger(__name__)


class DateAgoFormat(Enum):
    SHORT = "short"
    WEEK = "week"
    LONG = "long"
    LONG_USING_NUMERIC_DATES = "long_numeric_dates"
    LONG_USING_NUMERIC_TIMES = "long_numeric_times"
    LONG_USING_NUMERIC_DATES_AND_TIMES = "long_numeric_dates_and_times"


class DateAgoUnit(Enum):
    YEARS = "years"
    MONTHS = "months"
    WEEKS = "weeks"
    DAYS = "days"
    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"


# unit -> (short key, plural key, numeric singular key, phrase key)
_UNIT_KEYS = {
    DateAgoUnit.YEARS: ("%d{suffix}y", "%d {suffix}years ago", "1 year ago", "Last year"),
    DateAgoUnit.MONTHS: ("%d{suffix}M", "%d {suffix}months ago", "1 month ago", "Last month"),
    DateAgoUnit.WEEKS: ("%d{suffix}w", "%d {suffix}weeks ago", "1 week ago", "Last week"),
    DateAgoUnit.DAYS: ("%d{suffix}d", "%d {suffix}days ago", "1 day ago", "Yesterday"),
    DateAgoUnit.HOURS: ("%d{suffix}h", "%d {suffix}hours ago", "1 hour ago", "An hour ago"),
    DateAgoUnit.MINUTES: ("%d{suffix}m", "%d {suffix}minutes ago", "1 minute ago", "A minute ago"),
    DateAgoUnit.SECONDS: ("%d{suffix}s", "%d {suffix}seconds ago", "1 second ago", "A second ago"),
}

_DATE_UNITS = {DateAgoUnit.YEARS, DateAgoUnit.MONTHS, DateAgoUnit.WEEKS, DateAgoUnit.DAYS}

_WEEKDAY_KEYS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def time_ago(
    dt: datetime,
    *,
    numeric_dates: bool = False,
    numeric_times: bool = False,
    asof_ts: Optional[datetime] = None,
    locale: Optional[str] = None,
) -> str:
    """
    Relative-time phrase for `dt` in one of the long formats.

    Args:
        dt: Date to describe
        numeric_dates: Use "1 day ago" instead of "Yesterday" (years to days)
        numeric_times: Use "1 hour ago" instead of "An hour ago" (hours to seconds)
        asof_ts: Reference timestamp (default: now, in dt's time zone)
        locale: Locale for the string table (default: preferred locale)

    Examples:
        >>> asof = datetime(2025, 10, 2, 12, 0)
        >>> time_ago(datetime(2025, 10, 2, 9, 0), asof_ts=asof)
        '3 hours ago'
        >>> time_ago(datetime(2025, 10, 1, 9, 0), asof_ts=asof)
        'Yesterday'
        >>> time_ago(datetime(2025, 10, 1, 9, 0), numeric_dates=True, asof_ts=asof)
        '1 day ago'
    """
    if numeric_dates and numeric_times:
        fmt = DateAgoFormat.LONG_USING_NUMERIC_DATES_AND_TIMES
    elif numeric_dates:
        fmt = DateAgoFormat.LONG_USING_NUMERIC_DATES
    elif numeric_times:
        fmt = DateAgoFormat.LONG_USING_NUMERIC_TIMES
    else:
        fmt = DateAgoFormat.LONG

    return time_ago_with_format(dt, fmt, asof_ts=asof_ts, locale=locale)


def time_ago_with_format(
    dt: datetime,
    fmt: DateAgoFormat,
    *,
    asof_ts: Optional[datetime] = None,
    locale: Optional[str] = None,
) -> str:
    """
    Relative-time phrase for `dt` in the given format.

    The phrase describes the distance between `dt` and `asof_ts` regardless
    of which one is earlier.

    Examples:
        >>> asof = datetime(2025, 10, 2, 12, 0)
        >>> time_ago_with_format(datetime(2025, 9, 18), DateAgoFormat.SHORT, asof_ts=asof)
        '2w'
    """
    if asof_ts is None:
        asof_ts = datetime.now(dt.tzinfo)

    earliest, latest = (dt, asof_ts) if dt <= asof_ts else (asof_ts, dt)

    total_seconds = int((latest - earliest).total_seconds())
    hours, rem = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rem, 60)

    if hours < 24:
        if hours >= 1:
            return localized_string(fmt, DateAgoUnit.HOURS, hours, dt=dt, locale=locale)
        if minutes >= 1:
            return localized_string(fmt, DateAgoUnit.MINUTES, minutes, dt=dt, locale=locale)
        return localized_string(fmt, DateAgoUnit.SECONDS, seconds, dt=dt, locale=locale)

    # Compare calendar dates only
    diff = relativedelta(latest.date(), earliest.date())

    if diff.years >= 1:
        return localized_string(fmt, DateAgoUnit.YEARS, diff.years, dt=dt, locale=locale)
    if diff.months >= 1:
        return localized_string(fmt, DateAgoUnit.MONTHS, diff.months, dt=dt, locale=locale)
    if diff.weeks >= 1:
        return localized_string(fmt, DateAgoUnit.WEEKS, diff.weeks, dt=dt, locale=locale)
    return localized_string(fmt, DateAgoUnit.DAYS, diff.days, dt=dt, locale=locale)


def localized_string(
    fmt: DateAgoFormat,
    unit: DateAgoUnit,
    value: int,
    *,
    dt: Optional[datetime] = None,
    locale: Optional[str] = None,
    strict: bool = False,
) -> str:
    """
    Localized phrase for `value` units ago.

    Selection:
      - SHORT format: compact form ("3h", "2w")
      - value >= 2: counted form ("3 hours ago"); in WEEK format, 2-7 days
        render the weekday name of `dt` instead
      - value < 2 with a numeric format for the unit: "1 hour ago"
      - otherwise the phrase: "An hour ago", "Yesterday", "Last year", ...

    Args:
        fmt: Output format
        unit: Unit `value` is measured in
        value: Number of units
        dt: The described date (required for WEEK format weekday names)
        locale: Locale for the string table (default: preferred locale)
        strict: Raise MissingTranslationError for keys missing from the table

    Raises:
        ValueError: For an unknown format/unit, or WEEK weekday names without `dt`

    Examples:
        >>> localized_string(DateAgoFormat.LONG, DateAgoUnit.DAYS, 1, locale="en")
        'Yesterday'
        >>> localized_string(DateAgoFormat.SHORT, DateAgoUnit.MONTHS, 5, locale="en")
        '5M'
        >>> localized_string(DateAgoFormat.LONG, DateAgoUnit.YEARS, 5, locale="ru")
        '5 лет назад'
    """
    if not isinstance(fmt, DateAgoFormat):
        raise ValueError(f"Unknown format: {fmt!r}")
    if unit not in _UNIT_KEYS:
        raise ValueError(f"Unknown unit: {unit!r}")

    short_key, plural_key, numeric_key, phrase_key = _UNIT_KEYS[unit]

    if fmt is DateAgoFormat.SHORT:
        return _counted_string(short_key, value, locale, strict)

    if value >= 2:
        if fmt is DateAgoFormat.WEEK and unit is DateAgoUnit.DAYS and value <= 7:
            if dt is None:
                raise ValueError("WEEK format needs the described date for weekday names")
            return string_for(_WEEKDAY_KEYS[dt.weekday()], locale, strict=strict)
        return _counted_string(plural_key, value, locale, strict)

    if _is_numeric(fmt, unit):
        return string_for(numeric_key, locale, strict=strict)

    return string_for(phrase_key, locale, strict=strict)


def _is_numeric(fmt: DateAgoFormat, unit: DateAgoUnit) -> bool:
    if unit in _DATE_UNITS:
        return fmt in (
            DateAgoFormat.LONG_USING_NUMERIC_DATES,
            DateAgoFormat.LONG_USING_NUMERIC_DATES_AND_TIMES,
        )
    return fmt in (
        DateAgoFormat.LONG_USING_NUMERIC_TIMES,
        DateAgoFormat.LONG_USING_NUMERIC_DATES_AND_TIMES,
    )


def _counted_string(key_template: str, value: int, locale: Optional[str], strict: bool) -> str:
    """Look up a "%d ..." key with its plural suffix and fill in the value."""
    # Suffix follows the table serving the locale, not the requested locale
    key = key_template.format(suffix=plural_suffix(value, table_locale(locale)))
    text = string_for(key, locale, strict=strict)
    try:
        return text % value
    except (TypeError, ValueError):
        logger.warning(f"Bad placeholder in translation for {key!r}: {text!r}")
        return text


__all__ = [
    "DateAgoFormat",
    "DateAgoUnit",
    "time_ago",
    "time_ago_with_format",
    "localized_string",
]
