"""Timeago module for human-readable relative-time formatting.

Public API:
    time_ago(dt, numeric_dates=False, numeric_times=False, asof_ts=None, locale=None) -> str
        "3 hours ago", "Yesterday", "1 day ago", ...

    time_ago_with_format(dt, fmt, asof_ts=None, locale=None) -> str
        Same, with an explicit DateAgoFormat (SHORT gives "3h", "2w", ...)

    localized_string(fmt, unit, value, dt=None, locale=None, strict=False) -> str
        Phrase for a known unit and value

Examples:
    >>> from datetime import datetime
    >>> from datetools.timeago import time_ago
    >>> asof = datetime(2025, 10, 2, 12, 0)
    >>> time_ago(datetime(2025, 10, 2, 9, 0), asof_ts=asof, locale="en")
    '3 hours ago'
    >>> time_ago(datetime(2024, 10, 2, 9, 0), asof_ts=asof, locale="ru")
    'В прошлом году'
"""

from datetools.timeago.timeagoapi import (
    DateAgoFormat,
    DateAgoUnit,
    time_ago,
    time_ago_with_format,
    localized_string,
)
from datetools.timeago.timeagolocale import (
    MissingTranslationError,
    get_preferred_locale,
    plural_suffix,
    load_strings,
    table_locale,
)

__all__ = [
    "DateAgoFormat",
    "DateAgoUnit",
    "time_ago",
    "time_ago_with_format",
    "localized_string",
    "MissingTranslationError",
    "get_preferred_locale",
    "plural_suffix",
    "load_strings",
    "table_locale",
]
