"""DateTools - Time Periods and Relative-Time Formatting

Public API for time-period collections, calendar arithmetic and relative-time phrases.

Usage:
    from datetools import TimePeriod, TimePeriodCollection
    from datetools import Calendar, date_with, date_by_adding, date_by_subtracting, time_ago

    # Build periods and query a collection
    a = TimePeriod(date_with(2025, 1, 1, 10), date_with(2025, 1, 1, 12))
    coll = TimePeriodCollection.from_periods([a])
    coll.periods_intersected_by_date(date_with(2025, 1, 1, 11))  # Returns: collection holding a

    # Calendar-aware arithmetic
    date_by_adding(date_with(2025, 1, 31), months=1)  # Returns: Feb 28, 2025

    # Relative-time phrases
    time_ago(date_by_subtracting(Calendar.current().now(), hours=3))  # Returns: '3 hours ago'

Not thread-safe: a TimePeriodCollection shared across threads needs external locking.
"""

__version__ = "0.1.0"

# ============================================================================
# Calendar / Date Arithmetic API
# ============================================================================

from .dates.datecalendar import Calendar
from .dates.dateapi import (
    date_with,               # Build a date from components
    date_by_adding,          # Add calendar units (years ... seconds)
    date_by_subtracting,     # Subtract calendar units
    seconds_from,            # Signed difference in seconds
    minutes_from,            # Signed difference in minutes
    hours_from,              # Signed difference in hours
)

# ============================================================================
# Time Period API
# ============================================================================

from .period.timeperiod import (
    TimePeriod,              # Closed interval with relation predicates
    PeriodInterval,          # OPEN / CLOSED boundary semantics
)
from .period.periodcollection import (
    TimePeriodCollection,    # Ordered bag of periods with bounds and queries
    PeriodRelation,          # INSIDE / INTERSECTS / OVERLAPS
)

# ============================================================================
# Relative-Time Formatting API
# ============================================================================

from .timeago.timeagoapi import (
    DateAgoFormat,           # SHORT / WEEK / LONG / LONG_USING_NUMERIC_*
    DateAgoUnit,             # YEARS ... SECONDS
    time_ago,                # Primary API - "3 hours ago", "Yesterday"
    time_ago_with_format,    # Same, explicit format
    localized_string,        # Phrase for a unit and value
)
from .timeago.timeagolocale import (
    MissingTranslationError, # Raised by strict lookups
)

__all__ = [
    # Calendar / dates
    "Calendar",
    "date_with",
    "date_by_adding",
    "date_by_subtracting",
    "seconds_from",
    "minutes_from",
    "hours_from",
    # Periods
    "TimePeriod",
    "PeriodInterval",
    "TimePeriodCollection",
    "PeriodRelation",
    # Relative time
    "DateAgoFormat",
    "DateAgoUnit",
    "time_ago",
    "time_ago_with_format",
    "localized_string",
    "MissingTranslationError",
]
