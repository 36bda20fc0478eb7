"""Period module for time intervals and collections of them.

Public API:
    TimePeriod(start_date, end_date)
        Closed interval with relation predicates (is_inside, intersects,
        overlaps_with, contains)

    PeriodInterval
        OPEN / CLOSED boundary semantics for TimePeriod.contains

    PeriodRelation
        INSIDE / INTERSECTS / OVERLAPS, the relations a collection filters by

    TimePeriodCollection(calendar=None)
        Ordered bag of periods with derived bounds, stable sorts, relation
        queries and order-sensitive or order-insensitive equality

Examples:
    >>> from datetime import datetime
    >>> from datetools.period import TimePeriod, TimePeriodCollection
    >>>
    >>> a = TimePeriod(datetime(2025, 1, 1, 10), datetime(2025, 1, 1, 12))
    >>> b = TimePeriod(datetime(2025, 1, 1, 9), datetime(2025, 1, 1, 13))
    >>> a.is_inside(b)
    True
    >>>
    >>> coll = TimePeriodCollection.from_periods([a, b])
    >>> coll == TimePeriodCollection.from_periods([b, a])
    True
    >>> coll.equals(TimePeriodCollection.from_periods([b, a]), consider_order=True)
    False
"""

from datetools.period.timeperiod import (
    PeriodInterval,
    TimePeriod,
)
from datetools.period.periodcollection import (
    PeriodRelation,
    TimePeriodCollection,
)

__all__ = [
    "PeriodInterval",
    "TimePeriod",
    "PeriodRelation",
    "TimePeriodCollection",
]
