"""Time Period
-----------

A single interval [start_date, end_date] over datetimes, with the
relation predicates the collection queries are built on.

Relations (A = receiver, B = other):
  - is_inside:      A lies entirely within B (shared endpoints allowed)
  - intersects:     A and B share at least one instant (touching counts)
  - overlaps_with:  A and B share more than a single instant
  - contains:       an instant lies within A, under OPEN or CLOSED bounds

Examples:
  >>> from datetime import datetime
  >>> a = TimePeriod(datetime(2025, 1, 1, 10), datetime(2025, 1, 1, 12))
  >>> c = TimePeriod(datetime(2025, 1, 1, 12), datetime(2025, 1, 1, 14))
  >>> a.intersects(c), a.overlaps_with(c)
  (True, False)
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum

from datetools.dates.dateapi import date_by_adding, date_by_subtracting


class PeriodInterval(Enum):
    """Whether a period's endpoints count as inside it."""

    OPEN = "open"
    CLOSED = "closed"


@dataclass(frozen=True)
class TimePeriod:
    """
    Closed interval between two datetimes.

    Equality and hashing are component-wise on (start_date, end_date).
    Instances are immutable; every relation is a pure predicate.

    Raises:
        TypeError: If either bound is not a datetime
        ValueError: If start_date is after end_date
    """

    start_date: datetime
    end_date: datetime

    def __post_init__(self) -> None:
        if not isinstance(self.start_date, datetime) or not isinstance(self.end_date, datetime):
            raise TypeError(
                f"TimePeriod bounds must be datetimes, got "
                f"{type(self.start_date).__name__} and {type(self.end_date).__name__}"
            )
        if self.start_date > self.end_date:
            raise ValueError(
                f"TimePeriod requires start_date <= end_date, "
                f"got start_date={self.start_date} end_date={self.end_date}"
            )

    # ---- Construction ----

    @classmethod
    def starting_at(cls, start: datetime, **units: int) -> TimePeriod:
        """
        Period of a calendar length beginning at `start`.

        Examples:
            >>> TimePeriod.starting_at(datetime(2025, 1, 31), months=1).end_date
            datetime.datetime(2025, 2, 28, 0, 0)
        """
        return cls(start, date_by_adding(start, **units))

    @classmethod
    def ending_at(cls, end: datetime, **units: int) -> TimePeriod:
        """Period of a calendar length finishing at `end`."""
        return cls(date_by_subtracting(end, **units), end)

    # ---- Durations ----

    @property
    def duration(self) -> timedelta:
        return self.end_date - self.start_date

    @property
    def duration_in_seconds(self) -> float:
        return self.duration.total_seconds()

    @property
    def duration_in_minutes(self) -> float:
        return self.duration_in_seconds / 60

    @property
    def duration_in_hours(self) -> float:
        return self.duration_in_seconds / 3600

    @property
    def duration_in_days(self) -> float:
        return self.duration_in_seconds / 86400

    @property
    def duration_in_weeks(self) -> float:
        return self.duration_in_days / 7

    @property
    def is_moment(self) -> bool:
        """True for a zero-length period."""
        return self.start_date == self.end_date

    # ---- Relations ----

    def is_inside(self, other: TimePeriod) -> bool:
        """True iff this period lies within `other`, endpoints included."""
        return self.start_date >= other.start_date and self.end_date <= other.end_date

    def contains_period(self, other: TimePeriod) -> bool:
        return other.is_inside(self)

    def intersects(self, other: TimePeriod) -> bool:
        """True iff the two closed intervals share at least one instant."""
        return self.start_date <= other.end_date and self.end_date >= other.start_date

    def overlaps_with(self, other: TimePeriod) -> bool:
        """
        True iff the periods share more than a single instant.

        Periods that only touch (one ends where the other starts) do not
        overlap. A moment overlaps a period only when it falls strictly
        inside it; two moments never overlap. The relation is symmetric.
        """
        return self.start_date < other.end_date and other.start_date < self.end_date

    def contains(self, instant: datetime, interval: PeriodInterval = PeriodInterval.CLOSED) -> bool:
        """
        True iff `instant` lies within this period.

        Args:
            instant: Point in time to test
            interval: CLOSED counts the endpoints as contained, OPEN does not

        Examples:
            >>> p = TimePeriod(datetime(2025, 1, 1, 10), datetime(2025, 1, 1, 12))
            >>> p.contains(datetime(2025, 1, 1, 12))
            True
            >>> p.contains(datetime(2025, 1, 1, 12), PeriodInterval.OPEN)
            False
        """
        if interval is PeriodInterval.CLOSED:
            return self.start_date <= instant <= self.end_date
        if interval is PeriodInterval.OPEN:
            return self.start_date < instant < self.end_date
        raise ValueError(f"Unknown interval: {interval!r}")

    def has_gap_between(self, other: TimePeriod) -> bool:
        return not self.intersects(other)

    def gap_between(self, other: TimePeriod) -> timedelta:
        """Time separating two periods; zero when they intersect."""
        if self.end_date < other.start_date:
            return other.start_date - self.end_date
        if other.end_date < self.start_date:
            return self.start_date - other.end_date
        return timedelta(0)

    def shifted(self, **units: int) -> TimePeriod:
        """New period with both endpoints moved by a calendar amount."""
        return TimePeriod(
            date_by_adding(self.start_date, **units),
            date_by_adding(self.end_date, **units),
        )


__all__ = [
    "PeriodInterval",
    "TimePeriod",
]
