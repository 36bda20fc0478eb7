"""Time Period Collection
----------------------

An ordered, mutable bag of TimePeriod values with derived bounds,
in-place stable sorts, and relation queries that return new collections.

Key Behaviors:
  1. start_date / end_date are the min start and max end of the contained
     periods, None when empty, recomputed after every mutation
  2. Duplicates are allowed; insertion order is kept until a sort
  3. Invalid indices make insert/remove a no-op (False / None), never raise
  4. Queries never touch the receiver; each result owns its own storage
  5. == compares as multisets (order ignored); equals() can consider order
"""

from __future__ import annotations
import logging
from datetime import datetime
from enum import Enum
from typing import Iterable, Iterator, Optional

from datetools.dates.datecalendar import Calendar
from datetools.period.timeperiod import PeriodInterval, TimePeriod

logger = logging.getLogger(__name__)


class PeriodRelation(Enum):
    """Two-argument relations a collection can be filtered by."""

    INSIDE = "inside"
    INTERSECTS = "intersects"
    OVERLAPS = "overlaps"

    def holds(self, elem: TimePeriod, reference: TimePeriod) -> bool:
        """Evaluate the relation with `elem` as receiver."""
        if self is PeriodRelation.INSIDE:
            return elem.is_inside(reference)
        if self is PeriodRelation.INTERSECTS:
            return elem.intersects(reference)
        return elem.overlaps_with(reference)


class TimePeriodCollection:
    """
    Ordered collection of TimePeriod objects.

    Bounds (start_date, end_date) are derived and read-only. The calendar
    context is carried into every collection a query produces.

    Not thread-safe: concurrent mutation of one instance from several
    threads needs external synchronization. Distinct instances share no
    mutable state.

    Examples:
        >>> from datetime import datetime
        >>> coll = TimePeriodCollection()
        >>> coll.add(TimePeriod(datetime(2025, 1, 1, 10), datetime(2025, 1, 1, 12)))
        >>> coll.add(TimePeriod(datetime(2025, 1, 1, 13), datetime(2025, 1, 1, 14)))
        >>> coll.start_date, coll.end_date
        (datetime.datetime(2025, 1, 1, 10, 0), datetime.datetime(2025, 1, 1, 14, 0))
        >>> len(coll.periods_intersected_by_date(datetime(2025, 1, 1, 11)))
        1
    """

    __hash__ = None

    def __init__(self, calendar: Optional[Calendar] = None):
        self._calendar = calendar if calendar is not None else Calendar.current()
        self._periods: list[TimePeriod] = []
        self._start_date: Optional[datetime] = None
        self._end_date: Optional[datetime] = None

    @classmethod
    def from_periods(
        cls,
        periods: Iterable[TimePeriod],
        calendar: Optional[Calendar] = None,
    ) -> TimePeriodCollection:
        collection = cls(calendar=calendar)
        for period in periods:
            collection.add(period)
        return collection

    # ---- Read-only state ----

    @property
    def calendar(self) -> Calendar:
        return self._calendar

    @property
    def periods(self) -> tuple[TimePeriod, ...]:
        """Snapshot of the contained periods in current order."""
        return tuple(self._periods)

    @property
    def start_date(self) -> Optional[datetime]:
        """Earliest start among the periods, None if empty."""
        return self._start_date

    @property
    def end_date(self) -> Optional[datetime]:
        """Latest end among the periods, None if empty."""
        return self._end_date

    def __len__(self) -> int:
        return len(self._periods)

    def __iter__(self) -> Iterator[TimePeriod]:
        return iter(tuple(self._periods))

    def __getitem__(self, index: int) -> TimePeriod:
        return self._periods[index]

    def __repr__(self) -> str:
        return (
            f"TimePeriodCollection(count={len(self._periods)}, "
            f"start_date={self._start_date!r}, end_date={self._end_date!r})"
        )

    # ---- Mutation ----

    def add(self, period: TimePeriod) -> None:
        """Append a period to the end of the collection."""
        _check_period(period)
        self._periods.append(period)
        self._update_bounds()

    def insert(self, period: TimePeriod, index: int) -> bool:
        """
        Insert a period at `index`, shifting later periods right.

        Args:
            period: Period to insert
            index: Position in [0, len(self)]

        Returns:
            True if inserted, False if the index was out of range
            (collection left unchanged)
        """
        _check_period(period)
        if not 0 <= index <= len(self._periods):
            logger.debug(f"insert ignored: index {index} outside [0, {len(self._periods)}]")
            return False

        self._periods.insert(index, period)
        self._update_bounds()
        return True

    def remove(self, index: int) -> Optional[TimePeriod]:
        """
        Remove and return the period at `index`.

        Negative indices are not interpreted from the end; they are
        out of range like any index outside [0, len(self)).

        Returns:
            The removed period, or None if the index was out of range
            (collection left unchanged)
        """
        if not 0 <= index < len(self._periods):
            logger.debug(f"remove ignored: index {index} outside [0, {len(self._periods)})")
            return None

        period = self._periods.pop(index)
        self._update_bounds()
        return period

    # ---- Sorting (in place, stable) ----

    def _sort(self, key, descending: bool) -> None:
        # list.sort stays stable with reverse=True
        self._periods.sort(key=key, reverse=descending)
        self._update_bounds()

    def sort_by_start_ascending(self) -> None:
        self._sort(lambda p: p.start_date, descending=False)

    def sort_by_start_descending(self) -> None:
        self._sort(lambda p: p.start_date, descending=True)

    def sort_by_end_ascending(self) -> None:
        self._sort(lambda p: p.end_date, descending=False)

    def sort_by_end_descending(self) -> None:
        self._sort(lambda p: p.end_date, descending=True)

    def sort_by_duration_ascending(self) -> None:
        self._sort(lambda p: p.duration_in_seconds, descending=False)

    def sort_by_duration_descending(self) -> None:
        self._sort(lambda p: p.duration_in_seconds, descending=True)

    # ---- Queries ----

    def periods_with_relation(self, period: TimePeriod, relation: PeriodRelation) -> TimePeriodCollection:
        """
        New collection of the periods for which `relation` holds against
        `period`, in their current relative order.
        """
        collection = TimePeriodCollection(calendar=self._calendar)
        for elem in self._periods:
            if relation.holds(elem, period):
                collection.add(elem)
        return collection

    def periods_inside(self, period: TimePeriod) -> TimePeriodCollection:
        """Periods lying within `period`."""
        return self.periods_with_relation(period, PeriodRelation.INSIDE)

    def periods_intersected_by_date(self, instant: datetime) -> TimePeriodCollection:
        """Periods containing `instant`, endpoints included."""
        collection = TimePeriodCollection(calendar=self._calendar)
        for elem in self._periods:
            if elem.contains(instant, PeriodInterval.CLOSED):
                collection.add(elem)
        return collection

    def periods_intersected_by_period(self, period: TimePeriod) -> TimePeriodCollection:
        """Periods sharing at least one instant with `period`."""
        return self.periods_with_relation(period, PeriodRelation.INTERSECTS)

    def periods_overlapped_by_period(self, period: TimePeriod) -> TimePeriodCollection:
        """
        Periods sharing more than a single instant with `period`.

        A period that only touches `period` at an endpoint is excluded.
        """
        return self.periods_with_relation(period, PeriodRelation.OVERLAPS)

    def copy(self) -> TimePeriodCollection:
        return TimePeriodCollection.from_periods(self._periods, calendar=self._calendar)

    # ---- Equality ----

    def equals(self, other: TimePeriodCollection, consider_order: bool = False) -> bool:
        """
        Compare two collections.

        Collections with a different size or different bounds are unequal
        without comparing elements. Otherwise:
          - consider_order=True: periods must match index by index
          - consider_order=False: every period here must have an equal
            period somewhere in `other`

        Args:
            other: Collection to compare to
            consider_order: Whether positions must match

        Returns:
            True when the collections are equal
        """
        if not self._has_same_characteristics_as(other):
            return False

        if consider_order:
            return self._is_equal_considering_order(other)
        return self._is_equal_not_considering_order(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimePeriodCollection):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, TimePeriodCollection):
            return NotImplemented
        return not self.equals(other)

    def _has_same_characteristics_as(self, other: TimePeriodCollection) -> bool:
        return (
            len(self._periods) == len(other._periods)
            and self._start_date == other._start_date
            and self._end_date == other._end_date
        )

    def _is_equal_considering_order(self, other: TimePeriodCollection) -> bool:
        for idx, period in enumerate(self._periods):
            if other._periods[idx] != period:
                return False
        return True

    def _is_equal_not_considering_order(self, other: TimePeriodCollection) -> bool:
        for period in self._periods:
            if not any(elem == period for elem in other._periods):
                return False
        return True

    # ---- Bounds ----

    def _update_bounds(self) -> None:
        """Recompute start_date / end_date from scratch."""
        start_date: Optional[datetime] = None
        end_date: Optional[datetime] = None

        for period in self._periods:
            if start_date is None or period.start_date < start_date:
                start_date = period.start_date
            if end_date is None or period.end_date > end_date:
                end_date = period.end_date

        self._start_date = start_date
        self._end_date = end_date


def _check_period(period: object) -> None:
    if not isinstance(period, TimePeriod):
        raise TypeError(f"Expected TimePeriod, got {type(period).__name__}")


__all__ = [
    "PeriodRelation",
    "TimePeriodCollection",
]
