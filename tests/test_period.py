"""Tests for TimePeriod.

These tests verify the interval type the collection queries are built on:
- Construction and validation (start <= end)
- Durations and moments
- Relations: is_inside, intersects, overlaps_with, contains
- Degenerate (zero-length) periods touching other periods
- Gaps and shifting

Run with: pytest tests/test_period.py -v
"""

import pytest
from datetime import datetime, timedelta, timezone

from datetools.period import PeriodInterval, TimePeriod


def at(hour: int, minute: int = 0, day: int = 1) -> datetime:
    return datetime(2025, 1, day, hour, minute)


# ============================================================================
# Construction
# ============================================================================

class TestTimePeriodConstruction:
    """Test construction and validation"""

    def test_basic(self):
        """Test bounds are stored as given"""
        p = TimePeriod(at(10), at(12))
        assert p.start_date == at(10)
        assert p.end_date == at(12)

    def test_start_after_end_raises(self):
        """Test start_date > end_date is rejected"""
        with pytest.raises(ValueError, match="start_date <= end_date"):
            TimePeriod(at(12), at(10))

    def test_moment_allowed(self):
        """Test start_date == end_date is a valid zero-length period"""
        p = TimePeriod(at(10), at(10))
        assert p.is_moment
        assert p.duration_in_seconds == 0

    def test_non_datetime_raises(self):
        """Test non-datetime bounds are rejected"""
        with pytest.raises(TypeError):
            TimePeriod("2025-01-01", at(10))

    def test_immutable(self, period_a):
        """Test periods cannot be modified"""
        with pytest.raises(AttributeError):
            period_a.start_date = at(8)

    def test_starting_at_months(self):
        """Test calendar-length constructor clamps to month end"""
        p = TimePeriod.starting_at(datetime(2025, 1, 31), months=1)
        assert p.end_date == datetime(2025, 2, 28)

    def test_ending_at_hours(self):
        """Test mirror constructor"""
        p = TimePeriod.ending_at(at(12), hours=2)
        assert p == TimePeriod(at(10), at(12))

    def test_aware_datetimes(self):
        """Test aware datetimes work the same way"""
        start = datetime(2025, 1, 1, 10, tzinfo=timezone.utc)
        p = TimePeriod(start, start + timedelta(hours=1))
        assert p.duration_in_minutes == 60


# ============================================================================
# Durations and Equality
# ============================================================================

class TestTimePeriodDurations:
    """Test derived durations"""

    def test_durations(self, period_b):
        """Test B = [09:00, 13:00] is four hours long"""
        assert period_b.duration == timedelta(hours=4)
        assert period_b.duration_in_seconds == 4 * 3600
        assert period_b.duration_in_minutes == 240
        assert period_b.duration_in_hours == 4

    def test_days_and_weeks(self):
        p = TimePeriod(datetime(2025, 1, 1), datetime(2025, 1, 15))
        assert p.duration_in_days == 14
        assert p.duration_in_weeks == 2


class TestTimePeriodEquality:
    """Test component-wise equality"""

    def test_equal_by_value(self):
        assert TimePeriod(at(10), at(12)) == TimePeriod(at(10), at(12))

    def test_not_equal_different_end(self):
        assert TimePeriod(at(10), at(12)) != TimePeriod(at(10), at(13))

    def test_hashable(self, period_a):
        """Test equal periods hash alike"""
        assert len({period_a, TimePeriod(at(10), at(12))}) == 1


# ============================================================================
# Relations
# ============================================================================

class TestTimePeriodRelations:
    """Test relation predicates with A=[10,12], B=[9,13], C=[12,14], D=[13,14]"""

    def test_a_inside_b(self, period_a, period_b):
        assert period_a.is_inside(period_b)
        assert not period_b.is_inside(period_a)

    def test_inside_self(self, period_a):
        """Test shared endpoints still count as inside"""
        assert period_a.is_inside(period_a)

    def test_contains_period(self, period_a, period_b):
        assert period_b.contains_period(period_a)
        assert not period_a.contains_period(period_b)

    def test_a_intersects_c_touching(self, period_a, period_c):
        """Test periods touching at 12:00 intersect"""
        assert period_a.intersects(period_c)
        assert period_c.intersects(period_a)

    def test_a_does_not_intersect_d(self, period_a, period_d):
        assert not period_a.intersects(period_d)

    def test_a_does_not_overlap_c(self, period_a, period_c):
        """Test touching at a single instant is not an overlap"""
        assert not period_a.overlaps_with(period_c)
        assert not period_c.overlaps_with(period_a)

    def test_a_overlaps_b(self, period_a, period_b):
        assert period_a.overlaps_with(period_b)
        assert period_b.overlaps_with(period_a)

    def test_partial_overlap(self):
        p = TimePeriod(at(10), at(12))
        q = TimePeriod(at(11), at(14))
        assert p.overlaps_with(q)
        assert q.overlaps_with(p)

    def test_overlaps_self(self, period_a):
        assert period_a.overlaps_with(period_a)


class TestTimePeriodMoments:
    """Test zero-length periods against other periods"""

    def test_moment_strictly_inside_overlaps(self, period_a):
        m = TimePeriod(at(11), at(11))
        assert m.overlaps_with(period_a)
        assert period_a.overlaps_with(m)

    def test_moment_on_start_does_not_overlap(self, period_a):
        m = TimePeriod(at(10), at(10))
        assert not m.overlaps_with(period_a)
        assert not period_a.overlaps_with(m)
        assert m.intersects(period_a)

    def test_moment_on_end_does_not_overlap(self, period_a):
        m = TimePeriod(at(12), at(12))
        assert not m.overlaps_with(period_a)
        assert not period_a.overlaps_with(m)
        assert m.intersects(period_a)

    def test_identical_moments(self):
        """Test identical moments intersect but do not overlap"""
        m = TimePeriod(at(10), at(10))
        assert m.intersects(m)
        assert not m.overlaps_with(m)
        assert m.is_inside(m)


class TestTimePeriodContains:
    """Test instant containment under OPEN and CLOSED bounds"""

    def test_closed_includes_endpoints(self, period_a):
        assert period_a.contains(at(10))
        assert period_a.contains(at(12))
        assert period_a.contains(at(11), PeriodInterval.CLOSED)

    def test_open_excludes_endpoints(self, period_a):
        assert not period_a.contains(at(10), PeriodInterval.OPEN)
        assert not period_a.contains(at(12), PeriodInterval.OPEN)
        assert period_a.contains(at(11), PeriodInterval.OPEN)

    def test_outside(self, period_a):
        assert not period_a.contains(at(9))
        assert not period_a.contains(at(13))

    def test_unknown_interval_raises(self, period_a):
        with pytest.raises(ValueError):
            period_a.contains(at(11), "closed")


# ============================================================================
# Gaps and Shifting
# ============================================================================

class TestTimePeriodGaps:
    """Test gap helpers"""

    def test_gap_between_disjoint(self, period_a, period_d):
        assert period_a.has_gap_between(period_d)
        assert period_a.gap_between(period_d) == timedelta(hours=1)
        assert period_d.gap_between(period_a) == timedelta(hours=1)

    def test_no_gap_when_touching(self, period_a, period_c):
        assert not period_a.has_gap_between(period_c)
        assert period_a.gap_between(period_c) == timedelta(0)

    def test_shifted(self, period_a):
        shifted = period_a.shifted(days=1)
        assert shifted == TimePeriod(at(10, day=2), at(12, day=2))
        assert period_a == TimePeriod(at(10), at(12))
