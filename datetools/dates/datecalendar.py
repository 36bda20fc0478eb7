"""Calendar Context
----------------

A small calendar context carried by period collections and used by the
date helpers. It pins down the time zone that component-based dates are
built in and that "now" is measured in.

Time zones come from dateutil.tz (tzlocal for the process-local zone).
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, tzinfo

try:
    from dateutil import tz as dateutil_tz
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e


@dataclass(frozen=True)
class Calendar:
    """
    Calendar context for date-component calculations.

    Attributes:
        tz: Time zone new dates are created in (default: process-local zone)

    Examples:
        >>> cal = Calendar.utc()
        >>> cal.now().tzinfo is not None
        True
    """

    tz: tzinfo = field(default_factory=dateutil_tz.tzlocal)

    @classmethod
    def current(cls) -> Calendar:
        """Return the process-local calendar."""
        return cls(tz=dateutil_tz.tzlocal())

    @classmethod
    def utc(cls) -> Calendar:
        return cls(tz=dateutil_tz.UTC)

    def now(self) -> datetime:
        """Current time in this calendar's zone."""
        return datetime.now(self.tz)

    def localize(self, dt: datetime) -> datetime:
        """
        Attach this calendar's zone to a naive datetime.

        Aware datetimes are converted into the calendar's zone instead.
        """
        if dt.tzinfo is None:
            return dt.replace(tzinfo=self.tz)
        return dt.astimezone(self.tz)


__all__ = [
    "Calendar",
]
