"""Calendar-day helpers shared by the completion evaluator and services.

Stored instants are naive wall-clock values in the server zone. ``tz=None``
means the zone of the running process; any ``tzinfo`` (usually a
``ZoneInfo``) pins the calculation to that zone instead.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, tzinfo
from typing import Optional

ONE_DAY = timedelta(days=1)


def to_wall_time(instant: datetime, tz: Optional[tzinfo] = None) -> datetime:
    """Return ``instant`` as a naive wall-clock datetime in the server zone."""

    if instant.tzinfo is None:
        return instant
    return instant.astimezone(tz).replace(tzinfo=None)


def calendar_day(instant: datetime, tz: Optional[tzinfo] = None) -> date:
    """Return the calendar day that owns ``instant``."""

    return to_wall_time(instant, tz).date()


def local_midnight(instant: datetime, tz: Optional[tzinfo] = None) -> datetime:
    """Return the aware midnight that starts the calendar day of ``instant``."""

    midnight = datetime.combine(calendar_day(instant, tz), time.min)
    if tz is None:
        # astimezone() on a naive value attaches the local offset in force then
        return midnight.astimezone()
    return midnight.replace(tzinfo=tz)


def day_gap(earlier: datetime, later: datetime, tz: Optional[tzinfo] = None) -> int:
    """Whole calendar days from ``earlier`` to ``later`` (negative if reversed).

    The midnight difference is rounded rather than truncated: across a DST
    change a calendar day lasts 23 or 25 hours and must still count as one.
    """

    delta = local_midnight(later, tz) - local_midnight(earlier, tz)
    return round(delta / ONE_DAY)


def now(tz: Optional[tzinfo] = None) -> datetime:
    """Current wall-clock instant, naive, in the server zone."""

    if tz is None:
        return datetime.now()
    return datetime.now(tz).replace(tzinfo=None)


__all__ = ["ONE_DAY", "calendar_day", "day_gap", "local_midnight", "now", "to_wall_time"]
