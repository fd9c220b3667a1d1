"""Tests for calendar-day helpers."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from habitboard.services import dates

NEW_YORK = ZoneInfo("America/New_York")


def test_calendar_day_of_naive_value_is_its_date():
    assert dates.calendar_day(datetime(2024, 2, 29, 23, 59)) == date(2024, 2, 29)


def test_calendar_day_converts_aware_values_into_zone():
    instant = datetime(2024, 7, 1, 2, 0, tzinfo=timezone.utc)

    assert dates.calendar_day(instant, NEW_YORK) == date(2024, 6, 30)


def test_to_wall_time_drops_zone_after_conversion():
    instant = datetime(2024, 7, 1, 12, 0, tzinfo=timezone.utc)

    assert dates.to_wall_time(instant, NEW_YORK) == datetime(2024, 7, 1, 8, 0)
    assert dates.to_wall_time(datetime(2024, 7, 1, 12, 0), NEW_YORK) == datetime(2024, 7, 1, 12, 0)


def test_local_midnight_carries_offset_of_that_day():
    winter = dates.local_midnight(datetime(2024, 1, 15, 18, 0), NEW_YORK)
    summer = dates.local_midnight(datetime(2024, 7, 15, 18, 0), NEW_YORK)

    assert winter.utcoffset() == timedelta(hours=-5)
    assert summer.utcoffset() == timedelta(hours=-4)
    assert (winter.hour, winter.minute) == (0, 0)


def test_day_gap_counts_calendar_days_not_hours():
    assert dates.day_gap(datetime(2024, 5, 1, 23, 0), datetime(2024, 5, 2, 0, 30)) == 1
    assert dates.day_gap(datetime(2024, 5, 1, 0, 0), datetime(2024, 5, 1, 23, 59)) == 0
    assert dates.day_gap(datetime(2024, 5, 3), datetime(2024, 5, 1)) == -2


def test_day_gap_rounds_across_dst_changes():
    assert dates.day_gap(datetime(2024, 3, 9, 12), datetime(2024, 3, 11, 12), NEW_YORK) == 2
    assert dates.day_gap(datetime(2024, 11, 2, 12), datetime(2024, 11, 4, 12), NEW_YORK) == 2


def test_now_is_naive_wall_time():
    assert dates.now().tzinfo is None
    assert dates.now(NEW_YORK).tzinfo is None
