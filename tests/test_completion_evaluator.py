"""Tests for the streak/completion transition applied when a habit is marked done.

Covers:
- First completion
- Repeated completion on the same calendar day
- Continuation from yesterday and reset after a gap
- Last completion dated after "now"
- Daylight-saving boundaries
"""

from __future__ import annotations

from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from habitboard.services.completion import CompletionState, evaluate_completion

DAY_1 = datetime(2024, 5, 1, 8, 30)


class TestFirstCompletion:
    def test_never_completed_starts_streak(self):
        outcome = evaluate_completion(CompletionState(), DAY_1)

        assert outcome.counted is True
        assert outcome.state == CompletionState(streak=1, total_completions=1, last_done_date=DAY_1)

    def test_stale_streak_value_is_replaced(self):
        """A leftover streak with no completion date still restarts at 1."""
        outcome = evaluate_completion(CompletionState(streak=7, total_completions=4), DAY_1)

        assert outcome.state.streak == 1
        assert outcome.state.total_completions == 5


class TestSameDay:
    def test_second_call_same_day_is_not_counted(self):
        state = CompletionState(streak=3, total_completions=10, last_done_date=DAY_1)

        outcome = evaluate_completion(state, DAY_1.replace(hour=23, minute=59))

        assert outcome.counted is False
        assert outcome.state is state

    def test_just_after_midnight_is_a_new_day(self):
        state = CompletionState(streak=3, total_completions=10, last_done_date=DAY_1.replace(hour=23, minute=59))

        outcome = evaluate_completion(state, datetime(2024, 5, 2, 0, 0, 1))

        assert outcome.counted is True
        assert outcome.state.streak == 4


class TestGaps:
    def test_yesterday_continues_streak(self):
        state = CompletionState(streak=5, total_completions=9, last_done_date=DAY_1)
        today = DAY_1 + timedelta(days=1, hours=3)

        outcome = evaluate_completion(state, today)

        assert outcome.counted is True
        assert outcome.state == CompletionState(streak=6, total_completions=10, last_done_date=today)

    def test_time_of_day_is_ignored_for_continuation(self):
        """Late yesterday to early today is still one day, not under 24h."""
        state = CompletionState(streak=1, total_completions=1, last_done_date=datetime(2024, 5, 1, 23, 0))

        outcome = evaluate_completion(state, datetime(2024, 5, 2, 1, 0))

        assert outcome.state.streak == 2

    @pytest.mark.parametrize("days_ago", [2, 3, 30, 400])
    def test_gap_resets_streak(self, days_ago):
        state = CompletionState(streak=12, total_completions=40, last_done_date=DAY_1)
        today = DAY_1 + timedelta(days=days_ago)

        outcome = evaluate_completion(state, today)

        assert outcome.counted is True
        assert outcome.state == CompletionState(streak=1, total_completions=41, last_done_date=today)

    @pytest.mark.parametrize("days_ahead", [1, 5])
    def test_future_last_completion_is_left_alone(self, days_ahead):
        state = CompletionState(streak=4, total_completions=8, last_done_date=DAY_1 + timedelta(days=days_ahead))

        outcome = evaluate_completion(state, DAY_1)

        assert outcome.counted is False
        assert outcome.state == state


def test_day_by_day_scenario():
    """Day 1, day 1 again, day 2, skip day 3, day 4."""
    state = CompletionState()

    state = evaluate_completion(state, DAY_1).state
    assert (state.streak, state.total_completions) == (1, 1)

    state = evaluate_completion(state, DAY_1 + timedelta(hours=6)).state
    assert (state.streak, state.total_completions) == (1, 1)

    state = evaluate_completion(state, DAY_1 + timedelta(days=1)).state
    assert (state.streak, state.total_completions) == (2, 2)

    state = evaluate_completion(state, DAY_1 + timedelta(days=3)).state
    assert (state.streak, state.total_completions) == (1, 3)


def test_total_grows_at_most_once_per_distinct_day():
    """Many calls spread unevenly over days never over-count."""
    moments = [
        DAY_1 + timedelta(days=day, hours=hour)
        for day, hour in [(0, 0), (0, 5), (0, 9), (1, 1), (1, 2), (2, 7), (5, 3), (5, 4), (6, 0)]
    ]
    state = CompletionState()
    previous_total = 0
    for moment in moments:
        state = evaluate_completion(state, moment).state
        assert state.total_completions - previous_total in (0, 1)
        assert state.streak >= 1
        previous_total = state.total_completions

    distinct_days = {moment.date() for moment in moments}
    assert state.total_completions == len(distinct_days)
    assert state.streak == 2  # days 5 and 6


class TestDaylightSaving:
    """Calendar days of 23 or 25 hours still count as a single day."""

    zone = ZoneInfo("America/New_York")

    def test_spring_forward_day_continues_streak(self):
        # 2024-03-10 is 23 hours long in New York
        state = CompletionState(streak=2, total_completions=2, last_done_date=datetime(2024, 3, 10, 0, 30))

        outcome = evaluate_completion(state, datetime(2024, 3, 11, 0, 10), tz=self.zone)

        assert outcome.state.streak == 3

    def test_fall_back_day_continues_streak(self):
        # 2024-11-03 is 25 hours long in New York
        state = CompletionState(streak=2, total_completions=2, last_done_date=datetime(2024, 11, 3, 23, 50))

        outcome = evaluate_completion(state, datetime(2024, 11, 4, 0, 5), tz=self.zone)

        assert outcome.state.streak == 3

    def test_aware_now_is_read_in_server_zone(self):
        """03:00 UTC on Jan 2 is still Jan 1 in New York: same day, not counted."""
        state = CompletionState(streak=1, total_completions=1, last_done_date=datetime(2024, 1, 1, 9, 0))
        now = datetime(2024, 1, 2, 3, 0, tzinfo=ZoneInfo("UTC"))

        outcome = evaluate_completion(state, now, tz=self.zone)

        assert outcome.counted is False
