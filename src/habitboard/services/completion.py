"""Streak and completion bookkeeping for a habit marked done."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, tzinfo
from typing import Optional

from .dates import day_gap


@dataclass(frozen=True)
class CompletionState:
    """Derived fields of a habit that only the evaluator changes."""

    streak: int = 0
    total_completions: int = 0
    last_done_date: Optional[datetime] = None


@dataclass(frozen=True)
class CompletionOutcome:
    state: CompletionState
    counted: bool


def evaluate_completion(
    state: CompletionState, now: datetime, *, tz: Optional[tzinfo] = None
) -> CompletionOutcome:
    """Return the state after marking a habit done at ``now``.

    Only calendar days matter. A habit already done today, or whose last
    completion lies on a later day than ``now``, is left untouched and the
    call is not counted. Otherwise the completion is counted and the streak
    either starts at 1, continues from yesterday, or restarts after a gap.
    """

    if state.last_done_date is None:
        streak = 1
    else:
        gap = day_gap(state.last_done_date, now, tz)
        if gap <= 0:
            return CompletionOutcome(state=state, counted=False)
        streak = state.streak + 1 if gap == 1 else 1

    next_state = replace(
        state,
        streak=streak,
        total_completions=state.total_completions + 1,
        last_done_date=now,
    )
    return CompletionOutcome(state=next_state, counted=True)


__all__ = ["CompletionOutcome", "CompletionState", "evaluate_completion"]
