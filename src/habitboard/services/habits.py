"""Habit service: owner-scoped CRUD plus the mark-done workflow."""

from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Any, Mapping, Optional

from ..domain.repositories import HabitRepository
from ..errors import NotFoundOrUnauthorized, StorageFailure
from ..logging_config import get_logger
from ..models.habit import Habit
from . import dates
from .completion import CompletionState, evaluate_completion

logger = get_logger(__name__)

HABIT_NOT_FOUND = "Habit not found"
MAX_COMPLETION_ATTEMPTS = 3


def list_habits(repo: HabitRepository, *, user_id: str) -> list[Habit]:
    return repo.list_all(user_id=user_id)


def create_habit(
    repo: HabitRepository,
    *,
    user_id: str,
    name: str,
    description: str = "",
    frequency: str = "daily",
) -> Habit:
    """Persist a new habit with an empty completion history."""

    habit = Habit(
        user_id=user_id,
        name=name,
        description=description,
        frequency=frequency,
        streak=0,
        total_completions=0,
        last_done_date=None,
    )
    created = repo.create(habit, user_id=user_id)
    logger.info("Habit created", extra={"habit_id": created.id, "user_id": user_id})
    return created


def update_habit(
    repo: HabitRepository,
    habit_id: int,
    fields: Mapping[str, Any],
    *,
    user_id: str,
    tz: Optional[tzinfo] = None,
) -> Habit:
    """Overwrite the given fields. Streak fields are taken as-is, not re-evaluated."""

    values = dict(fields)
    if values.get("last_done_date") is not None:
        values["last_done_date"] = dates.to_wall_time(values["last_done_date"], tz)

    updated = repo.update_fields(habit_id, values, user_id=user_id)
    if updated is None:
        raise NotFoundOrUnauthorized(HABIT_NOT_FOUND)
    return updated


def mark_done(
    repo: HabitRepository,
    habit_id: int,
    *,
    user_id: str,
    now: Optional[datetime] = None,
    tz: Optional[tzinfo] = None,
) -> Habit:
    """Record a completion for today and return the stored habit.

    The record is always written back, even when today's completion was
    already counted. The write is conditional on ``last_done_date`` being
    unchanged since the read; on a conflict the habit is re-read and
    re-evaluated.
    """

    moment = dates.to_wall_time(now, tz) if now is not None else dates.now(tz)

    for attempt in range(1, MAX_COMPLETION_ATTEMPTS + 1):
        habit = repo.get_by_id(habit_id, user_id=user_id)
        if habit is None:
            raise NotFoundOrUnauthorized(HABIT_NOT_FOUND)

        previous = CompletionState(
            streak=habit.streak,
            total_completions=habit.total_completions,
            last_done_date=habit.last_done_date,
        )
        outcome = evaluate_completion(previous, moment, tz=tz)
        saved = repo.save_completion(
            habit_id,
            outcome.state,
            user_id=user_id,
            expected_last_done=previous.last_done_date,
        )
        if saved is not None:
            logger.info(
                "Habit marked done",
                extra={
                    "habit_id": habit_id,
                    "user_id": user_id,
                    "counted": outcome.counted,
                    "streak": saved.streak,
                    "total_completions": saved.total_completions,
                },
            )
            return saved

        logger.warning(
            "Completion write conflicted, retrying",
            extra={"habit_id": habit_id, "attempt": attempt},
        )

    raise StorageFailure(
        f"Habit {habit_id} kept changing during mark-done after {MAX_COMPLETION_ATTEMPTS} attempts"
    )


def delete_habit(repo: HabitRepository, habit_id: int, *, user_id: str) -> None:
    if not repo.delete(habit_id, user_id=user_id):
        raise NotFoundOrUnauthorized(HABIT_NOT_FOUND)
    logger.info("Habit deleted", extra={"habit_id": habit_id, "user_id": user_id})


__all__ = [
    "HABIT_NOT_FOUND",
    "MAX_COMPLETION_ATTEMPTS",
    "create_habit",
    "delete_habit",
    "list_habits",
    "mark_done",
    "update_habit",
]
