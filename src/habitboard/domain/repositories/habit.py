"""Habit repository protocol."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Optional, Protocol

from ...models.habit import Habit
from ...services.completion import CompletionState


class HabitRepository(Protocol):
    """Owner-scoped persistence for habits.

    Every method takes the caller's ``user_id``; a habit owned by someone
    else behaves exactly like a missing one.
    """

    def get_by_id(self, habit_id: int, *, user_id: str) -> Optional[Habit]:
        """Retrieve a habit by ID."""
        ...

    def list_all(self, *, user_id: str) -> list[Habit]:
        """List the owner's habits, newest first."""
        ...

    def create(self, habit: Habit, *, user_id: str) -> Habit:
        """Create a new habit."""
        ...

    def update_fields(
        self, habit_id: int, fields: Mapping[str, Any], *, user_id: str
    ) -> Optional[Habit]:
        """Merge ``fields`` into the stored habit and return it."""
        ...

    def save_completion(
        self,
        habit_id: int,
        state: CompletionState,
        *,
        user_id: str,
        expected_last_done: Optional[datetime],
    ) -> Optional[Habit]:
        """Write ``state`` only if ``last_done_date`` still equals ``expected_last_done``.

        Returns None when nothing was written (concurrent change or missing row).
        """
        ...

    def delete(self, habit_id: int, *, user_id: str) -> bool:
        """Delete a habit by ID; False when nothing matched."""
        ...
