"""SQLModel implementation of Habit repository."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from sqlalchemy import update
from sqlmodel import select

from ...models.habit import Habit
from ...services.completion import CompletionState
from ..database import SessionFactory
from .base import storage_session


class SQLModelHabitRepository:
    """SQLModel-based habit repository implementation."""

    def __init__(self, session_factory: SessionFactory):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def get_by_id(self, habit_id: int, *, user_id: str) -> Optional[Habit]:
        """Retrieve a habit by ID."""
        with storage_session(self.session_factory) as session:
            obj = session.exec(
                select(Habit).where(Habit.id == habit_id, Habit.user_id == user_id)
            ).first()
            if obj:
                session.expunge(obj)
            return obj

    def list_all(self, *, user_id: str) -> list[Habit]:
        """List the owner's habits, newest first."""
        with storage_session(self.session_factory) as session:
            statement = (
                select(Habit)
                .where(Habit.user_id == user_id)
                .order_by(Habit.created_at.desc(), Habit.id.desc())  # type: ignore[union-attr]
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def create(self, habit: Habit, *, user_id: str) -> Habit:
        """Create a new habit."""
        with storage_session(self.session_factory) as session:
            habit.user_id = user_id
            session.add(habit)
            session.commit()
            session.refresh(habit)
            session.expunge(habit)
            return habit

    def update_fields(
        self, habit_id: int, fields: Mapping[str, Any], *, user_id: str
    ) -> Optional[Habit]:
        """Merge ``fields`` into the stored habit."""
        with storage_session(self.session_factory) as session:
            habit = session.exec(
                select(Habit).where(Habit.id == habit_id, Habit.user_id == user_id)
            ).first()
            if habit is None:
                return None
            for key, value in fields.items():
                setattr(habit, key, value)
            habit.updated_at = datetime.now(timezone.utc)
            session.add(habit)
            session.commit()
            session.refresh(habit)
            session.expunge(habit)
            return habit

    def save_completion(
        self,
        habit_id: int,
        state: CompletionState,
        *,
        user_id: str,
        expected_last_done: Optional[datetime],
    ) -> Optional[Habit]:
        """Conditionally write the completion fields in a single UPDATE."""
        table = Habit.__table__  # type: ignore[attr-defined]
        if expected_last_done is None:
            unchanged = table.c.last_done_date.is_(None)
        else:
            unchanged = table.c.last_done_date == expected_last_done

        statement = (
            update(table)
            .where(table.c.id == habit_id, table.c.user_id == user_id, unchanged)
            .values(
                streak=state.streak,
                total_completions=state.total_completions,
                last_done_date=state.last_done_date,
                updated_at=datetime.now(timezone.utc),
            )
        )
        with storage_session(self.session_factory) as session:
            result = session.connection().execute(statement)
            if result.rowcount == 0:
                session.rollback()
                return None
            session.commit()
            habit = session.exec(
                select(Habit).where(Habit.id == habit_id, Habit.user_id == user_id)
            ).first()
            if habit:
                session.expunge(habit)
            return habit

    def delete(self, habit_id: int, *, user_id: str) -> bool:
        """Delete a habit by ID."""
        with storage_session(self.session_factory) as session:
            habit = session.exec(
                select(Habit).where(Habit.id == habit_id, Habit.user_id == user_id)
            ).first()
            if habit is None:
                return False
            session.delete(habit)
            session.commit()
            return True
