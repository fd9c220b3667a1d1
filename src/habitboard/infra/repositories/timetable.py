"""SQLModel implementation of the timetable repository."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from sqlmodel import select

from ...models.timetable import TimetableEntry
from ..database import SessionFactory
from .base import storage_session


class SQLModelTimetableRepository:
    """SQLModel-based timetable repository implementation."""

    def __init__(self, session_factory: SessionFactory):
        self.session_factory = session_factory

    def _scoped(self, entry_id: int, user_id: str):
        return select(TimetableEntry).where(
            TimetableEntry.id == entry_id, TimetableEntry.user_id == user_id
        )

    def get_by_id(self, entry_id: int, *, user_id: str) -> Optional[TimetableEntry]:
        with storage_session(self.session_factory) as session:
            obj = session.exec(self._scoped(entry_id, user_id)).first()
            if obj:
                session.expunge(obj)
            return obj

    def list_all(self, *, user_id: str) -> list[TimetableEntry]:
        with storage_session(self.session_factory) as session:
            statement = (
                select(TimetableEntry)
                .where(TimetableEntry.user_id == user_id)
                .order_by(TimetableEntry.created_at.desc(), TimetableEntry.id.desc())  # type: ignore[union-attr]
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def create(self, entry: TimetableEntry, *, user_id: str) -> TimetableEntry:
        with storage_session(self.session_factory) as session:
            entry.user_id = user_id
            session.add(entry)
            session.commit()
            session.refresh(entry)
            session.expunge(entry)
            return entry

    def update_fields(
        self, entry_id: int, fields: Mapping[str, Any], *, user_id: str
    ) -> Optional[TimetableEntry]:
        with storage_session(self.session_factory) as session:
            entry = session.exec(self._scoped(entry_id, user_id)).first()
            if entry is None:
                return None
            for key, value in fields.items():
                setattr(entry, key, value)
            entry.updated_at = datetime.now(timezone.utc)
            session.add(entry)
            session.commit()
            session.refresh(entry)
            session.expunge(entry)
            return entry

    def delete(self, entry_id: int, *, user_id: str) -> bool:
        with storage_session(self.session_factory) as session:
            entry = session.exec(self._scoped(entry_id, user_id)).first()
            if entry is None:
                return False
            session.delete(entry)
            session.commit()
            return True
