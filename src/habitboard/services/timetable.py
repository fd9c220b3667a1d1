"""Timetable service: owner-scoped CRUD with no derived state."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..domain.repositories import TimetableRepository
from ..errors import NotFoundOrUnauthorized
from ..models.timetable import TimetableEntry

ENTRY_NOT_FOUND = "Entry not found"


def list_entries(repo: TimetableRepository, *, user_id: str) -> list[TimetableEntry]:
    return repo.list_all(user_id=user_id)


def create_entry(
    repo: TimetableRepository,
    *,
    user_id: str,
    day_of_week: str,
    title: str,
    description: str = "",
    time: Optional[str] = None,
) -> TimetableEntry:
    entry = TimetableEntry(
        user_id=user_id,
        day_of_week=day_of_week,
        title=title,
        description=description,
        time=time,
    )
    return repo.create(entry, user_id=user_id)


def update_entry(
    repo: TimetableRepository, entry_id: int, fields: Mapping[str, Any], *, user_id: str
) -> TimetableEntry:
    updated = repo.update_fields(entry_id, fields, user_id=user_id)
    if updated is None:
        raise NotFoundOrUnauthorized(ENTRY_NOT_FOUND)
    return updated


def delete_entry(repo: TimetableRepository, entry_id: int, *, user_id: str) -> None:
    if not repo.delete(entry_id, user_id=user_id):
        raise NotFoundOrUnauthorized(ENTRY_NOT_FOUND)


__all__ = ["ENTRY_NOT_FOUND", "create_entry", "delete_entry", "list_entries", "update_entry"]
