"""Timetable repository protocol."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol

from ...models.timetable import TimetableEntry


class TimetableRepository(Protocol):
    """Owner-scoped persistence for timetable entries."""

    def get_by_id(self, entry_id: int, *, user_id: str) -> Optional[TimetableEntry]:
        ...

    def list_all(self, *, user_id: str) -> list[TimetableEntry]:
        ...

    def create(self, entry: TimetableEntry, *, user_id: str) -> TimetableEntry:
        ...

    def update_fields(
        self, entry_id: int, fields: Mapping[str, Any], *, user_id: str
    ) -> Optional[TimetableEntry]:
        ...

    def delete(self, entry_id: int, *, user_id: str) -> bool:
        ...
