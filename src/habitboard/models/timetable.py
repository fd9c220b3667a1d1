"""Weekly timetable entries."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel


class TimetableEntry(SQLModel, table=True):
    """A titled slot on one day of the week."""

    __tablename__: ClassVar[str] = "timetable_entry"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(nullable=False, index=True, max_length=128)
    day_of_week: str = Field(nullable=False, max_length=16, index=True)
    title: str = Field(nullable=False, max_length=120)
    description: str = Field(default="", max_length=400)
    time: Optional[str] = Field(default=None, max_length=64)  # e.g. "10:00 AM - 11:00 AM"
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), nullable=False, index=True
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), nullable=False
    )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "userId": self.user_id,
            "dayOfWeek": self.day_of_week,
            "title": self.title,
            "description": self.description,
            "time": self.time,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }
