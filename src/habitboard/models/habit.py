"""Habit tracking data structures."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Habit(SQLModel, table=True):
    """A user-owned habit with its streak bookkeeping."""

    __tablename__: ClassVar[str] = "habit"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(nullable=False, index=True, max_length=128)
    name: str = Field(nullable=False, max_length=100)
    description: str = Field(default="", max_length=400)
    frequency: str = Field(default="daily", max_length=32)
    streak: int = Field(default=0, nullable=False)
    total_completions: int = Field(default=0, nullable=False)
    # Naive wall-clock time in the server zone; only its calendar day is compared.
    last_done_date: Optional[datetime] = Field(default=None)
    created_at: datetime = Field(default_factory=_utcnow, nullable=False, index=True)
    updated_at: datetime = Field(default_factory=_utcnow, nullable=False)

    def to_dict(self) -> dict:
        """Serialize using the camelCase keys of the public API."""

        return {
            "id": self.id,
            "userId": self.user_id,
            "name": self.name,
            "description": self.description,
            "frequency": self.frequency,
            "streak": self.streak,
            "totalCompletions": self.total_completions,
            "lastDoneDate": self.last_done_date.isoformat() if self.last_done_date else None,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }
