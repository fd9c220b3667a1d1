"""Habit form definitions."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_FREQUENCY = "daily"
# SQLite INTEGER is a signed 64-bit value
MAX_COUNTER = 2**63 - 1


class HabitForm(BaseModel):
    """Payload for creating a habit."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=100, description="Short label for the habit")
    description: str = Field(default="", max_length=400, description="Optional details about the habit")
    frequency: str = Field(default=DEFAULT_FREQUENCY, max_length=32, description="Habit frequency tag")

    @field_validator("description", mode="before")
    @classmethod
    def default_description(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("frequency", mode="before")
    @classmethod
    def default_frequency(cls, value: Any) -> Any:
        """Blank frequencies fall back to daily."""

        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_FREQUENCY
        return value


class HabitUpdateForm(BaseModel):
    """Payload for a partial habit update; unknown keys are ignored."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True, extra="ignore")

    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=400)
    frequency: Optional[str] = Field(default=None, max_length=32)
    streak: Optional[int] = Field(default=None, ge=0, le=MAX_COUNTER)
    total_completions: Optional[int] = Field(default=None, ge=0, le=MAX_COUNTER, alias="totalCompletions")
    last_done_date: Optional[datetime] = Field(default=None, alias="lastDoneDate")

    @model_validator(mode="after")
    def reject_null_required(self) -> "HabitUpdateForm":
        for field in ("name", "streak", "total_completions"):
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self

    def changes(self) -> dict[str, Any]:
        """Return only the supplied fields, keyed by model attribute."""

        data = self.model_dump(exclude_unset=True)
        if "description" in data and data["description"] is None:
            data["description"] = ""
        if "frequency" in data and not data["frequency"]:
            data["frequency"] = DEFAULT_FREQUENCY
        return data


__all__ = ["DEFAULT_FREQUENCY", "HabitForm", "HabitUpdateForm"]
