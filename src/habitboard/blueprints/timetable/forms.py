"""Timetable form definitions."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class DayOfWeek(str, Enum):
    """Days a timetable entry can be placed on."""

    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"


def _normalize_day(value: Any) -> Any:
    if isinstance(value, str) and value.strip():
        return value.strip().capitalize()
    return value


class TimetableForm(BaseModel):
    """Payload for creating a timetable entry."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    day_of_week: DayOfWeek = Field(alias="dayOfWeek")
    title: str = Field(min_length=1, max_length=120)
    description: str = Field(default="", max_length=400)
    time: Optional[str] = Field(default=None, max_length=64)

    normalize_day = field_validator("day_of_week", mode="before")(_normalize_day)

    @field_validator("description", mode="before")
    @classmethod
    def default_description(cls, value: Any) -> Any:
        return "" if value is None else value


class TimetableUpdateForm(BaseModel):
    """Partial update for a timetable entry; unknown keys are ignored."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True, extra="ignore")

    day_of_week: Optional[DayOfWeek] = Field(default=None, alias="dayOfWeek")
    title: Optional[str] = Field(default=None, min_length=1, max_length=120)
    description: Optional[str] = Field(default=None, max_length=400)
    time: Optional[str] = Field(default=None, max_length=64)

    normalize_day = field_validator("day_of_week", mode="before")(_normalize_day)

    @model_validator(mode="after")
    def reject_null_required(self) -> "TimetableUpdateForm":
        for field in ("day_of_week", "title"):
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self

    def changes(self) -> dict[str, Any]:
        data = self.model_dump(exclude_unset=True)
        if data.get("day_of_week") is not None:
            data["day_of_week"] = DayOfWeek(data["day_of_week"]).value
        if "description" in data and data["description"] is None:
            data["description"] = ""
        return data


__all__ = ["DayOfWeek", "TimetableForm", "TimetableUpdateForm"]
