"""Concrete repository implementations using SQLModel."""

from .habit import SQLModelHabitRepository
from .timetable import SQLModelTimetableRepository

__all__ = [
    "SQLModelHabitRepository",
    "SQLModelTimetableRepository",
]
