"""Repository protocol definitions for domain layer."""

from .habit import HabitRepository
from .timetable import TimetableRepository

__all__ = [
    "HabitRepository",
    "TimetableRepository",
]
