"""SQLModel table exports."""

from .habit import Habit
from .timetable import TimetableEntry

__all__ = [
    "Habit",
    "TimetableEntry",
]
