"""Blueprint exports."""

from . import habits, timetable

__all__ = [
    "habits",
    "timetable",
]
