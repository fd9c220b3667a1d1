"""Pytest configuration and shared fixtures for Habitboard tests.

Provides an isolated SQLite database per test, repository session
factories, record factories and a Flask test client wired to a temporary
data directory.
"""

from __future__ import annotations

import tempfile
from datetime import datetime
from pathlib import Path
from typing import Optional

import pytest
from sqlmodel import SQLModel, create_engine

from habitboard import create_app
from habitboard.infra.database import create_session_factory
from habitboard.models import Habit, TimetableEntry

OWNER = "user-1"
OTHER_OWNER = "user-2"

# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database for each test.

    Yields:
        Engine: SQLModel engine connected to test database
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory matching what the repositories receive in the app."""

    return create_session_factory(db_engine)


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def habit_factory(session_factory):
    """Factory for creating test habits.

    Returns:
        Callable: Function that creates and persists Habit instances
    """

    def _create_habit(
        name: str = "Test Habit",
        description: str = "",
        frequency: str = "daily",
        streak: int = 0,
        total_completions: int = 0,
        last_done_date: Optional[datetime] = None,
        owner: str = OWNER,
    ) -> Habit:
        habit = Habit(
            user_id=owner,
            name=name,
            description=description,
            frequency=frequency,
            streak=streak,
            total_completions=total_completions,
            last_done_date=last_done_date,
        )
        with session_factory() as session:
            session.add(habit)
            session.commit()
            session.refresh(habit)
            session.expunge(habit)
        return habit

    return _create_habit


@pytest.fixture
def timetable_factory(session_factory):
    """Factory for creating test timetable entries."""

    def _create_entry(
        day_of_week: str = "Monday",
        title: str = "Lecture",
        description: str = "",
        time: Optional[str] = None,
        owner: str = OWNER,
    ) -> TimetableEntry:
        entry = TimetableEntry(
            user_id=owner,
            day_of_week=day_of_week,
            title=title,
            description=description,
            time=time,
        )
        with session_factory() as session:
            session.add(entry)
            session.commit()
            session.refresh(entry)
            session.expunge(entry)
        return entry

    return _create_entry


# =============================================================================
# Application Fixtures
# =============================================================================


@pytest.fixture()
def app(tmp_path, monkeypatch: pytest.MonkeyPatch):
    """Flask app backed by a throwaway SQLite file."""

    monkeypatch.setenv("HABITBOARD_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("HABITBOARD_DATABASE_URL", f"sqlite:///{tmp_path / 'api.db'}")
    monkeypatch.delenv("HABITBOARD_TIMEZONE", raising=False)
    monkeypatch.delenv("HABITBOARD_IDENTITY_HEADER", raising=False)
    application = create_app("testing")
    yield application
    application.extensions["habitboard.engine"].dispose()


@pytest.fixture()
def client(app):
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def auth_headers():
    """Headers identifying the default test user."""

    return {"X-User-Id": OWNER}
