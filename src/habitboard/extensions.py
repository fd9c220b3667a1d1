"""Database and extension wiring for Habitboard."""

from __future__ import annotations

from datetime import tzinfo
from typing import Optional

from flask import Flask, current_app
from sqlalchemy.engine import Engine

from .config import BaseConfig
from .infra.database import SessionFactory, create_db_engine, create_session_factory, init_database
from .infra.repositories import SQLModelHabitRepository, SQLModelTimetableRepository

ENGINE_KEY = "habitboard.engine"
SESSION_FACTORY_KEY = "habitboard.session_factory"


def init_db(app: Flask) -> None:
    """Create the engine and schema, and expose a session factory on the app."""

    config: BaseConfig = app.config["HABITBOARD_CONFIG"]
    engine = create_db_engine(config)
    init_database(engine)

    app.extensions[ENGINE_KEY] = engine
    app.extensions[SESSION_FACTORY_KEY] = create_session_factory(engine)


def get_engine() -> Engine:
    """Return the engine of the current application."""

    engine = current_app.extensions.get(ENGINE_KEY)
    if engine is None:
        raise RuntimeError("Database engine not initialized")
    return engine


def get_session_factory() -> SessionFactory:
    return current_app.extensions[SESSION_FACTORY_KEY]


def habit_repository() -> SQLModelHabitRepository:
    return SQLModelHabitRepository(get_session_factory())


def timetable_repository() -> SQLModelTimetableRepository:
    return SQLModelTimetableRepository(get_session_factory())


def configured_timezone() -> Optional[tzinfo]:
    """Zone used for calendar-day comparisons; None means process-local."""

    config: BaseConfig = current_app.config["HABITBOARD_CONFIG"]
    return config.timezone
