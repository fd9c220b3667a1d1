"""Session helper shared by the SQLModel repositories."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from ...errors import StorageFailure
from ..database import SessionFactory


@contextmanager
def storage_session(session_factory: SessionFactory) -> Iterator[Session]:
    """Open a session, translating driver faults into ``StorageFailure``."""

    try:
        with session_factory() as session:
            yield session
    except SQLAlchemyError as exc:
        raise StorageFailure(f"{type(exc).__name__}: {exc}") from exc
