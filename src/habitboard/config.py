"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from datetime import tzinfo
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "Habitboard"
    DB_FILENAME = "habitboard.db"
    DEFAULT_IDENTITY_HEADER = "X-User-Id"
    TESTING = False

    def __init__(self) -> None:
        self.SECRET_KEY = os.getenv("HABITBOARD_SECRET_KEY", "replace-me")
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = _env_bool("HABITBOARD_DEV_MODE", default=True)
        self.LOG_TO_FILE = _env_bool("HABITBOARD_LOG_TO_FILE", default=True)
        self.DATABASE_URL = os.getenv("HABITBOARD_DATABASE_URL", self._build_sqlite_url())
        self.IDENTITY_HEADER = (
            os.getenv("HABITBOARD_IDENTITY_HEADER", "").strip() or self.DEFAULT_IDENTITY_HEADER
        )
        self.TIMEZONE_NAME = os.getenv("HABITBOARD_TIMEZONE", "").strip() or None
        self._timezone = self._resolve_timezone(self.TIMEZONE_NAME)
        if not self.DEV_MODE and self.SECRET_KEY == "replace-me":
            raise ValueError("HABITBOARD_SECRET_KEY must be set in non-dev mode.")

    def _resolve_data_dir(self) -> Path:
        """Return the directory where the SQLite file and logs live."""

        data_root = os.getenv("HABITBOARD_DATA_DIR", "instance")
        path = Path(data_root).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @staticmethod
    def _resolve_timezone(name: str | None) -> tzinfo | None:
        if name is None:
            return None
        try:
            return ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"HABITBOARD_TIMEZONE is not a known time zone: {name!r}") from exc

    def _build_sqlite_url(self) -> str:
        return f"sqlite:///{self.DATA_DIR / self.DB_FILENAME}"

    @property
    def timezone(self) -> tzinfo | None:
        """Zone used to derive calendar days; None means the process-local zone."""

        return self._timezone

    def sqlalchemy_engine_options(self) -> dict[str, Any]:
        """Expose engine kwargs for SQLModel to consume."""

        if self.DATABASE_URL.startswith("sqlite"):
            return {"connect_args": {"check_same_thread": False}}
        return {"pool_pre_ping": True}


class DevConfig(BaseConfig):
    """Development configuration using local SQLite."""

    DEBUG = True
    TESTING = False


class TestConfig(BaseConfig):
    """Configuration used by the test-suite; logs stay on the console."""

    __test__ = False  # not a pytest test class

    DEBUG = False
    TESTING = True

    def __init__(self) -> None:
        super().__init__()
        self.LOG_TO_FILE = _env_bool("HABITBOARD_LOG_TO_FILE", default=False)
