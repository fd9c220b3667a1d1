"""Error taxonomy and the JSON error handlers registered on the app."""

from __future__ import annotations

from typing import Optional

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from .logging_config import get_logger

logger = get_logger(__name__)

SERVER_ERROR_MESSAGE = "Server error"


class HabitboardError(Exception):
    """Base class for errors surfaced to HTTP callers."""

    status_code = 500
    default_message = SERVER_ERROR_MESSAGE

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"message": self.message}


class ValidationError(HabitboardError):
    """A required field is missing or a field has the wrong shape."""

    status_code = 400
    default_message = "Invalid request"

    def __init__(self, message: Optional[str] = None, errors: Optional[dict[str, list[str]]] = None) -> None:
        super().__init__(message)
        self.errors = errors or {}

    def to_dict(self) -> dict:
        payload = super().to_dict()
        if self.errors:
            payload["errors"] = self.errors
        return payload


class Unauthenticated(HabitboardError):
    """No caller identity was supplied."""

    status_code = 401
    default_message = "No user ID, authorization denied"


class NotFoundOrUnauthorized(HabitboardError):
    """Record is absent or owned by someone else; the two are indistinguishable."""

    status_code = 404
    default_message = "Not found"


class StorageFailure(HabitboardError):
    """Any persistence-layer fault. Details are logged, never returned."""

    status_code = 500


def register_error_handlers(app: Flask) -> None:
    """Map the taxonomy above (and stray exceptions) to JSON responses."""

    @app.errorhandler(HabitboardError)
    def _handle_domain_error(exc: HabitboardError):
        if isinstance(exc, StorageFailure) or exc.status_code >= 500:
            logger.error("Storage failure: %s", exc.message, exc_info=exc)
            return jsonify({"message": SERVER_ERROR_MESSAGE}), exc.status_code
        return jsonify(exc.to_dict()), exc.status_code

    @app.errorhandler(HTTPException)
    def _handle_http_error(exc: HTTPException):
        return jsonify({"message": exc.name}), exc.code or 500

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        logger.exception("Unhandled error while serving request")
        return jsonify({"message": SERVER_ERROR_MESSAGE}), 500


__all__ = [
    "HabitboardError",
    "NotFoundOrUnauthorized",
    "StorageFailure",
    "Unauthenticated",
    "ValidationError",
    "register_error_handlers",
]
