"""Timetable blueprint package."""

from __future__ import annotations

from flask import Blueprint

from ...auth import require_identity

bp = Blueprint("timetable", __name__, url_prefix="/api/timetable")
bp.before_request(require_identity)

from . import routes  # noqa: E402,F401 - ensure routes get registered

__all__ = ["bp"]
