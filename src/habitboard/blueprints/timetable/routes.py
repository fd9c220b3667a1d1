"""Timetable routes."""

from __future__ import annotations

from flask import jsonify

from ...auth import current_user_id
from ...extensions import timetable_repository
from ...services import timetable as timetable_service
from ..payloads import json_body, parse_form
from . import bp
from .forms import TimetableForm, TimetableUpdateForm


@bp.get("")
def list_entries():
    entries = timetable_service.list_entries(timetable_repository(), user_id=current_user_id())
    return jsonify([entry.to_dict() for entry in entries])


@bp.post("")
def create_entry():
    form = parse_form(TimetableForm, json_body(), required=("dayOfWeek", "title"))
    entry = timetable_service.create_entry(
        timetable_repository(),
        user_id=current_user_id(),
        day_of_week=form.day_of_week.value,
        title=form.title,
        description=form.description,
        time=form.time,
    )
    return jsonify(entry.to_dict()), 201


@bp.put("/<int:entry_id>")
def update_entry(entry_id: int):
    form = parse_form(TimetableUpdateForm, json_body())
    entry = timetable_service.update_entry(
        timetable_repository(), entry_id, form.changes(), user_id=current_user_id()
    )
    return jsonify(entry.to_dict())


@bp.delete("/<int:entry_id>")
def delete_entry(entry_id: int):
    timetable_service.delete_entry(timetable_repository(), entry_id, user_id=current_user_id())
    return jsonify({"message": "Entry deleted"})
