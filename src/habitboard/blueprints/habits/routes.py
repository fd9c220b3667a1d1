"""Habit routes."""

from __future__ import annotations

from flask import jsonify

from ...auth import current_user_id
from ...extensions import configured_timezone, habit_repository
from ...services import habits as habit_service
from ..payloads import json_body, parse_form
from . import bp
from .forms import HabitForm, HabitUpdateForm


@bp.get("")
def list_habits():
    """Return the caller's habits, newest first."""

    habits = habit_service.list_habits(habit_repository(), user_id=current_user_id())
    return jsonify([habit.to_dict() for habit in habits])


@bp.post("")
def create_habit():
    form = parse_form(HabitForm, json_body(), required=("name",), missing_message="Name is required")
    habit = habit_service.create_habit(
        habit_repository(),
        user_id=current_user_id(),
        name=form.name,
        description=form.description,
        frequency=form.frequency,
    )
    return jsonify(habit.to_dict()), 201


@bp.put("/<int:habit_id>")
def update_habit(habit_id: int):
    """Merge the supplied fields into the habit without touching streak logic."""

    form = parse_form(HabitUpdateForm, json_body())
    habit = habit_service.update_habit(
        habit_repository(),
        habit_id,
        form.changes(),
        user_id=current_user_id(),
        tz=configured_timezone(),
    )
    return jsonify(habit.to_dict())


@bp.put("/<int:habit_id>/done")
def mark_done(habit_id: int):
    """Mark the habit done for today."""

    habit = habit_service.mark_done(
        habit_repository(),
        habit_id,
        user_id=current_user_id(),
        tz=configured_timezone(),
    )
    return jsonify(habit.to_dict())


@bp.delete("/<int:habit_id>")
def delete_habit(habit_id: int):
    habit_service.delete_habit(habit_repository(), habit_id, user_id=current_user_id())
    return jsonify({"message": "Habit deleted"})
