"""Helpers for turning JSON request bodies into validated form models."""

from __future__ import annotations

from typing import Any, Iterable, TypeVar

from flask import request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..errors import ValidationError

FormT = TypeVar("FormT", bound=BaseModel)

# pydantic error types that mean "the value was not supplied"
_MISSING_ERROR_TYPES = {"missing", "string_too_short"}


def json_body() -> dict[str, Any]:
    """Return the request body as a dict; anything else counts as empty."""

    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def parse_form(
    form_cls: type[FormT],
    payload: dict[str, Any],
    *,
    required: Iterable[str] = (),
    missing_message: str = "Missing fields",
) -> FormT:
    """Validate ``payload`` with ``form_cls``.

    An absent or blank field listed in ``required`` is reported with
    ``missing_message``; every other problem gets a generic message. Both
    carry a per-field error map.
    """

    try:
        return form_cls.model_validate(payload)
    except PydanticValidationError as exc:
        structured: dict[str, list[str]] = {}
        missing: set[str] = set()
        for error in exc.errors(include_url=False):
            loc = error.get("loc", ())
            key = str(loc[0]) if loc else "__root__"
            structured.setdefault(key, []).append(error.get("msg", "Invalid value"))
            if error.get("type") in _MISSING_ERROR_TYPES or error.get("input") is None:
                missing.add(key)
        if missing.intersection(required):
            raise ValidationError(missing_message, structured) from exc
        raise ValidationError("Invalid request", structured) from exc
