"""Habitboard application factory."""

from __future__ import annotations

from importlib import import_module
from typing import Iterable, Optional

from flask import Flask, jsonify

from . import cli as _cli
from .auth import IdentityVerifier, init_identity
from .config import BaseConfig, DevConfig, TestConfig
from .errors import register_error_handlers
from .logging_config import setup_logging

_CONFIG_MAP = {
    "development": DevConfig,
    "testing": TestConfig,
    "default": BaseConfig,
}


def _resolve_config(name: str | None) -> type[BaseConfig]:
    """Return the config class for the provided environment name."""

    if not name:
        return BaseConfig
    return _CONFIG_MAP.get(name.lower(), BaseConfig)


def _blueprint_paths() -> Iterable[str]:
    """Yield blueprint import paths served by the API."""

    yield "habitboard.blueprints.habits"
    yield "habitboard.blueprints.timetable"


def create_app(
    config_name: str | None = None,
    *,
    identity_verifier: Optional[IdentityVerifier] = None,
) -> Flask:
    """Create and configure the Flask application instance."""

    app = Flask(__name__, instance_relative_config=True)
    config_obj = _resolve_config(config_name)()
    app.config.from_object(config_obj)
    app.config["HABITBOARD_CONFIG"] = config_obj
    app.json.sort_keys = False

    logger = setup_logging(config_obj)

    # Import init_db lazily so importing the package does not build mappers.
    from .extensions import init_db

    init_db(app)
    init_identity(app, identity_verifier)
    register_error_handlers(app)
    _register_blueprints(app)
    _cli.init_app(app)

    @app.get("/health")
    def health():
        return jsonify({"status": "ok"})

    logger.info("Application created", extra={"config": type(config_obj).__name__})
    return app


def _register_blueprints(app: Flask) -> None:
    """Import and register all blueprints declared in `_blueprint_paths`."""

    for dotted_path in _blueprint_paths():
        module = import_module(dotted_path)
        blueprint = getattr(module, "bp")
        app.register_blueprint(blueprint)


__all__ = ["BaseConfig", "DevConfig", "TestConfig", "create_app"]
