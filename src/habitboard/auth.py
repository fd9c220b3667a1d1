"""Caller identity resolution for the JSON API.

The app never authenticates users itself. An ``IdentityVerifier`` turns the
incoming request into a user id (or None), and protected blueprints call
``require_identity`` before every request.
"""

from __future__ import annotations

from typing import Optional, Protocol

from flask import Flask, Request, current_app, g, request

from .errors import Unauthenticated

EXTENSION_KEY = "habitboard.identity"


class IdentityVerifier(Protocol):
    """Resolve the caller of a request to a user id."""

    def resolve(self, request: Request) -> Optional[str]:
        ...


class HeaderIdentityVerifier:
    """Trust a user id supplied by an upstream proxy in a request header."""

    def __init__(self, header_name: str = "X-User-Id") -> None:
        self.header_name = header_name

    def resolve(self, request: Request) -> Optional[str]:
        value = request.headers.get(self.header_name, "").strip()
        return value or None


def init_identity(app: Flask, verifier: Optional[IdentityVerifier] = None) -> None:
    """Install ``verifier`` on the app, defaulting to the configured header."""

    if verifier is None:
        header_name = app.config["HABITBOARD_CONFIG"].IDENTITY_HEADER
        verifier = HeaderIdentityVerifier(header_name)
    app.extensions[EXTENSION_KEY] = verifier


def require_identity() -> None:
    """``before_request`` hook rejecting anonymous callers."""

    verifier: IdentityVerifier = current_app.extensions[EXTENSION_KEY]
    user_id = verifier.resolve(request)
    if not user_id:
        raise Unauthenticated()
    g.user_id = user_id


def current_user_id() -> str:
    """Return the id resolved for the current request."""

    user_id = g.get("user_id")
    if not user_id:
        raise Unauthenticated()
    return user_id


__all__ = [
    "HeaderIdentityVerifier",
    "IdentityVerifier",
    "current_user_id",
    "init_identity",
    "require_identity",
]
