"""Bearer-token helpers for blueprints."""

from __future__ import annotations

from functools import wraps

from flask import current_app, request

from errors import Forbidden
from utils.tokens import bearer_token, verify_token


def current_identity() -> dict:
    """Return ``{"user_id", "role"}`` for the request's bearer token."""

    return verify_token(bearer_token(request.headers.get("Authorization")))


def admin_required(func):
    """Reject the request unless it carries an admin token."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        if current_identity().get("role") != "admin":
            raise Forbidden()
        return func(*args, **kwargs)

    return wrapper


def catalog_write_guard(func):
    """Apply :func:`admin_required` only when ``CATALOG_ADMIN_ONLY`` is set."""

    guarded = admin_required(func)

    @wraps(func)
    def wrapper(*args, **kwargs):
        if current_app.config.get("CATALOG_ADMIN_ONLY"):
            return guarded(*args, **kwargs)
        return func(*args, **kwargs)

    return wrapper
