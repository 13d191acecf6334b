"""Shared pytest fixtures for the application tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app import create_app  # noqa: E402
from config import Config  # noqa: E402
from models import db  # noqa: E402


class _BaseTestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    JWT_SECRET_KEY = "test-jwt-secret-key-with-enough-length"
    RATE_LIMIT = "1000 per minute"
    MAIL_SERVER = None
    CATALOG_ADMIN_ONLY = False


@pytest.fixture()
def app() -> Flask:
    """Create a Flask application instance for tests."""

    application = create_app(_BaseTestConfig)

    with application.app_context():
        db.create_all()

    yield application

    with application.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Return a test client for the Flask app."""

    return app.test_client()


@pytest.fixture()
def app_ctx(app: Flask):
    """Push an application context for tests that call services directly."""

    with app.app_context():
        yield app


@pytest.fixture()
def sent_codes(monkeypatch) -> dict:
    """Capture verification codes instead of emailing them."""

    from services import mailer

    captured: dict[str, str] = {}

    def _capture(recipient: str, code: str) -> bool:
        captured[recipient] = code
        return True

    monkeypatch.setattr(mailer, "send_verification_code", _capture)
    return captured
