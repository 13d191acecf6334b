"""Tests for user listing, lookup, update and deletion."""

from __future__ import annotations

import pytest

from models import db
from models.user import User
from utils.passwords import verify_password


def _create_user(app, email: str = "john@testmail.com", **fields) -> int:
    with app.app_context():
        user = User(
            name=fields.pop("name", "John Smith"),
            email=email,
            phone="0700000000",
            password="pass123",
            address="Test Address",
            **fields,
        )
        db.session.add(user)
        db.session.commit()
        return user.id


def test_end_to_end_register_get_delete(client, sent_codes):
    created = client.post(
        "/users/register", json={"name": "A", "email": "a@x.com", "password": "p"}
    )
    assert created.status_code == 201
    user_id = created.get_json()["user"]["id"]
    assert isinstance(user_id, int)

    fetched = client.get(f"/users/{user_id}")
    assert fetched.status_code == 200
    body = fetched.get_json()
    assert body["email"] == "a@x.com"
    assert "password" not in body

    deleted = client.delete(f"/users/{user_id}")
    assert deleted.status_code == 200
    assert deleted.get_json()["message"] == "user deleted successfully"

    assert client.get(f"/users/{user_id}").status_code == 404


def test_list_users_returns_public_fields(client, app):
    _create_user(app, "one@testmail.com")
    _create_user(app, "two@testmail.com")

    response = client.get("/users")

    assert response.status_code == 200
    data = response.get_json()["data"]
    assert isinstance(data, list)
    assert {user["email"] for user in data} == {"one@testmail.com", "two@testmail.com"}
    for user in data:
        assert "password" not in user
        assert "verification_code" not in user


def test_get_missing_user_is_404(client):
    response = client.get("/users/99999999")

    assert response.status_code == 404
    assert response.get_json()["message"] == "User not found"


@pytest.mark.parametrize("method", ["get", "put", "delete"])
@pytest.mark.parametrize(
    "raw_id", ["abc", "0", "-1", "1.5", "2147483648", "99999999999999999999"]
)
def test_invalid_ids_are_rejected_before_lookup(client, method, raw_id, monkeypatch):
    from repositories import users as user_repository

    def _fail(*_args, **_kwargs):
        raise AssertionError("store must not be reached")

    for name in ("find_by_id", "update", "delete"):
        monkeypatch.setattr(user_repository, name, _fail)

    kwargs = {"json": {"name": "BadId"}} if method == "put" else {}
    response = getattr(client, method)(f"/users/{raw_id}", **kwargs)

    assert response.status_code == 400
    assert response.get_json()["message"] == "Invalid user ID"


def test_update_merges_fields(client, app):
    user_id = _create_user(app)

    response = client.put(f"/users/{user_id}", json={"name": "Updated Name"})

    assert response.status_code == 200
    assert response.get_json()["message"] == "User updated successfully"
    body = client.get(f"/users/{user_id}").get_json()
    assert body["name"] == "Updated Name"
    assert body["phone"] == "0700000000"
    assert body["address"] == "Test Address"


def test_update_hashes_new_password(client, app):
    user_id = _create_user(app)

    client.put(f"/users/{user_id}", json={"password": "n3wPassword"})

    with app.app_context():
        stored = db.session.get(User, user_id).password
    assert stored != "n3wPassword"
    assert verify_password("n3wPassword", stored)


def test_update_keeps_password_whitespace(client, app):
    user_id = _create_user(app)

    response = client.put(f"/users/{user_id}", json={"name": " Jo ", "password": " pad "})

    assert response.status_code == 200
    with app.app_context():
        stored = db.session.get(User, user_id)
        assert stored.name == "Jo"
        assert verify_password(" pad ", stored.password)
        assert not verify_password("pad", stored.password)


def test_update_missing_user_is_404(client):
    response = client.put("/users/999999", json={"name": "Ghost"})

    assert response.status_code == 404
    assert response.get_json()["message"] == "User not found"


def test_update_to_taken_email_is_duplicate(client, app):
    _create_user(app, "taken@testmail.com")
    user_id = _create_user(app, "mine@testmail.com")

    response = client.put(f"/users/{user_id}", json={"email": "taken@testmail.com"})

    assert response.status_code == 500
    assert response.get_json()["code"] == "duplicate_email"


def test_update_rejects_unknown_fields(client, app):
    user_id = _create_user(app)

    response = client.put(f"/users/{user_id}", json={"is_verified": True})

    assert response.status_code == 400


def test_delete_missing_user_is_404(client):
    response = client.delete("/users/99999999")

    assert response.status_code == 404
    assert response.get_json()["message"] == "User not found"
