"""Tests for the ready-made cake catalog."""

from __future__ import annotations

from models import db
from models.cake import ReadyMadeCake
from models.user import User
from utils.passwords import hash_password


def _seed_cake(app, name: str = "Test Chocolate Cake", **fields) -> int:
    with app.app_context():
        cake = ReadyMadeCake(
            cake_name=name,
            flavors_used="Chocolate, Cocoa",
            size="Small",
            image_url="testcake.jpg",
            quantity_available=5,
            **fields,
        )
        db.session.add(cake)
        db.session.commit()
        return cake.id


def test_list_returns_only_active_cakes(client, app):
    active_id = _seed_cake(app)
    _seed_cake(app, "Retired Cake", is_active=False)

    response = client.get("/api/readycakes")

    assert response.status_code == 200
    body = response.get_json()
    assert isinstance(body, list)
    assert [cake["cakeId"] for cake in body] == [active_id]


def test_get_cake_by_id(client, app):
    cake_id = _seed_cake(app)

    response = client.get(f"/api/readycakes/{cake_id}")

    assert response.status_code == 200
    body = response.get_json()
    assert body["cakeId"] == cake_id
    assert body["cakeName"] == "Test Chocolate Cake"


def test_get_missing_cake_is_404(client):
    response = client.get("/api/readycakes/999999")

    assert response.status_code == 404
    assert response.get_json()["message"] == "Cake not found"


def test_create_cake(client):
    response = client.post(
        "/api/readycakes",
        json={
            "cakeName": "Integration Strawberry Cake",
            "flavorsUsed": "Strawberry, Cream",
            "size": "Medium",
            "imageURL": "strawberry_test.jpg",
            "quantityAvailable": 10,
        },
    )

    assert response.status_code == 201
    body = response.get_json()
    assert body["message"] == "Cake added successfully"
    assert body["newCake"]["cakeId"]
    assert body["newCake"]["quantityAvailable"] == 10
    assert body["newCake"]["isactive"] is True


def test_create_cake_defaults_quantity_and_requires_name(client):
    created = client.post("/api/readycakes", json={"cakeName": "Plain Sponge"})
    assert created.get_json()["newCake"]["quantityAvailable"] == 1

    missing = client.post("/api/readycakes", json={"size": "Large"})
    assert missing.status_code == 400
    assert missing.get_json()["code"] == "missing_fields"


def test_update_merges_fields(client, app):
    cake_id = _seed_cake(app)

    response = client.put(
        f"/api/readycakes/{cake_id}", json={"size": "Large", "quantityAvailable": 8}
    )

    assert response.status_code == 200
    assert response.get_json()["message"] == "Cake updated successfully"
    body = client.get(f"/api/readycakes/{cake_id}").get_json()
    assert body["size"] == "Large"
    assert body["quantityAvailable"] == 8
    assert body["flavorsUsed"] == "Chocolate, Cocoa"


def test_update_missing_cake_is_400(client):
    response = client.put("/api/readycakes/999999", json={"size": "Large"})

    assert response.status_code == 400
    assert response.get_json()["message"] == "Cake not found"


def test_delete_is_soft(client, app):
    cake_id = _seed_cake(app, "CakeToDelete")

    response = client.delete(f"/api/readycakes/{cake_id}")

    assert response.status_code == 200
    assert response.get_json()["message"] == "Cake deleted successfully"
    assert client.get(f"/api/readycakes/{cake_id}").status_code == 404
    with app.app_context():
        stored = db.session.get(ReadyMadeCake, cake_id)
        assert stored is not None
        assert stored.is_active is False

    assert client.delete(f"/api/readycakes/{cake_id}").status_code == 404


def test_delete_missing_cake_is_404(client):
    response = client.delete("/api/readycakes/999999")

    assert response.status_code == 404
    assert response.get_json()["message"] == "Cake not found"


def test_invalid_cake_id(client):
    response = client.get("/api/readycakes/abc")

    assert response.status_code == 400
    assert response.get_json()["message"] == "Invalid cake ID"


def _token_for(client, app, role: str) -> str:
    email = f"{role}@testmail.com"
    with app.app_context():
        db.session.add(
            User(
                name=role.title(),
                email=email,
                role=role,
                is_verified=True,
                password=hash_password("Pass1234"),
            )
        )
        db.session.commit()
    response = client.post("/users/login", json={"email": email, "password": "Pass1234"})
    return response.get_json()["token"]


def test_admin_only_catalog_writes(client, app):
    app.config["CATALOG_ADMIN_ONLY"] = True
    payload = {"cakeName": "Guarded Cake"}

    assert client.post("/api/readycakes", json=payload).status_code == 401

    customer = _token_for(client, app, "customer")
    forbidden = client.post(
        "/api/readycakes", json=payload, headers={"Authorization": f"Bearer {customer}"}
    )
    assert forbidden.status_code == 403

    admin = _token_for(client, app, "admin")
    allowed = client.post(
        "/api/readycakes", json=payload, headers={"Authorization": f"Bearer {admin}"}
    )
    assert allowed.status_code == 201

    assert client.get("/api/readycakes").status_code == 200
