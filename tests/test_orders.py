"""Tests for order placement and tracking."""

from __future__ import annotations

import pytest

from models import db
from models.cake import ReadyMadeCake
from models.user import User


@pytest.fixture()
def customer_and_cake(app) -> tuple[int, int]:
    with app.app_context():
        user = User(name="Order Customer", email="orders@testmail.com", password="x$y$z")
        cake = ReadyMadeCake(cake_name="Order Cake", quantity_available=3)
        db.session.add_all([user, cake])
        db.session.commit()
        return user.id, cake.id


def _place(client, user_id: int, cake_id: int, **extra):
    payload = {"user_id": user_id, "cake_id": cake_id, "quantity": 2}
    payload.update(extra)
    return client.post("/orders", json=payload)


def test_create_and_fetch_order(client, customer_and_cake):
    user_id, cake_id = customer_and_cake

    response = _place(
        client, user_id, cake_id, total_price="45.50", delivery_date="2026-11-02"
    )

    assert response.status_code == 201
    order = response.get_json()["order"]
    assert order["status"] == "pending"
    assert order["total_price"] == 45.5
    assert order["delivery_date"] == "2026-11-02"

    fetched = client.get(f"/orders/{order['id']}")
    assert fetched.status_code == 200
    assert fetched.get_json()["quantity"] == 2


def test_create_order_validation(client, customer_and_cake):
    user_id, cake_id = customer_and_cake

    assert client.post("/orders", json={"cake_id": cake_id}).status_code == 400
    no_item = client.post("/orders", json={"user_id": user_id})
    assert no_item.status_code == 400
    assert no_item.get_json()["code"] == "validation_failed"
    assert _place(client, user_id, cake_id, quantity=0).status_code == 400
    assert _place(client, user_id, 9999).status_code == 400


def test_create_order_for_unknown_user(client, customer_and_cake):
    _, cake_id = customer_and_cake

    response = _place(client, 9999, cake_id)

    assert response.status_code == 404
    assert response.get_json()["code"] == "user_not_found"


def test_list_and_user_orders(client, customer_and_cake):
    user_id, cake_id = customer_and_cake
    _place(client, user_id, cake_id)
    _place(client, user_id, cake_id)

    assert len(client.get("/orders").get_json()["data"]) == 2
    assert len(client.get(f"/user/orders/{user_id}").get_json()["data"]) == 2
    assert client.get("/user/orders/4242").get_json()["data"] == []


def test_status_transitions_stop_at_final_states(client, customer_and_cake):
    user_id, cake_id = customer_and_cake
    order_id = _place(client, user_id, cake_id).get_json()["order"]["id"]

    for status in ("confirmed", "baking", "delivered"):
        response = client.put(f"/orders/{order_id}", json={"status": status})
        assert response.status_code == 200

    blocked = client.put(f"/orders/{order_id}", json={"status": "pending"})
    assert blocked.status_code == 400
    assert blocked.get_json()["code"] == "invalid_state"
    assert client.get(f"/orders/{order_id}").get_json()["status"] == "delivered"


def test_status_update_validation(client, customer_and_cake):
    user_id, cake_id = customer_and_cake
    order_id = _place(client, user_id, cake_id).get_json()["order"]["id"]

    assert client.put(f"/orders/{order_id}", json={"status": "eaten"}).status_code == 400
    assert client.put(f"/orders/{order_id}", json={}).status_code == 400
    assert client.put("/orders/9999", json={"status": "ready"}).status_code == 404


def test_update_details_merges(client, customer_and_cake):
    user_id, cake_id = customer_and_cake
    order_id = _place(client, user_id, cake_id, notes="No nuts").get_json()["order"]["id"]

    response = client.put(f"/orders/{order_id}/details", json={"quantity": 5})

    assert response.status_code == 200
    order = client.get(f"/orders/{order_id}").get_json()
    assert order["quantity"] == 5
    assert order["notes"] == "No nuts"

    assert client.put("/orders/9999/details", json={"quantity": 1}).status_code == 404


def test_delete_order(client, customer_and_cake):
    user_id, cake_id = customer_and_cake
    order_id = _place(client, user_id, cake_id).get_json()["order"]["id"]

    assert client.delete(f"/orders/{order_id}").status_code == 200
    assert client.get(f"/orders/{order_id}").status_code == 404
    assert client.delete(f"/orders/{order_id}").status_code == 404
    assert client.delete("/orders/abc").status_code == 400


def test_out_of_range_ids_are_rejected(client, customer_and_cake):
    user_id, _ = customer_and_cake

    body = client.post("/orders", json={"user_id": user_id, "cake_id": 2**31})
    assert body.status_code == 400
    assert body.get_json()["code"] == "validation_failed"

    path = client.get("/orders/99999999999999999999")
    assert path.status_code == 400
    assert path.get_json()["code"] == "invalid_id"
