"""Ready-made cake catalog blueprint."""

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, jsonify, request

from schemas.cakes import CakeCreateRequest, CakeUpdateRequest
from services import catalog
from utils.auth import catalog_write_guard
from utils.request_validation import parse_id, validate_payload

cakes_bp = Blueprint("cakes", __name__)

INVALID_CAKE_ID = "Invalid cake ID"


@cakes_bp.route("", methods=["GET"])
def get_cakes():
    """Return every active cake as a bare list."""

    return jsonify(catalog.list_cakes())


@cakes_bp.route("/<cake_id>", methods=["GET"])
def get_cake(cake_id: str):
    return jsonify(catalog.get_cake(parse_id(cake_id, INVALID_CAKE_ID)))


@cakes_bp.route("", methods=["POST"])
@catalog_write_guard
def add_cake():
    payload = validate_payload(
        request, CakeCreateRequest, missing_message="cakeName is required."
    )
    cake = catalog.add_cake(payload)
    return (
        jsonify({"message": "Cake added successfully", "newCake": cake}),
        HTTPStatus.CREATED,
    )


@cakes_bp.route("/<cake_id>", methods=["PUT"])
@catalog_write_guard
def update_cake(cake_id: str):
    parsed_id = parse_id(cake_id, INVALID_CAKE_ID)
    payload = validate_payload(request, CakeUpdateRequest)
    catalog.update_cake(parsed_id, payload)
    return jsonify({"message": "Cake updated successfully"})


@cakes_bp.route("/<cake_id>", methods=["DELETE"])
@catalog_write_guard
def delete_cake(cake_id: str):
    """Deactivate a cake; it disappears from the catalog but stays stored."""

    catalog.delete_cake(parse_id(cake_id, INVALID_CAKE_ID))
    return jsonify({"message": "Cake deleted successfully"})
