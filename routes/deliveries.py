"""Delivery scheduling blueprint."""

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, jsonify, request

from schemas.deliveries import DeliveryCreateRequest, DeliveryUpdateRequest
from services import deliveries as delivery_service
from utils.request_validation import parse_id, validate_payload

delivery_bp = Blueprint("delivery", __name__)

INVALID_DELIVERY_ID = "Invalid delivery ID"


@delivery_bp.route("", methods=["GET"])
def get_all_deliveries():
    return jsonify({"data": delivery_service.list_deliveries()})


@delivery_bp.route("/<delivery_id>", methods=["GET"])
def get_delivery(delivery_id: str):
    return jsonify(
        delivery_service.get_delivery(parse_id(delivery_id, INVALID_DELIVERY_ID))
    )


@delivery_bp.route("", methods=["POST"])
def schedule_delivery():
    payload = validate_payload(
        request,
        DeliveryCreateRequest,
        missing_message="order_id, delivery_date and delivery_address are required.",
    )
    delivery = delivery_service.schedule_delivery(payload)
    return (
        jsonify({"message": "Delivery scheduled successfully", "delivery": delivery}),
        HTTPStatus.CREATED,
    )


@delivery_bp.route("/<delivery_id>", methods=["PUT"])
def update_delivery(delivery_id: str):
    parsed_id = parse_id(delivery_id, INVALID_DELIVERY_ID)
    payload = validate_payload(request, DeliveryUpdateRequest)
    delivery_service.update_delivery(parsed_id, payload)
    return jsonify({"message": "Delivery updated successfully"})


@delivery_bp.route("/<delivery_id>", methods=["DELETE"])
def delete_delivery(delivery_id: str):
    delivery_service.delete_delivery(parse_id(delivery_id, INVALID_DELIVERY_ID))
    return jsonify({"message": "Delivery deleted successfully"})
