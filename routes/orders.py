"""Orders blueprint."""

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, jsonify, request

from schemas.orders import OrderCreateRequest, OrderDetailsRequest, OrderStatusRequest
from services import orders as order_service
from utils.request_validation import parse_id, validate_payload

orders_bp = Blueprint("orders", __name__)

INVALID_ORDER_ID = "Invalid order ID"


@orders_bp.route("/orders", methods=["GET"])
def get_orders():
    return jsonify({"data": order_service.list_orders()})


@orders_bp.route("/orders/<order_id>", methods=["GET"])
def get_order(order_id: str):
    return jsonify(order_service.get_order(parse_id(order_id, INVALID_ORDER_ID)))


@orders_bp.route("/orders", methods=["POST"])
def create_order():
    payload = validate_payload(
        request, OrderCreateRequest, missing_message="user_id is required."
    )
    order = order_service.create_order(payload)
    return (
        jsonify({"message": "Order created successfully", "order": order}),
        HTTPStatus.CREATED,
    )


@orders_bp.route("/orders/<order_id>", methods=["PUT"])
def update_order_status(order_id: str):
    parsed_id = parse_id(order_id, INVALID_ORDER_ID)
    payload = validate_payload(
        request, OrderStatusRequest, missing_message="status is required."
    )
    order_service.update_status(parsed_id, payload)
    return jsonify({"message": "Order status updated successfully"})


@orders_bp.route("/orders/<order_id>/details", methods=["PUT"])
def update_order_details(order_id: str):
    parsed_id = parse_id(order_id, INVALID_ORDER_ID)
    payload = validate_payload(request, OrderDetailsRequest)
    order_service.update_details(parsed_id, payload)
    return jsonify({"message": "Order updated successfully"})


@orders_bp.route("/orders/<order_id>", methods=["DELETE"])
def delete_order(order_id: str):
    order_service.delete_order(parse_id(order_id, INVALID_ORDER_ID))
    return jsonify({"message": "Order deleted successfully"})


@orders_bp.route("/user/orders/<user_id>", methods=["GET"])
def orders_of_user(user_id: str):
    """Return the orders placed by one user, newest first."""

    parsed_id = parse_id(user_id, "Invalid user ID")
    return jsonify({"data": order_service.orders_for_user(parsed_id)})
