"""Order placement and status tracking."""

from __future__ import annotations

import logging

from errors import InvalidState, NotFound, UserNotFound, ValidationFailed
from models.order import FINAL_ORDER_STATUSES
from repositories import cakes as cake_repository
from repositories import designs as design_repository
from repositories import orders as order_repository
from repositories import users as user_repository
from schemas.orders import OrderCreateRequest, OrderDetailsRequest, OrderStatusRequest

logger = logging.getLogger(__name__)


class OrderNotFound(NotFound):
    default_message = "Order not found"


def _check_references(fields: dict) -> None:
    cake_id = fields.get("cake_id")
    if cake_id is not None and cake_repository.find_by_id(cake_id) is None:
        raise ValidationFailed("cake_id does not reference an available cake.")
    design_id = fields.get("design_id")
    if design_id is not None and design_repository.find_by_id(design_id) is None:
        raise ValidationFailed("design_id does not reference a design request.")


def list_orders() -> list[dict]:
    return [order.to_dict() for order in order_repository.find_all()]


def get_order(order_id: int) -> dict:
    order = order_repository.find_by_id(order_id)
    if order is None:
        raise OrderNotFound()
    return order.to_dict()


def orders_for_user(user_id: int) -> list[dict]:
    return [order.to_dict() for order in order_repository.find_by_user(user_id)]


def create_order(payload: OrderCreateRequest) -> dict:
    fields = payload.model_dump()
    if user_repository.find_by_id(fields["user_id"]) is None:
        raise UserNotFound()
    _check_references(fields)

    order = order_repository.insert(fields)
    logger.info("Order %s placed by user %s", order.id, order.user_id)
    return order.to_dict()


def update_status(order_id: int, payload: OrderStatusRequest) -> None:
    """Move an order to a new status; delivered and cancelled are final."""

    affected = order_repository.update_status(
        order_id, payload.status, unless_in=FINAL_ORDER_STATUSES
    )
    if affected:
        logger.info("Order %s moved to %s", order_id, payload.status)
        return

    order = order_repository.find_by_id(order_id)
    if order is None:
        raise OrderNotFound()
    raise InvalidState(f"Order is already {order.status} and cannot change status.")


def update_details(order_id: int, payload: OrderDetailsRequest) -> None:
    fields = payload.fields_set()
    _check_references(fields)
    if not order_repository.update(order_id, fields):
        raise OrderNotFound()


def delete_order(order_id: int) -> None:
    if not order_repository.delete(order_id):
        raise OrderNotFound()
    logger.info("Deleted order %s", order_id)
