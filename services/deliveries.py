"""Delivery scheduling."""

from __future__ import annotations

import logging

from errors import NotFound
from repositories import deliveries as delivery_repository
from repositories import orders as order_repository
from schemas.deliveries import DeliveryCreateRequest, DeliveryUpdateRequest
from services.orders import OrderNotFound

logger = logging.getLogger(__name__)


class DeliveryNotFound(NotFound):
    default_message = "Delivery not found"


def list_deliveries() -> list[dict]:
    return [delivery.to_dict() for delivery in delivery_repository.find_all()]


def get_delivery(delivery_id: int) -> dict:
    delivery = delivery_repository.find_by_id(delivery_id)
    if delivery is None:
        raise DeliveryNotFound()
    return delivery.to_dict()


def schedule_delivery(payload: DeliveryCreateRequest) -> dict:
    fields = payload.model_dump()
    if order_repository.find_by_id(fields["order_id"]) is None:
        raise OrderNotFound()

    delivery = delivery_repository.insert(fields)
    logger.info("Delivery %s scheduled for order %s", delivery.id, delivery.order_id)
    return delivery.to_dict()


def update_delivery(delivery_id: int, payload: DeliveryUpdateRequest) -> None:
    if not delivery_repository.update(delivery_id, payload.fields_set()):
        raise DeliveryNotFound()


def delete_delivery(delivery_id: int) -> None:
    if not delivery_repository.delete(delivery_id):
        raise DeliveryNotFound()
