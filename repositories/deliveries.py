"""Delivery persistence."""

from __future__ import annotations

from models import db, utcnow
from models.delivery import Delivery

from . import store_errors


def find_all() -> list[Delivery]:
    with store_errors("list deliveries"):
        return Delivery.query.order_by(Delivery.delivery_date.asc(), Delivery.id).all()


def find_by_id(delivery_id: int) -> Delivery | None:
    with store_errors("load delivery"):
        return db.session.get(Delivery, delivery_id)


def insert(fields: dict) -> Delivery:
    delivery = Delivery(**fields)
    with store_errors("schedule delivery"):
        db.session.add(delivery)
        db.session.commit()
    return delivery


def update(delivery_id: int, fields: dict) -> int:
    values = dict(fields)
    values["updated_at"] = utcnow()
    with store_errors("update delivery"):
        count = Delivery.query.filter_by(id=delivery_id).update(
            values, synchronize_session=False
        )
        db.session.commit()
    return count


def delete(delivery_id: int) -> int:
    with store_errors("delete delivery"):
        count = Delivery.query.filter_by(id=delivery_id).delete(
            synchronize_session=False
        )
        db.session.commit()
    return count
