"""Order persistence."""

from __future__ import annotations

from models import db, utcnow
from models.order import Order

from . import store_errors


def find_all() -> list[Order]:
    with store_errors("list orders"):
        return Order.query.order_by(Order.created_at.desc(), Order.id.desc()).all()


def find_by_id(order_id: int) -> Order | None:
    with store_errors("load order"):
        return db.session.get(Order, order_id)


def find_by_user(user_id: int) -> list[Order]:
    with store_errors("list user orders"):
        return (
            Order.query.filter_by(user_id=user_id)
            .order_by(Order.created_at.desc(), Order.id.desc())
            .all()
        )


def insert(fields: dict) -> Order:
    order = Order(**fields)
    with store_errors("insert order"):
        db.session.add(order)
        db.session.commit()
    return order


def update(order_id: int, fields: dict) -> int:
    values = dict(fields)
    values["updated_at"] = utcnow()
    with store_errors("update order"):
        count = Order.query.filter_by(id=order_id).update(
            values, synchronize_session=False
        )
        db.session.commit()
    return count


def update_status(order_id: int, status: str, *, unless_in: tuple = ()) -> int:
    """Set the status unless the order currently holds one of ``unless_in``."""

    query = Order.query.filter_by(id=order_id)
    if unless_in:
        query = query.filter(Order.status.notin_(unless_in))
    with store_errors("update order status"):
        count = query.update(
            {"status": status, "updated_at": utcnow()},
            synchronize_session=False,
        )
        db.session.commit()
    return count


def delete(order_id: int) -> int:
    with store_errors("delete order"):
        count = Order.query.filter_by(id=order_id).delete(synchronize_session=False)
        db.session.commit()
    return count
