"""Ready-made cake persistence. Deletion only flips ``is_active``."""

from __future__ import annotations

from models import db, utcnow
from models.cake import ReadyMadeCake

from . import store_errors


def find_active() -> list[ReadyMadeCake]:
    with store_errors("list cakes"):
        return (
            ReadyMadeCake.query.filter_by(is_active=True)
            .order_by(ReadyMadeCake.id)
            .all()
        )


def find_by_id(cake_id: int) -> ReadyMadeCake | None:
    """Return the cake only while it is active."""

    with store_errors("load cake"):
        return ReadyMadeCake.query.filter_by(id=cake_id, is_active=True).first()


def insert(fields: dict) -> ReadyMadeCake:
    cake = ReadyMadeCake(**fields)
    with store_errors("insert cake"):
        db.session.add(cake)
        db.session.commit()
    return cake


def update(cake_id: int, fields: dict) -> int:
    values = dict(fields)
    values["updated_at"] = utcnow()
    with store_errors("update cake"):
        count = ReadyMadeCake.query.filter_by(id=cake_id, is_active=True).update(
            values, synchronize_session=False
        )
        db.session.commit()
    return count


def deactivate(cake_id: int) -> int:
    with store_errors("deactivate cake"):
        count = ReadyMadeCake.query.filter_by(id=cake_id, is_active=True).update(
            {"is_active": False, "updated_at": utcnow()},
            synchronize_session=False,
        )
        db.session.commit()
    return count
