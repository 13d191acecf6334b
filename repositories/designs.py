"""Custom design persistence."""

from __future__ import annotations

from models import db, utcnow
from models.design import CakeDesign

from . import store_errors


def find_all() -> list[CakeDesign]:
    with store_errors("list designs"):
        return CakeDesign.query.order_by(CakeDesign.created_at.desc(), CakeDesign.id.desc()).all()


def find_by_id(design_id: int) -> CakeDesign | None:
    with store_errors("load design"):
        return db.session.get(CakeDesign, design_id)


def find_by_user(user_id: int) -> list[CakeDesign]:
    with store_errors("list user designs"):
        return (
            CakeDesign.query.filter_by(user_id=user_id)
            .order_by(CakeDesign.created_at.desc(), CakeDesign.id.desc())
            .all()
        )


def insert(fields: dict) -> CakeDesign:
    design = CakeDesign(**fields)
    with store_errors("insert design"):
        db.session.add(design)
        db.session.commit()
    return design


def update(design_id: int, fields: dict) -> int:
    values = dict(fields)
    values["updated_at"] = utcnow()
    with store_errors("update design"):
        count = CakeDesign.query.filter_by(id=design_id).update(
            values, synchronize_session=False
        )
        db.session.commit()
    return count


def delete(design_id: int) -> int:
    with store_errors("delete design"):
        count = CakeDesign.query.filter_by(id=design_id).delete(
            synchronize_session=False
        )
        db.session.commit()
    return count
