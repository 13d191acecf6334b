"""User persistence."""

from __future__ import annotations

from models import db, utcnow
from models.user import User

from . import store_errors


def find_all() -> list[dict]:
    """Return every user as a mapping of public columns (no password)."""

    with store_errors("list users"):
        rows = db.session.execute(
            db.select(*User.public_columns()).order_by(User.id)
        ).all()
    return [row._asdict() for row in rows]


def find_by_id(user_id: int) -> User | None:
    with store_errors("load user"):
        return db.session.get(User, user_id)


def find_by_email(email: str) -> User | None:
    with store_errors("load user by email"):
        return User.query.filter_by(email=email).first()


def insert(fields: dict) -> int:
    """Insert a user row and return its new id.

    A duplicate email surfaces as :class:`errors.ConstraintViolation`.
    """

    user = User(**fields)
    with store_errors("insert user"):
        db.session.add(user)
        db.session.commit()
    return user.id


def update(user_id: int, fields: dict) -> int:
    """Merge ``fields`` into the user row; return the affected row count."""

    values = dict(fields)
    values["updated_at"] = utcnow()
    with store_errors("update user"):
        count = User.query.filter_by(id=user_id).update(values, synchronize_session=False)
        db.session.commit()
    return count


def delete(user_id: int) -> int:
    with store_errors("delete user"):
        count = User.query.filter_by(id=user_id).delete(synchronize_session=False)
        db.session.commit()
    return count


def set_verification_code(user_id: int, code: str) -> int:
    with store_errors("store verification code"):
        count = User.query.filter_by(id=user_id).update(
            {"verification_code": code, "updated_at": utcnow()},
            synchronize_session=False,
        )
        db.session.commit()
    return count


def set_verified(user_id: int) -> int:
    """Mark the account verified and consume its code in one statement."""

    with store_errors("verify user"):
        count = User.query.filter_by(id=user_id).update(
            {
                "is_verified": True,
                "verification_code": None,
                "updated_at": utcnow(),
            },
            synchronize_session=False,
        )
        db.session.commit()
    return count


def clear_verification_code(user_id: int) -> int:
    with store_errors("clear verification code"):
        count = User.query.filter_by(id=user_id).update(
            {"verification_code": None, "updated_at": utcnow()},
            synchronize_session=False,
        )
        db.session.commit()
    return count
