"""Database initialization and model exports."""

from datetime import datetime, timezone

from flask_sqlalchemy import SQLAlchemy


db = SQLAlchemy()


def utcnow() -> datetime:
    """Current UTC time as a naive datetime, matching the DateTime columns."""

    return datetime.now(timezone.utc).replace(tzinfo=None)


# Import models to register them with SQLAlchemy metadata.
from .user import User  # noqa: E402,F401
from .cake import ReadyMadeCake  # noqa: E402,F401
from .design import CakeDesign  # noqa: E402,F401
from .order import Order  # noqa: E402,F401
from .delivery import Delivery  # noqa: E402,F401

__all__ = [
    "db",
    "User",
    "ReadyMadeCake",
    "CakeDesign",
    "Order",
    "Delivery",
]
