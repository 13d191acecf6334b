"""Data access functions. Each one issues a single statement."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from errors import ConstraintViolation, StoreError
from models import db

logger = logging.getLogger(__name__)


@contextmanager
def store_errors(action: str) -> Iterator[None]:
    """Roll back and re-raise database failures as :class:`StoreError`."""

    try:
        yield
    except IntegrityError as exc:
        db.session.rollback()
        logger.warning("Constraint violation while trying to %s: %s", action, exc.orig)
        raise ConstraintViolation() from exc
    except SQLAlchemyError as exc:
        db.session.rollback()
        logger.error("Database error while trying to %s", action, exc_info=exc)
        raise StoreError() from exc
