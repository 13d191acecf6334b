"""Ready-made cake catalog rules."""

from __future__ import annotations

import logging

from errors import InvalidState, NotFound
from repositories import cakes as cake_repository
from schemas.cakes import CakeCreateRequest, CakeUpdateRequest, to_columns

logger = logging.getLogger(__name__)


class CakeNotFound(NotFound):
    default_message = "Cake not found"


class CakeUpdateFailed(InvalidState):
    """Updates to unknown cakes answer 400 rather than 404."""

    default_message = "Cake not found"


def list_cakes() -> list[dict]:
    return [cake.to_dict() for cake in cake_repository.find_active()]


def get_cake(cake_id: int) -> dict:
    cake = cake_repository.find_by_id(cake_id)
    if cake is None:
        raise CakeNotFound()
    return cake.to_dict()


def add_cake(payload: CakeCreateRequest) -> dict:
    cake = cake_repository.insert(to_columns(payload.model_dump()))
    logger.info("Added cake %s", cake.id)
    return cake.to_dict()


def update_cake(cake_id: int, payload: CakeUpdateRequest) -> None:
    if not cake_repository.update(cake_id, to_columns(payload.fields_set())):
        raise CakeUpdateFailed()


def delete_cake(cake_id: int) -> None:
    if not cake_repository.deactivate(cake_id):
        raise CakeNotFound()
    logger.info("Deactivated cake %s", cake_id)
