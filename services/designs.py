"""Custom cake design requests."""

from __future__ import annotations

import logging

from errors import NotFound, UserNotFound
from repositories import designs as design_repository
from repositories import users as user_repository
from schemas.designs import DesignCreateRequest, DesignUpdateRequest

logger = logging.getLogger(__name__)


class DesignNotFound(NotFound):
    default_message = "Design not found"


def list_designs() -> list[dict]:
    return [design.to_dict() for design in design_repository.find_all()]


def designs_for_user(user_id: int) -> list[dict]:
    return [design.to_dict() for design in design_repository.find_by_user(user_id)]


def get_design(design_id: int) -> dict:
    design = design_repository.find_by_id(design_id)
    if design is None:
        raise DesignNotFound()
    return design.to_dict()


def submit_design(payload: DesignCreateRequest) -> dict:
    fields = payload.model_dump()
    if user_repository.find_by_id(fields["user_id"]) is None:
        raise UserNotFound()

    design = design_repository.insert(fields)
    logger.info("Design request %s submitted by user %s", design.id, design.user_id)
    return design.to_dict()


def update_design(design_id: int, payload: DesignUpdateRequest) -> None:
    if not design_repository.update(design_id, payload.fields_set()):
        raise DesignNotFound()


def delete_design(design_id: int) -> None:
    if not design_repository.delete(design_id):
        raise DesignNotFound()
