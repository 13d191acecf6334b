"""Custom cake design request blueprint."""

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, jsonify, request

from schemas.designs import DesignCreateRequest, DesignUpdateRequest
from services import designs as design_service
from utils.request_validation import parse_id, validate_payload

designs_bp = Blueprint("designs", __name__)

INVALID_DESIGN_ID = "Invalid design ID"


@designs_bp.route("", methods=["GET"])
def get_designs():
    return jsonify({"data": design_service.list_designs()})


@designs_bp.route("/user/<user_id>", methods=["GET"])
def designs_of_user(user_id: str):
    parsed_id = parse_id(user_id, "Invalid user ID")
    return jsonify({"data": design_service.designs_for_user(parsed_id)})


@designs_bp.route("/<design_id>", methods=["GET"])
def get_design(design_id: str):
    return jsonify(design_service.get_design(parse_id(design_id, INVALID_DESIGN_ID)))


@designs_bp.route("", methods=["POST"])
def submit_design():
    """Submit a bespoke cake request for review."""

    payload = validate_payload(
        request,
        DesignCreateRequest,
        missing_message="user_id and description are required.",
    )
    design = design_service.submit_design(payload)
    return (
        jsonify({"message": "Design request submitted successfully", "design": design}),
        HTTPStatus.CREATED,
    )


@designs_bp.route("/<design_id>", methods=["PUT"])
def update_design(design_id: str):
    parsed_id = parse_id(design_id, INVALID_DESIGN_ID)
    payload = validate_payload(request, DesignUpdateRequest)
    design_service.update_design(parsed_id, payload)
    return jsonify({"message": "Design updated successfully"})


@designs_bp.route("/<design_id>", methods=["DELETE"])
def delete_design(design_id: str):
    design_service.delete_design(parse_id(design_id, INVALID_DESIGN_ID))
    return jsonify({"message": "Design deleted successfully"})
