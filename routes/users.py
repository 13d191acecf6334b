"""User blueprint: registration, verification, login and account CRUD."""

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, jsonify, request

from schemas.users import (
    LoginRequest,
    RegisterRequest,
    ResendCodeRequest,
    UserUpdateRequest,
    VerifyRequest,
)
from services import users as user_service
from utils.auth import current_identity
from utils.request_validation import parse_id, validate_payload

users_bp = Blueprint("users", __name__)

INVALID_USER_ID = "Invalid user ID"


@users_bp.route("/register", methods=["POST"])
def register() -> tuple:
    """Register a new, unverified account."""

    payload = validate_payload(
        request,
        RegisterRequest,
        missing_message="Name, email and password are required.",
    )
    user = user_service.register(payload)
    return (
        jsonify({"message": "User created successfully", "user": user}),
        HTTPStatus.CREATED,
    )


@users_bp.route("/login", methods=["POST"])
def login() -> tuple:
    """Authenticate a user and return a signed token."""

    payload = validate_payload(
        request, LoginRequest, missing_message="Email and password are required."
    )
    result = user_service.login(payload)
    return jsonify({"message": "Login successful", **result}), HTTPStatus.OK


@users_bp.route("/verify", methods=["POST"])
def verify() -> tuple:
    """Confirm an account with its emailed code."""

    payload = validate_payload(
        request, VerifyRequest, missing_message="Email and code are required."
    )
    user = user_service.verify(payload)
    return (
        jsonify({"message": "Account verified successfully", "user": user}),
        HTTPStatus.OK,
    )


@users_bp.route("/resend-code", methods=["POST"])
def resend_code() -> tuple:
    payload = validate_payload(
        request, ResendCodeRequest, missing_message="Email is required."
    )
    user_service.resend_code(payload)
    return jsonify({"message": "Verification code sent"}), HTTPStatus.OK


@users_bp.route("", methods=["GET"])
def list_users():
    return jsonify({"data": user_service.list_users()})


@users_bp.route("/me", methods=["GET"])
def me():
    """Return the profile of the token holder."""

    identity = current_identity()
    return jsonify(user_service.get_user(identity["user_id"]))


@users_bp.route("/<user_id>", methods=["GET"])
def get_user(user_id: str):
    return jsonify(user_service.get_user(parse_id(user_id, INVALID_USER_ID)))


@users_bp.route("/<user_id>", methods=["PUT"])
def update_user(user_id: str):
    """Apply a partial update; omitted fields keep their values."""

    parsed_id = parse_id(user_id, INVALID_USER_ID)
    payload = validate_payload(request, UserUpdateRequest)
    user_service.update_user(parsed_id, payload)
    return jsonify({"message": "User updated successfully"})


@users_bp.route("/<user_id>", methods=["DELETE"])
def delete_user(user_id: str):
    user_service.delete_user(parse_id(user_id, INVALID_USER_ID))
    return jsonify({"message": "user deleted successfully"})
