"""Account lifecycle: registration, verification, login and profile edits.

Accounts start unverified with a stored code; verifying sets the flag and
consumes the code. Login only checks credentials.
"""

from __future__ import annotations

import logging
import secrets

from flask import current_app

from errors import (
    AlreadyVerified,
    CodeMismatch,
    ConstraintViolation,
    DuplicateEmail,
    UserNotFound,
    WrongPassword,
)
from models.user import serialize_public
from repositories import users as user_repository
from schemas.users import (
    LoginRequest,
    RegisterRequest,
    ResendCodeRequest,
    UserUpdateRequest,
    VerifyRequest,
)
from services import mailer
from utils.passwords import hash_password, verify_password
from utils.tokens import issue_token
from utils.verification_codes import issue_code

logger = logging.getLogger(__name__)


def _new_code() -> str:
    return issue_code(int(current_app.config.get("VERIFICATION_CODE_LENGTH", 6)))


def list_users() -> list[dict]:
    return [serialize_public(row) for row in user_repository.find_all()]


def get_user(user_id: int) -> dict:
    user = user_repository.find_by_id(user_id)
    if user is None:
        raise UserNotFound()
    return user.to_dict()


def register(payload: RegisterRequest) -> dict:
    """Create an unverified account and send its verification code."""

    code = _new_code()
    fields = payload.model_dump()
    fields["password"] = hash_password(payload.password)
    fields["is_verified"] = False
    fields["verification_code"] = code

    try:
        user_id = user_repository.insert(fields)
    except ConstraintViolation as exc:
        logger.info("Registration rejected, email already in use: %s", payload.email)
        raise DuplicateEmail() from exc

    logger.info("Registered user %s", user_id)
    mailer.send_verification_code(payload.email, code)
    return get_user(user_id)


def login(payload: LoginRequest) -> dict:
    """Check credentials and return ``{"token", "user"}``."""

    user = user_repository.find_by_email(payload.email)
    if user is None:
        raise UserNotFound()

    if not verify_password(payload.password, user.password):
        logger.warning("Failed login for user %s", user.id)
        raise WrongPassword()

    # TODO: decide whether unverified accounts should be refused here.
    token = issue_token(user.id, user.role)
    return {"token": token, "user": user.to_dict()}


def verify(payload: VerifyRequest) -> dict:
    """Confirm an account with the code it was sent."""

    user = user_repository.find_by_email(payload.email)
    if user is None:
        raise UserNotFound()

    stored_code = user.verification_code
    if stored_code is None or not secrets.compare_digest(
        stored_code.encode(), payload.code.encode()
    ):
        raise CodeMismatch()

    if not user_repository.set_verified(user.id):
        raise UserNotFound()

    logger.info("User %s verified", user.id)
    return get_user(user.id)


def resend_code(payload: ResendCodeRequest) -> None:
    user = user_repository.find_by_email(payload.email)
    if user is None:
        raise UserNotFound()
    if user.is_verified:
        raise AlreadyVerified()

    code = _new_code()
    if not user_repository.set_verification_code(user.id, code):
        raise UserNotFound()
    mailer.send_verification_code(user.email, code)


def update_user(user_id: int, payload: UserUpdateRequest) -> None:
    """Merge the provided fields into the account."""

    fields = payload.fields_set()
    if "password" in fields:
        fields["password"] = hash_password(fields["password"])

    try:
        affected = user_repository.update(user_id, fields)
    except ConstraintViolation as exc:
        raise DuplicateEmail() from exc

    if not affected:
        raise UserNotFound()
    logger.info("Updated user %s fields=%s", user_id, sorted(fields))


def delete_user(user_id: int) -> None:
    if not user_repository.delete(user_id):
        raise UserNotFound()
    logger.info("Deleted user %s", user_id)
