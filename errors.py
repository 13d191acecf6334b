"""Error taxonomy shared by the services and the HTTP layer."""

from __future__ import annotations

from http import HTTPStatus


class AppError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR
    code = "error"
    default_message = "An unexpected error occurred."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"message": self.message, "error": self.message, "code": self.code}


class MissingFields(AppError):
    status_code = HTTPStatus.BAD_REQUEST
    code = "missing_fields"
    default_message = "Required fields are missing."


class ValidationFailed(AppError):
    status_code = HTTPStatus.BAD_REQUEST
    code = "validation_failed"
    default_message = "Request payload is invalid."


class InvalidId(AppError):
    status_code = HTTPStatus.BAD_REQUEST
    code = "invalid_id"
    default_message = "Invalid ID."


class DuplicateEmail(AppError):
    # Surfaced as a server error; existing clients match on the 500.
    status_code = HTTPStatus.INTERNAL_SERVER_ERROR
    code = "duplicate_email"
    default_message = "Email already exists"


class UserNotFound(AppError):
    status_code = HTTPStatus.NOT_FOUND
    code = "user_not_found"
    default_message = "User not found"


class WrongPassword(AppError):
    status_code = HTTPStatus.UNAUTHORIZED
    code = "wrong_password"
    default_message = "Invalid password"


class CodeMismatch(AppError):
    status_code = HTTPStatus.NOT_FOUND
    code = "code_mismatch"
    default_message = "Invalid verification code"


class AlreadyVerified(AppError):
    status_code = HTTPStatus.BAD_REQUEST
    code = "already_verified"
    default_message = "Account is already verified"


class HashFormatError(AppError):
    status_code = HTTPStatus.INTERNAL_SERVER_ERROR
    code = "hash_format"
    default_message = "Stored password hash is malformed."


class InvalidToken(AppError):
    status_code = HTTPStatus.UNAUTHORIZED
    code = "invalid_token"
    default_message = "Invalid or expired token."


class Forbidden(AppError):
    status_code = HTTPStatus.FORBIDDEN
    code = "forbidden"
    default_message = "Admin privileges required."


class NotFound(AppError):
    status_code = HTTPStatus.NOT_FOUND
    code = "not_found"
    default_message = "Resource not found"


class InvalidState(AppError):
    status_code = HTTPStatus.BAD_REQUEST
    code = "invalid_state"
    default_message = "Operation not allowed in the current state."


class StoreError(AppError):
    """Unclassified failure reported by the database."""

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR
    code = "store_error"
    default_message = "A database error occurred."


class ConstraintViolation(StoreError):
    """The database rejected a statement because of a constraint."""

    code = "constraint_violation"
    default_message = "A database constraint was violated."
