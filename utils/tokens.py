"""Session token issuing and verification via Flask-JWT-Extended."""

from __future__ import annotations

from flask_jwt_extended import create_access_token, decode_token
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError

from errors import InvalidToken


def issue_token(user_id: int, role: str) -> str:
    """Return a signed access token carrying the user id and role."""

    return create_access_token(identity=str(user_id), additional_claims={"role": role})


def verify_token(token: str | None) -> dict:
    """Decode ``token`` and return ``{"user_id", "role"}``.

    Raises :class:`InvalidToken` on a bad signature, expiry or malformed input.
    """

    if not token:
        raise InvalidToken("Authorization token is required.")

    try:
        claims = decode_token(token)
    except (PyJWTError, JWTExtendedException) as exc:
        raise InvalidToken() from exc

    try:
        user_id = int(claims["sub"])
    except (KeyError, TypeError, ValueError) as exc:
        raise InvalidToken() from exc

    return {"user_id": user_id, "role": claims.get("role")}


def bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer ...`` header value."""

    if not authorization:
        return None
    scheme, _, value = authorization.partition(" ")
    if scheme.lower() != "bearer" or not value.strip():
        return None
    return value.strip()
