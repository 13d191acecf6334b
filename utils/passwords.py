"""Password hashing helpers built on werkzeug.security."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from errors import HashFormatError


def hash_password(plaintext: str) -> str:
    """Return a freshly salted hash for ``plaintext``."""

    if not plaintext:
        raise ValueError("Password must be a non-empty string.")
    return generate_password_hash(plaintext)


def verify_password(plaintext: str, stored_hash: str | None) -> bool:
    """Return True when ``plaintext`` produced ``stored_hash``.

    A mismatch is a plain ``False``; only a hash that is not in werkzeug's
    ``method$salt$hash`` form raises :class:`HashFormatError`.
    """

    if not isinstance(stored_hash, str) or stored_hash.count("$") < 2:
        raise HashFormatError()

    method, salt, _digest = stored_hash.split("$", 2)
    if not method or not salt:
        raise HashFormatError()

    try:
        return check_password_hash(stored_hash, plaintext or "")
    except (ValueError, TypeError) as exc:
        raise HashFormatError() from exc
