"""Account verification code generation."""

from __future__ import annotations

import secrets

DEFAULT_CODE_LENGTH = 6


def issue_code(length: int = DEFAULT_CODE_LENGTH) -> str:
    """Return a random numeric code of ``length`` digits, leading zeros kept."""

    if length < 1:
        raise ValueError("Verification code length must be positive.")
    return "".join(secrets.choice("0123456789") for _ in range(length))
