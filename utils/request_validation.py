"""Utilities for validating incoming Flask requests."""

from __future__ import annotations

import re
from typing import TypeVar

from flask import Request
from pydantic import BaseModel, ValidationError
from werkzeug.exceptions import BadRequest

from errors import InvalidId, MissingFields, ValidationFailed

SchemaT = TypeVar("SchemaT", bound=BaseModel)

_POSITIVE_INT = re.compile(r"[0-9]+")

# Largest id a 32-bit INTEGER primary key can hold.
MAX_ID = 2**31 - 1

# Secrets are hashed exactly as sent; only a missing or empty value is absent.
VERBATIM_FIELDS = frozenset({"password"})


def parse_json_request(
    req: Request,
    *,
    allow_empty: bool = False,
) -> dict:
    """Return the parsed JSON body or raise a 400 error."""

    if not req.is_json:
        raise BadRequest("Request content type must be application/json.")

    data = req.get_json(silent=True)
    if data is None:
        raise BadRequest("Request JSON body is required.")

    if not isinstance(data, dict):
        raise BadRequest("Request JSON payload must be an object.")

    if not data and not allow_empty:
        raise BadRequest("Request JSON body must not be empty.")

    return data


def _drop_blank(data: dict) -> dict:
    """Treat ``null`` and whitespace-only strings as absent, trimming the rest.

    Keys in ``VERBATIM_FIELDS`` are never trimmed.
    """

    cleaned = {}
    for key, value in data.items():
        if value is None:
            continue
        if key in VERBATIM_FIELDS:
            if value == "":
                continue
        elif isinstance(value, str):
            value = value.strip()
            if not value:
                continue
        cleaned[key] = value
    return cleaned


def validate_payload(
    req: Request,
    schema: type[SchemaT],
    *,
    missing_message: str | None = None,
    allow_empty: bool = True,
) -> SchemaT:
    """Parse the JSON body of ``req`` into ``schema``.

    Absent required fields raise :class:`MissingFields` with
    ``missing_message``; wrong types, unknown keys and out-of-range values
    raise :class:`ValidationFailed`.
    """

    data = _drop_blank(parse_json_request(req, allow_empty=allow_empty))
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        errors = exc.errors()
        missing = [".".join(str(p) for p in err["loc"]) for err in errors if err["type"] == "missing"]
        if missing:
            raise MissingFields(
                missing_message
                or "Missing required fields: {}.".format(", ".join(sorted(missing)))
            ) from exc
        details = "; ".join(
            "{}: {}".format(".".join(str(p) for p in err["loc"]) or "body", err["msg"])
            for err in errors
        )
        raise ValidationFailed(details) from exc


def parse_id(raw: object, message: str = "Invalid ID") -> int:
    """Return ``raw`` as an id in ``1..MAX_ID`` or raise :class:`InvalidId`."""

    text = str(raw).strip() if raw is not None else ""
    if not _POSITIVE_INT.fullmatch(text):
        raise InvalidId(message)
    value = int(text)
    if value <= 0 or value > MAX_ID:
        raise InvalidId(message)
    return value
