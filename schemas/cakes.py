"""Catalog request bodies. Keys follow the catalog's camelCase wire names."""

from typing import Optional

from pydantic import Field

from . import Payload


class CakeCreateRequest(Payload):
    cakeName: str = Field(..., max_length=150)
    flavorsUsed: Optional[str] = Field(None, max_length=255)
    size: Optional[str] = Field(None, max_length=50)
    imageURL: Optional[str] = Field(None, max_length=512)
    quantityAvailable: int = Field(1, ge=0)


class CakeUpdateRequest(Payload):
    cakeName: Optional[str] = Field(None, max_length=150)
    flavorsUsed: Optional[str] = Field(None, max_length=255)
    size: Optional[str] = Field(None, max_length=50)
    imageURL: Optional[str] = Field(None, max_length=512)
    quantityAvailable: Optional[int] = Field(None, ge=0)


# Wire name -> model attribute
CAKE_FIELD_MAP = {
    "cakeName": "cake_name",
    "flavorsUsed": "flavors_used",
    "size": "size",
    "imageURL": "image_url",
    "quantityAvailable": "quantity_available",
}


def to_columns(fields: dict) -> dict:
    return {CAKE_FIELD_MAP[key]: value for key, value in fields.items()}
