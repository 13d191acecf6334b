"""Custom design request bodies."""

from decimal import Decimal
from typing import Literal, Optional

from pydantic import Field

from utils.request_validation import MAX_ID

from . import Payload

DesignStatus = Literal["pending", "approved", "rejected", "completed"]


class DesignCreateRequest(Payload):
    user_id: int = Field(..., gt=0, le=MAX_ID)
    description: str
    flavor: Optional[str] = Field(None, max_length=120)
    size: Optional[str] = Field(None, max_length=50)
    tiers: int = Field(1, ge=1)
    theme: Optional[str] = Field(None, max_length=120)
    image_url: Optional[str] = Field(None, max_length=512)
    budget: Optional[Decimal] = Field(None, ge=0)


class DesignUpdateRequest(Payload):
    description: Optional[str] = None
    flavor: Optional[str] = Field(None, max_length=120)
    size: Optional[str] = Field(None, max_length=50)
    tiers: Optional[int] = Field(None, ge=1)
    theme: Optional[str] = Field(None, max_length=120)
    image_url: Optional[str] = Field(None, max_length=512)
    budget: Optional[Decimal] = Field(None, ge=0)
    status: Optional[DesignStatus] = None
