"""Delivery request bodies."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from utils.request_validation import MAX_ID

from . import Payload

DeliveryStatus = Literal["scheduled", "in_transit", "delivered", "failed"]


class DeliveryCreateRequest(Payload):
    order_id: int = Field(..., gt=0, le=MAX_ID)
    delivery_date: datetime
    delivery_address: str = Field(..., max_length=255)
    status: DeliveryStatus = "scheduled"
    courier: Optional[str] = Field(None, max_length=120)
    notes: Optional[str] = None


class DeliveryUpdateRequest(Payload):
    delivery_date: Optional[datetime] = None
    delivery_address: Optional[str] = Field(None, max_length=255)
    status: Optional[DeliveryStatus] = None
    courier: Optional[str] = Field(None, max_length=120)
    notes: Optional[str] = None
