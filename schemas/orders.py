"""Order request bodies."""

from datetime import date
from decimal import Decimal
from typing import Literal, Optional

from pydantic import Field, model_validator

from utils.request_validation import MAX_ID

from . import Payload

OrderStatus = Literal[
    "pending",
    "confirmed",
    "baking",
    "ready",
    "dispatched",
    "delivered",
    "cancelled",
]


class OrderCreateRequest(Payload):
    user_id: int = Field(..., gt=0, le=MAX_ID)
    cake_id: Optional[int] = Field(None, gt=0, le=MAX_ID)
    design_id: Optional[int] = Field(None, gt=0, le=MAX_ID)
    quantity: int = Field(1, ge=1)
    total_price: Optional[Decimal] = Field(None, ge=0)
    delivery_date: Optional[date] = None
    notes: Optional[str] = None

    @model_validator(mode="after")
    def _requires_item(self):
        if self.cake_id is None and self.design_id is None:
            raise ValueError("An order needs a cake_id or a design_id.")
        return self


class OrderStatusRequest(Payload):
    status: OrderStatus


class OrderDetailsRequest(Payload):
    cake_id: Optional[int] = Field(None, gt=0, le=MAX_ID)
    design_id: Optional[int] = Field(None, gt=0, le=MAX_ID)
    quantity: Optional[int] = Field(None, ge=1)
    total_price: Optional[Decimal] = Field(None, ge=0)
    delivery_date: Optional[date] = None
    notes: Optional[str] = None
