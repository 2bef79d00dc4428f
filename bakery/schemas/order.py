"""Pydantic schemas for fulfillment orders."""
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, computed_field


class OrderStatus(str, Enum):
    """Fulfillment status. Any value may be set at any time."""

    PLACED = "Placed"
    IN_PROGRESS = "InProgress"
    READY = "Ready"
    DELIVERED = "Delivered"


class OrderBase(BaseModel):
    """Base order fields."""

    customer: str = Field(..., min_length=1, max_length=100)
    product: str = Field(..., min_length=1, max_length=100)
    quantity: int = Field(..., gt=0)
    unit_price: Decimal = Field(..., ge=0)
    comments: str = ""
    address: str = ""
    status: OrderStatus = OrderStatus.PLACED
    paid: bool = False


class OrderCreate(OrderBase):
    """Schema for an ad-hoc order not derived from a sale."""

    pass


class OrderUpdate(BaseModel):
    """Schema for editing an order. All fields optional."""

    status: Optional[OrderStatus] = None
    paid: Optional[bool] = None
    comments: Optional[str] = None
    address: Optional[str] = None


class Order(OrderBase):
    """A stored order."""

    id: str
    timestamp: datetime

    @computed_field
    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity


class OrderList(BaseModel):
    """Schema for list of orders."""

    orders: list[Order]
    count: int
