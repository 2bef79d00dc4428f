"""Pydantic schemas for sales and the sales history report."""
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from bakery.schemas.order import Order


# ============================================================================
# Sale Schemas
# ============================================================================


class SaleItemDraft(BaseModel):
    """A line of the sale form as entered.

    Lines are not validated here: incomplete lines are dropped when the sale
    is recorded.
    """

    recipe_id: str = ""
    quantity: int = 1
    unit_sale_price: Decimal = Decimal("0")


class SaleDraft(BaseModel):
    """The sale form: a customer and its lines."""

    customer_name: str = ""
    items: list[SaleItemDraft] = Field(default_factory=lambda: [SaleItemDraft()])


class SaleItem(BaseModel):
    """An accepted sale line."""

    recipe_id: str
    quantity: int = Field(..., gt=0)
    unit_sale_price: Decimal = Field(..., gt=0)


class Sale(BaseModel):
    """A recorded sale. Never edited, only deleted."""

    id: str
    customer_name: str
    timestamp: datetime
    items: list[SaleItem]
    total: Decimal


class SaleList(BaseModel):
    """Schema for list of sales."""

    sales: list[Sale]
    count: int


class SaleQuote(BaseModel):
    """Running total of a draft sale."""

    total: Decimal
    item_count: int


class SaleRecorded(BaseModel):
    """Result of recording a sale: the sale, its orders and a fresh form."""

    sale: Sale
    orders: list[Order]
    next_draft: SaleDraft


# ============================================================================
# History Schemas
# ============================================================================


class SaleHistoryLine(BaseModel):
    """A sale line with its recipe name resolved."""

    recipe_id: str
    recipe_name: str
    quantity: int
    unit_sale_price: Decimal
    recipe_found: bool = True


class SaleHistoryEntry(BaseModel):
    """A sale as listed in the history view."""

    id: str
    customer_name: str
    timestamp: datetime
    total: Decimal
    lines: list[SaleHistoryLine] = []


class SalesReport(BaseModel):
    """Filtered sales with count and revenue."""

    customer: Optional[str] = None
    date: Optional[str] = None
    total_sales: int = 0
    total_revenue: Decimal = Decimal("0")
    sales: list[SaleHistoryEntry] = []
