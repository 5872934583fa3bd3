"""Order Schemas — Pydantic read models handed to the presentation layer.

Invariants:
    - OrderSummary.items preserves line-item order (one entry per persisted line)
    - OrderDetail.items is empty (never None) when the order has no line items
    - item_price is None when the item name has no catalog match

Design Decisions:
    - Nested line-item lists instead of delimited text aggregates: keeps quantity
      typed and removes positional alignment between two strings
    - Separate from models: schemas are read contracts, models are persistence
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field


class OrderLineItem(BaseModel):
    """One product line of an order listing."""
    item_name: str
    quantity: int = Field(gt=0)


class OrderDetailItem(BaseModel):
    """One product line of an order detail, with its catalog price."""
    item_name: str
    item_price: Decimal | None = None
    quantity: int = Field(gt=0)


class OrderSummary(BaseModel):
    """Listing row — order header, customer, and its line items."""
    order_id: int
    user_id: int
    customer_id: int
    customer_name: str | None = None
    phone_number: str | None = None
    email: str | None = None
    order_timestamp: datetime
    total_amount: Decimal | None = None
    subtotal: Decimal | None = None
    tax_amount: Decimal | None = None
    items: list[OrderLineItem] = Field(default_factory=list)


class OrderDetail(BaseModel):
    """Single-order view — header, customer contact, and priced line items."""
    order_id: int
    user_id: int
    customer_id: int
    order_timestamp: datetime
    customer_name: str | None = None
    email: str | None = None
    phone_number: str | None = None
    total_amount: Decimal | None = None
    subtotal: Decimal | None = None
    tax_amount: Decimal | None = None
    items: list[OrderDetailItem] = Field(default_factory=list)


class OrderAnalytics(BaseModel):
    """Dashboard totals across every persisted order."""
    total_orders: int = 0
    total_revenue: Decimal = Decimal("0.00")
    total_customers: int = 0
    products_sold: int = 0
