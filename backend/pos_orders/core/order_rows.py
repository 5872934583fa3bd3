"""Order Row Shaping — pure functions turning joined records into read models.

Invariants:
    - Input records arrive in query order; output preserves that order
    - One OrderSummary per distinct order_id, no duplicates, no dropped lines
    - A detail row with a NULL item_name is the LEFT JOIN placeholder, not an item

Design Decisions:
    - Grouping happens here rather than in SQL (no group_concat): the same code
      serves SQLite and PostgreSQL and keeps quantities typed
"""

from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Any

from pos_orders.schemas.order import (
    OrderAnalytics, OrderDetail, OrderDetailItem, OrderLineItem, OrderSummary,
)

_HEADER_FIELDS = (
    "order_id", "user_id", "customer_id", "order_timestamp",
    "total_amount", "subtotal", "tax_amount",
    "customer_name", "phone_number", "email",
)


def _header(row: Mapping[str, Any]) -> dict:
    return {key: row.get(key) for key in _HEADER_FIELDS}


def build_order_summaries(rows: Iterable[Mapping[str, Any]]) -> list[OrderSummary]:
    """Group (order, customer, line item) rows into one summary per order."""
    summaries: dict[int, OrderSummary] = {}
    for row in rows:
        order_id = row["order_id"]
        summary = summaries.get(order_id)
        if summary is None:
            summary = OrderSummary(**_header(row))
            summaries[order_id] = summary
        summary.items.append(
            OrderLineItem(item_name=row["item_name"], quantity=row["quantity"]),
        )
    return list(summaries.values())


def build_order_detail(rows: list[Mapping[str, Any]]) -> OrderDetail | None:
    """Fold the rows of a single order into an OrderDetail.

    Header fields come from the first row. Returns None when there are no
    rows so the caller decides how a missing order is reported.
    """
    if not rows:
        return None
    items = [
        OrderDetailItem(
            item_name=row["item_name"],
            item_price=row.get("item_price"),
            quantity=row["quantity"],
        )
        for row in rows
        if row.get("item_name") is not None
    ]
    return OrderDetail(**_header(rows[0]), items=items)


def build_order_analytics(row: Mapping[str, Any] | None) -> OrderAnalytics:
    """Map the aggregate row to OrderAnalytics; NULL sums become zero."""
    if row is None:
        return OrderAnalytics()
    revenue = row.get("total_revenue")
    return OrderAnalytics(
        total_orders=row.get("total_orders") or 0,
        total_revenue=Decimal(str(revenue)) if revenue is not None else Decimal("0.00"),
        total_customers=row.get("total_customers") or 0,
        products_sold=row.get("products_sold") or 0,
    )


def totals_balance(
    total_amount: Decimal | None,
    subtotal: Decimal | None,
    tax_amount: Decimal | None,
) -> bool:
    """True when subtotal + tax equals total, or when any amount is absent."""
    if total_amount is None or subtotal is None or tax_amount is None:
        return True
    return Decimal(subtotal) + Decimal(tax_amount) == Decimal(total_amount)
