"""Order Reader — denormalized listing, single-order detail, dashboard totals.

Invariants:
    - list_all_orders: INNER joins to customers and order_items, so orders with
      no resolvable customer or no line items are excluded; newest order first
    - get_order: INNER join to customers, LEFT joins to order_items and
      menu_items, so an order with no lines still returns its header and an
      unknown item name returns item_price=None
    - get_order on a missing id raises OrderNotFoundError, never an empty object
    - Read-only: no statement here mutates the store
    - Store errors are logged with context and re-raised unchanged
    - Stored rows that fail read-model validation are logged and raised as
      MalformedOrderDataError, chained to the pydantic ValidationError
"""

import logging
from typing import Any, Callable

from pydantic import ValidationError
from sqlalchemy import distinct, func, select

from pos_orders.core.domain_types import OrderId
from pos_orders.core.errors import (
    ErrorContext, MalformedOrderDataError, OrderNotFoundError, StoreExecutionError,
)
from pos_orders.core.order_rows import (
    build_order_analytics, build_order_detail, build_order_summaries,
)
from pos_orders.core.repository_protocols import OrderStore
from pos_orders.models.customer import Customer
from pos_orders.models.menu_item import MenuItem
from pos_orders.models.order import Order
from pos_orders.models.order_item import OrderItem
from pos_orders.schemas.order import OrderAnalytics, OrderDetail, OrderSummary

logger = logging.getLogger(__name__)

_HEADER_COLUMNS = (
    Order.order_id,
    Order.user_id,
    Order.customer_id,
    Order.order_timestamp,
    Order.total_amount,
    Order.subtotal,
    Order.tax_amount,
    Customer.customer_name,
    Customer.phone_number,
    Customer.email,
)


def _list_orders_query():
    return (
        select(*_HEADER_COLUMNS, OrderItem.item_name, OrderItem.quantity)
        .join(Customer, Order.customer_id == Customer.customer_id)
        .join(OrderItem, OrderItem.order_id == Order.order_id)
        .order_by(Order.order_id.desc(), OrderItem.order_item_id)
    )


def _order_detail_query(order_id: int):
    return (
        select(
            *_HEADER_COLUMNS,
            OrderItem.item_name,
            OrderItem.quantity,
            MenuItem.price.label("item_price"),
        )
        .join(Customer, Order.customer_id == Customer.customer_id)
        .outerjoin(OrderItem, OrderItem.order_id == Order.order_id)
        .outerjoin(MenuItem, OrderItem.item_name == MenuItem.item_name)
        .where(Order.order_id == order_id)
        .order_by(OrderItem.order_item_id)
    )


def _analytics_query():
    return select(
        select(func.count(Order.order_id)).scalar_subquery().label("total_orders"),
        select(func.sum(Order.total_amount)).scalar_subquery().label("total_revenue"),
        select(func.count(distinct(Order.customer_id)))
        .scalar_subquery().label("total_customers"),
        select(func.sum(OrderItem.quantity)).scalar_subquery().label("products_sold"),
    )


def _shape(
    build: Callable[[Any], Any], rows: Any, operation: str,
    order_id: int | None = None,
) -> Any:
    try:
        return build(rows)
    except ValidationError as e:
        logger.error(
            f"Malformed order data: {e.error_count()} invalid field(s)",
            extra={
                "operation": operation,
                "order_id": order_id,
                "error_code": "MALFORMED_ORDER_DATA",
            },
        )
        raise MalformedOrderDataError(
            str(e), order_id, ErrorContext(operation=operation),
        ) from e


class OrderReader:

    def __init__(self, store: OrderStore) -> None:
        self._store = store

    async def list_all_orders(self) -> list[OrderSummary]:
        """Every order with at least one line item, newest first."""
        try:
            rows = await self._store.all(_list_orders_query())
        except StoreExecutionError as e:
            logger.error(
                f"Error fetching orders: {e}",
                extra={"operation": "list_all_orders", "error_code": e.code},
            )
            raise
        return _shape(build_order_summaries, rows, "list_all_orders")

    async def get_order(self, order_id: OrderId) -> OrderDetail:
        """One order with customer contact and priced line items."""
        try:
            rows = await self._store.all(_order_detail_query(order_id))
        except StoreExecutionError as e:
            logger.error(
                f"Error fetching order details: {e}",
                extra={
                    "operation": "get_order",
                    "order_id": order_id,
                    "error_code": e.code,
                },
            )
            raise

        detail = _shape(build_order_detail, rows, "get_order", order_id)
        if detail is None:
            error = OrderNotFoundError(order_id, ErrorContext(operation="get_order"))
            logger.warning(
                error.message,
                extra={"operation": "get_order", "order_id": order_id},
            )
            raise error
        return detail

    async def get_analytics(self) -> OrderAnalytics:
        """Dashboard totals: orders, revenue, distinct customers, units sold."""
        try:
            row = await self._store.get(_analytics_query())
        except StoreExecutionError as e:
            logger.error(
                f"Error fetching analytics: {e}",
                extra={"operation": "get_analytics", "error_code": e.code},
            )
            raise
        return _shape(build_order_analytics, row, "get_analytics")
