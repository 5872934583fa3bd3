"""Order Writer — inserts a new order and returns its store-assigned identity.

Invariants:
    - The identity comes from the INSERT itself (RETURNING), never from a
      follow-up lookup by (user, customer, timestamp): two orders with equal
      fields still get their own ids
    - No identity returned -> OrderNotPersistedError, never None
    - Store errors are logged with context and re-raised unchanged
    - References and amount typing are enforced by the store, not here
"""

import logging
from datetime import datetime
from decimal import Decimal

from sqlalchemy import insert

from pos_orders.core.domain_types import CustomerId, OrderId, UserId
from pos_orders.core.errors import (
    ErrorContext, OrderNotPersistedError, OrderValidationError, StoreExecutionError,
)
from pos_orders.core.order_rows import totals_balance
from pos_orders.core.repository_protocols import OrderStore
from pos_orders.models.order import Order

logger = logging.getLogger(__name__)

_orders = Order.__table__


class OrderWriter:

    def __init__(self, store: OrderStore, strict_totals: bool = False) -> None:
        self._store = store
        self._strict_totals = strict_totals

    async def create_order(
        self,
        user_id: UserId,
        customer_id: CustomerId,
        order_timestamp: datetime,
        total_amount: Decimal | None,
        subtotal: Decimal | None,
        tax_amount: Decimal | None,
    ) -> OrderId:
        """Insert an order row and return the identity the store assigned."""
        log_extra = {
            "operation": "create_order",
            "user_id": user_id,
            "customer_id": customer_id,
        }
        if self._strict_totals and not totals_balance(
            total_amount, subtotal, tax_amount,
        ):
            raise OrderValidationError(
                f"subtotal {subtotal} + tax {tax_amount} != total {total_amount}",
                "total_amount",
                ErrorContext(operation="create_order"),
            )

        statement = (
            insert(_orders)
            .values(
                user_id=user_id,
                customer_id=customer_id,
                order_timestamp=order_timestamp,
                total_amount=total_amount,
                subtotal=subtotal,
                tax_amount=tax_amount,
            )
            .returning(_orders.c.order_id)
        )
        try:
            row = await self._store.insert(statement)
        except StoreExecutionError as e:
            logger.error(
                f"Error creating order: {e}",
                extra={**log_extra, "error_code": e.code},
            )
            raise

        if row is None or row.get("order_id") is None:
            error = OrderNotPersistedError(ErrorContext(operation="create_order"))
            logger.error(error.message, extra={**log_extra, "error_code": error.code})
            raise error

        order_id = OrderId(row["order_id"])
        logger.info("Order created", extra={**log_extra, "order_id": order_id})
        return order_id
