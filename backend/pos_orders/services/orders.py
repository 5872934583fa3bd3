"""Orders — the contract exposed to the presentation layer.

Thin facade over SchemaManager, OrderWriter and OrderReader sharing one store.
"""

from datetime import datetime
from decimal import Decimal

from pos_orders.core.domain_types import CustomerId, OrderId, UserId
from pos_orders.core.repository_protocols import OrderStore
from pos_orders.schemas.order import OrderAnalytics, OrderDetail, OrderSummary
from pos_orders.services.order_reader import OrderReader
from pos_orders.services.order_writer import OrderWriter
from pos_orders.services.schema_manager import SchemaManager


class Orders:

    def __init__(self, store: OrderStore, strict_totals: bool = False) -> None:
        self._store = store
        self._schema = SchemaManager(store)
        self._writer = OrderWriter(store, strict_totals=strict_totals)
        self._reader = OrderReader(store)

    async def ensure_schema(self) -> None:
        await self._schema.ensure_schema()

    async def create_order(
        self,
        user_id: UserId,
        customer_id: CustomerId,
        order_timestamp: datetime,
        total_amount: Decimal | None,
        subtotal: Decimal | None,
        tax_amount: Decimal | None,
    ) -> OrderId:
        return await self._writer.create_order(
            user_id, customer_id, order_timestamp,
            total_amount, subtotal, tax_amount,
        )

    async def list_all_orders(self) -> list[OrderSummary]:
        return await self._reader.list_all_orders()

    async def get_order(self, order_id: OrderId) -> OrderDetail:
        return await self._reader.get_order(order_id)

    async def get_analytics(self) -> OrderAnalytics:
        return await self._reader.get_analytics()

    async def health_check(self) -> bool:
        return await self._store.health_check()
