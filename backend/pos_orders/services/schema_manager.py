"""Schema Manager — idempotently establishes the orders relation.

Invariants:
    - CREATE TABLE IF NOT EXISTS: running twice is a no-op, never a duplicate
    - Only orders is created here; users/customers belong to sibling modules
    - Failure is logged and re-raised (fatal to startup)
"""

import logging

from sqlalchemy.schema import CreateTable

import pos_orders.models  # noqa: F401  (registers users/customers for FK DDL)
from pos_orders.core.errors import StoreExecutionError
from pos_orders.core.repository_protocols import OrderStore
from pos_orders.models.order import Order

logger = logging.getLogger(__name__)


class SchemaManager:

    def __init__(self, store: OrderStore) -> None:
        self._store = store

    async def ensure_schema(self) -> None:
        statement = CreateTable(Order.__table__, if_not_exists=True)
        try:
            await self._store.run(statement)
        except StoreExecutionError as e:
            logger.error(
                f"Error creating orders table: {e}",
                extra={"operation": "ensure_schema", "error_code": e.code},
            )
            raise
        logger.info("Orders schema ensured", extra={"operation": "ensure_schema"})
