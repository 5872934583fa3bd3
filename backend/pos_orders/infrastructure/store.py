"""SQLAlchemy Store — run/get/all/insert primitives over the async session manager.

Invariants:
    - One AsyncSession per primitive call; mutating primitives commit before returning
    - Records are returned as RowMapping (read-only, keyed by column label)
    - Failures surface as StoreExecutionError raised by DatabaseSessionManager

Design Decisions:
    - insert() returns the RETURNING row read inside the same statement, so a
      generated key never needs a second lookup query
"""

from typing import Any

from pos_orders.core.domain_types import StoreOperation
from pos_orders.core.repository_protocols import Record
from pos_orders.infrastructure.database import DatabaseSessionManager


class SqlAlchemyStore:
    """OrderStore implementation backed by a DatabaseSessionManager."""

    def __init__(self, manager: DatabaseSessionManager) -> None:
        self._manager = manager

    async def run(self, statement: Any, params: dict | None = None) -> None:
        async with self._manager.session(StoreOperation.RUN.value) as db:
            await db.execute(statement, params)
            await db.commit()

    async def get(self, statement: Any, params: dict | None = None) -> Record | None:
        async with self._manager.session(StoreOperation.GET.value) as db:
            result = await db.execute(statement, params)
            return result.mappings().first()

    async def all(self, statement: Any, params: dict | None = None) -> list[Record]:
        async with self._manager.session(StoreOperation.ALL.value) as db:
            result = await db.execute(statement, params)
            return list(result.mappings().all())

    async def insert(self, statement: Any, params: dict | None = None) -> Record | None:
        async with self._manager.session(StoreOperation.INSERT.value) as db:
            result = await db.execute(statement, params)
            row = result.mappings().first()
            await db.commit()
            return row

    async def health_check(self) -> bool:
        return await self._manager.health_check()
