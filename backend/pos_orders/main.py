"""POS Orders — startup/shutdown lifecycle for the order layer.

Invariants:
    - Logging configured and database initialized before the schema is ensured
    - ensure_schema failure aborts startup (no orders without the relation)
    - Engine disposed on exit, including when the body raises

Design Decisions:
    - Async context manager lifespan: the host process (desktop shell, worker,
      script) enters it once and receives the Orders facade
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from pos_orders.config import Settings, get_settings
from pos_orders.infrastructure.database import init_db
from pos_orders.infrastructure.observability import setup_logging
from pos_orders.infrastructure.store import SqlAlchemyStore
from pos_orders.services.orders import Orders

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(settings: Settings | None = None) -> AsyncIterator[Orders]:
    """Startup/shutdown lifecycle."""
    settings = settings or get_settings()
    handler = setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    try:
        orders = Orders(
            SqlAlchemyStore(manager), strict_totals=settings.strict_order_totals,
        )
        await orders.ensure_schema()
        logger.info("POS order layer started")
        yield orders
    finally:
        logger.info("POS order layer shutting down")
        await manager.dispose()
        logging.root.removeHandler(handler)
