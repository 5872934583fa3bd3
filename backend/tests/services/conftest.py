"""Service test fixtures — async in-memory DB, store, and seeded reference data.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys on
    - Sibling tables (users, customers, menu_items, order_items) created from
      metadata; orders created by SchemaManager like at startup
    - Seed data: user 1, customers 1 and 2, menu items Burger and Fries

Design Decisions:
    - Engine built with pos_orders.db.session.create_engine so the
      foreign_keys pragma matches production
"""

from decimal import Decimal

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from pos_orders.db.base import Base
from pos_orders.db.session import create_engine
from pos_orders.infrastructure.database import DatabaseSessionManager
from pos_orders.infrastructure.store import SqlAlchemyStore
from pos_orders.models import Customer, MenuItem, OrderItem, User
from pos_orders.services.orders import Orders

SIBLING_TABLES = [
    User.__table__, Customer.__table__, MenuItem.__table__,
]


@pytest.fixture
async def test_engine():
    engine = create_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all, tables=SIBLING_TABLES)
    yield engine
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def manager(test_engine):
    return DatabaseSessionManager.for_engine(test_engine)


@pytest.fixture
def store(manager):
    return SqlAlchemyStore(manager)


@pytest.fixture
async def orders(store, test_engine):
    """Orders facade with the orders and order_items tables in place."""
    facade = Orders(store)
    await facade.ensure_schema()
    async with test_engine.begin() as conn:
        await conn.run_sync(
            Base.metadata.create_all, tables=[OrderItem.__table__],
        )
    return facade


@pytest.fixture
async def seed_catalog(test_db):
    """Insert the reference rows orders point at."""
    test_db.add_all([
        User(user_id=1, username="cashier"),
        Customer(
            customer_id=1, customer_name="Asha Rao",
            phone_number="555-0100", email="asha@example.com",
        ),
        Customer(
            customer_id=2, customer_name="Ben Ortiz",
            phone_number="555-0199", email="ben@example.com",
        ),
        MenuItem(item_name="Burger", price=Decimal("5.50")),
        MenuItem(item_name="Fries", price=Decimal("2.25")),
    ])
    await test_db.commit()


@pytest.fixture
def add_line(test_db):
    """Persist a line item the way the sibling order-items module would."""
    async def _add(order_id: int, item_name: str, quantity: int) -> None:
        test_db.add(
            OrderItem(order_id=order_id, item_name=item_name, quantity=quantity),
        )
        await test_db.commit()
    return _add
