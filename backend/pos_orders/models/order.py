"""Order ORM — persists one completed point-of-sale transaction.

Invariants:
    - order_id is an integer primary key assigned by the store, never reused
      (AUTOINCREMENT on SQLite, identity/serial on PostgreSQL)
    - user_id and customer_id are non-nullable FKs to users and customers
    - order_timestamp is stored in UTC and read back as an aware UTC datetime
    - Amounts are NUMERIC(10, 2); subtotal + tax_amount == total_amount is
      not enforced at this level

Design Decisions:
    - No ORM relationships: the order layer reads through explicit joins
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import ForeignKey, Integer, Numeric
from sqlalchemy.orm import Mapped, mapped_column

from pos_orders.db.base import Base
from pos_orders.db.types import UTCDateTime


class Order(Base):
    """Order header — owner, customer, timestamp and amounts."""
    __tablename__ = "orders"
    __table_args__ = {"sqlite_autoincrement": True}

    order_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.user_id"), nullable=False,
    )
    customer_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("customers.customer_id"), nullable=False,
    )
    order_timestamp: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    total_amount: Mapped[Decimal | None] = mapped_column(
        Numeric(10, 2), nullable=True,
    )
    subtotal: Mapped[Decimal | None] = mapped_column(
        Numeric(10, 2), nullable=True,
    )
    tax_amount: Mapped[Decimal | None] = mapped_column(
        Numeric(10, 2), nullable=True,
    )
