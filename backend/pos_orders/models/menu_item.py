"""MenuItem ORM — catalog entry that prices a line item by name.

Invariants:
    - item_name is unique: the detail view joins line items on it, so a
      duplicate name would duplicate order lines
"""

from decimal import Decimal

from sqlalchemy import Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from pos_orders.db.base import Base


class MenuItem(Base):
    """Menu catalog entry."""
    __tablename__ = "menu_items"

    item_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    item_name: Mapped[str] = mapped_column(String(200), nullable=False, unique=True)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
