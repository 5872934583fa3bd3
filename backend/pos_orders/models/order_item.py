"""OrderItem ORM — one product line of an order.

Invariants:
    - Always belongs to an Order (order_id FK)
    - item_name is a soft reference into menu_items: a name with no catalog
      entry is kept and reads back with no price
    - order_item_id gives line items a stable display order
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from pos_orders.db.base import Base


class OrderItem(Base):
    """Order line item — item name and quantity."""
    __tablename__ = "order_items"

    order_item_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    order_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("orders.order_id"), nullable=False, index=True,
    )
    item_name: Mapped[str] = mapped_column(String(200), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
