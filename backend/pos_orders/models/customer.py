"""Customer ORM — the person an order is rung up for.

Owned by the customers module; declared here so order foreign keys and
joins resolve against the same metadata.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from pos_orders.db.base import Base


class Customer(Base):
    """Customer contact record."""
    __tablename__ = "customers"

    customer_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    customer_name: Mapped[str] = mapped_column(String(200), nullable=False)
    phone_number: Mapped[str | None] = mapped_column(String(30), nullable=True)
    email: Mapped[str | None] = mapped_column(String(320), nullable=True)
