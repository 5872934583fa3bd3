"""User ORM — the operator account that rang up an order."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from pos_orders.db.base import Base


class User(Base):
    __tablename__ = "users"

    user_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    username: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
