"""Initial schema — users, customers, menu_items, orders, order_items.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

orders mirrors what SchemaManager.ensure_schema() creates at startup; the
other tables belong to sibling modules and are created here so a fresh
database can serve the order read paths.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("user_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("username", sa.String(100), nullable=False, unique=True),
    )

    op.create_table(
        "customers",
        sa.Column("customer_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("customer_name", sa.String(200), nullable=False),
        sa.Column("phone_number", sa.String(30), nullable=True),
        sa.Column("email", sa.String(320), nullable=True),
    )

    op.create_table(
        "menu_items",
        sa.Column("item_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("item_name", sa.String(200), nullable=False, unique=True),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
    )

    op.create_table(
        "orders",
        sa.Column("order_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.user_id"), nullable=False),
        sa.Column(
            "customer_id", sa.Integer,
            sa.ForeignKey("customers.customer_id"), nullable=False,
        ),
        sa.Column("order_timestamp", sa.DateTime(timezone=True), nullable=False),
        sa.Column("total_amount", sa.Numeric(10, 2), nullable=True),
        sa.Column("subtotal", sa.Numeric(10, 2), nullable=True),
        sa.Column("tax_amount", sa.Numeric(10, 2), nullable=True),
        sqlite_autoincrement=True,
    )

    op.create_table(
        "order_items",
        sa.Column("order_item_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("order_id", sa.Integer, sa.ForeignKey("orders.order_id"), nullable=False),
        sa.Column("item_name", sa.String(200), nullable=False),
        sa.Column("quantity", sa.Integer, nullable=False),
    )
    op.create_index("ix_order_items_order_id", "order_items", ["order_id"])


def downgrade() -> None:
    op.drop_index("ix_order_items_order_id", table_name="order_items")
    op.drop_table("order_items")
    op.drop_table("orders")
    op.drop_table("menu_items")
    op.drop_table("customers")
    op.drop_table("users")
