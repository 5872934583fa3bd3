"""ORM Models — SQLAlchemy declarative models for the point-of-sale schema.

Invariants:
    - All models inherit from Base (db/base.py)
    - Order is the only table this package writes; the others belong to
      sibling modules and are declared so foreign keys resolve

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata knows every table before any
      DDL for orders is compiled
"""

from pos_orders.models.user import User  # noqa: F401
from pos_orders.models.customer import Customer  # noqa: F401
from pos_orders.models.menu_item import MenuItem  # noqa: F401
from pos_orders.models.order import Order  # noqa: F401
from pos_orders.models.order_item import OrderItem  # noqa: F401
