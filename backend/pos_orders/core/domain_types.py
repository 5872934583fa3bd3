"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - OrderId, UserId, CustomerId wrap ints — store-assigned integer keys
    - Store primitives encoded as an Enum — no raw string matching
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

OrderId = NewType("OrderId", int)
UserId = NewType("UserId", int)
CustomerId = NewType("CustomerId", int)


# ─── Enums ───────────────────────────────────────────────────────

class StoreOperation(str, Enum):
    """Store primitives — surfaced in error context and structured logs."""
    RUN = "run"
    GET = "get"
    ALL = "all"
    INSERT = "insert"
