"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass any object with
      the four primitives
    - Records are read-only mappings keyed by column label
"""

from collections.abc import Mapping
from typing import Any, Protocol


Record = Mapping[str, Any]


class OrderStore(Protocol):
    """Contract for the relational store behind the order layer — implemented by shell."""

    async def run(self, statement: Any, params: dict | None = None) -> None:
        """Execute a mutating statement and commit."""
        ...

    async def get(self, statement: Any, params: dict | None = None) -> Record | None:
        """Execute a query and return the first record, or None."""
        ...

    async def all(self, statement: Any, params: dict | None = None) -> list[Record]:
        """Execute a query and return every record in result order."""
        ...

    async def insert(self, statement: Any, params: dict | None = None) -> Record | None:
        """Execute an INSERT ... RETURNING, commit, and return the returned record."""
        ...

    async def health_check(self) -> bool: ...
