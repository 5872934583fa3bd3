"""Pydantic Schemas — read models returned by the order layer.

Invariants:
    - Schemas describe derived projections; nothing here is persisted
"""
