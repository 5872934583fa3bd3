"""POS Orders — order data-access layer for the point-of-sale tool.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
