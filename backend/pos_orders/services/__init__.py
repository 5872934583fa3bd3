"""Services — the imperative shell around core/ row shaping.

Invariants:
    - Services talk to the store only through the OrderStore protocol
    - Every store failure is logged here with operation context, then re-raised
"""
