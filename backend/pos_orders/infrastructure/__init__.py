"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/
    - All driver errors are mapped to StoreExecutionError before leaving this layer
"""
