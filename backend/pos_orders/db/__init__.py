"""Database Infrastructure — async engine factory and SQLAlchemy Base.

Invariants:
    - Single async engine per process (initialized via init_db)
    - All sessions are async (AsyncSession)

Design Decisions:
    - aiosqlite for local/dev and tests, asyncpg for PostgreSQL
"""
