"""Database Package — declarative Base shared by models and migrations.

Invariants:
    - Single async engine per process (see infrastructure/database.py)
    - All sessions are async (AsyncSession)

Design Decisions:
    - asyncpg driver for PostgreSQL, aiosqlite for tests and local runs
"""
