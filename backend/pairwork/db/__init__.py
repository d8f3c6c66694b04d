"""Database Declarations — the SQLAlchemy Base every ORM model inherits from.

Invariants:
    - Engine and sessions live in infrastructure/database.py, not here

Design Decisions:
    - asyncpg driver for PostgreSQL in production, aiosqlite in tests
"""
