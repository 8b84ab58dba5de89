"""Database Infrastructure — SQLAlchemy declarative Base.

Invariants:
    - Single async engine per process, owned by DatabaseSessionManager

Design Decisions:
    - aiosqlite for local/dev, asyncpg for PostgreSQL
"""
