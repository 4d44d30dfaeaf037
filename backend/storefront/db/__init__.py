"""Database Infrastructure: SQLAlchemy declarative Base.

Invariants:
    - One engine per dataset (initialized in the app lifespan)
    - All sessions are async (AsyncSession)

Design Decisions:
    - asyncpg driver for PostgreSQL (ADR: native async, no thread pool overhead)
"""
