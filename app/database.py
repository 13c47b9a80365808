"""
Database engine, session factory, and base model class for the SQL backend.

Only used when STORAGE_BACKEND=sql. The SQL backend does not map developers
or users to columns; it keeps each collection as one JSON document row
(see app/models/document.py), so the whole-collection load/save contract
of the JSON files is preserved and nothing above the store changes.

  - engine: The async database engine (connection pool for production DBs)
  - AsyncSessionLocal: Factory for creating async database sessions
  - Base: Declarative base class for the ORM models
  - create_tables(): Creates missing tables at startup

We use async SQLAlchemy (with aiosqlite for SQLite). When moving to
PostgreSQL, only DATABASE_URL needs to change (to use the asyncpg driver).
"""

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from app.config import settings


# echo=True in debug mode logs all SQL statements
engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
)

# expire_on_commit=False prevents lazy-load errors after commit in async context
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""
    pass


async def create_tables(bind: AsyncEngine = engine) -> None:
    """Create every table registered on Base that does not exist yet."""
    # Imported for its side effect of registering the table on Base.metadata
    from app.models.document import CollectionDocument  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
