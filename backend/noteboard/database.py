"""
Noteboard Backend: Database Session Management
===============================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
How:   `Database` owns one async engine with its connection pool and a
       session factory. The application factory builds one instance and
       attaches it to `app.state.database`; the `get_db_session` dependency
       reads it from there. Nothing in the package touches a module-level
       engine, so tests can hand the app any store they like.
Who:   Used by route dependencies, the health check and Alembic.
When:  The engine is created with the app; sessions are created per request.

Connection Pooling:
    PostgreSQL: pool_size / max_overflow / pre-ping from Settings,
                connections recycled hourly.
    SQLite:     SQLAlchemy's default pool for the aiosqlite dialect;
                pool sizing options are not passed.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from noteboard.config import Settings, settings as default_settings


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Models register with this metadata, which Alembic and
    Database.create_schema() both read.
    """
    pass


class Database:
    """
    Explicitly constructed handle on the note store.

    Attributes:
        engine:          AsyncEngine managing the connection pool
        session_factory: async_sessionmaker producing AsyncSession objects
    """

    def __init__(self, config: Optional[Settings] = None):
        config = config or default_settings
        engine_options = {"echo": config.log_level == "DEBUG"}
        if not config.is_sqlite:
            engine_options.update(
                pool_size=config.db_pool_size,
                max_overflow=config.db_max_overflow,
                pool_pre_ping=config.db_pool_pre_ping,
                pool_recycle=3600,
            )

        self.url = config.database_url
        self.engine: AsyncEngine = create_async_engine(config.database_url, **engine_options)

        # expire_on_commit=False: objects stay readable after a repository commits
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Open one session for a unit of work.

        How it works:
            1. Creates a new session from the factory
            2. Yields it to the caller (the repository queries and commits)
            3. On error: rolls back and re-raises
            4. Always: closes the session (returns connection to pool)

        Commits belong to the repository write methods, so a failed commit
        is raised inside the request handler and never after the response.
        """
        async with self.session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def create_schema(self) -> None:
        """Create all registered tables. Used for SQLite, tests and db_create_schema."""
        # Model modules must be imported so their tables are on Base.metadata
        from noteboard.models import note  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def ping(self) -> bool:
        """Run SELECT 1; returns False when the store is unreachable."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception:
            return False
        return True

    async def dispose(self) -> None:
        """Close all pooled connections. Called from the app lifespan on shutdown."""
        await self.engine.dispose()


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    Reads the Database attached by create_app() and delegates to
    Database.session(). Writes are committed by the repository while the
    handler runs; an exception rolls back whatever is still pending.

    Example usage:
        @router.get("/notes")
        async def list_notes(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    database: Database = request.app.state.database
    async with database.session() as session:
        yield session
