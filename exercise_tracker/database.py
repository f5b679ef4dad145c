"""
Exercise Tracker - Record Store Handle
========================================

What:  Async SQLAlchemy engine, session factory, and FastAPI session dependency.
How:   A `Database` object is constructed by create_app(), opened in the
       application lifespan (connect) and closed on shutdown (dispose).
       Route handlers receive a per-request session through get_db_session(),
       which commits on success and rolls back on error.

Lifecycle:
    create_app()  → Database(settings)       (no I/O, no engine yet)
    startup       → await database.connect()  (engine + pool + create_all)
    per request   → async with database.session() as session
    shutdown      → await database.dispose()  (close pooled connections)
"""

import logging
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

from exercise_tracker.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares a single metadata object, used both by create_all() at startup
    and by Alembic for migrations.
    """
    pass


class Database:
    """
    Explicitly constructed handle to the record store.

    Holds the engine and session factory for one application instance.
    Nothing is opened until connect() is awaited, so building an app has no
    side effects on import.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("Database is not connected; call connect() first")
        return self._engine

    async def connect(self) -> None:
        """
        Create the engine and, if configured, the schema.

        SQLite URLs get the driver's default pool (pool_size/max_overflow
        are QueuePool arguments and are rejected by SQLite's static pools).
        """
        if self._engine is not None:
            return

        engine_kwargs = {"echo": self.settings.log_level == "DEBUG"}
        if not self.settings.is_sqlite:
            engine_kwargs.update(
                pool_size=self.settings.db_pool_size,
                max_overflow=self.settings.db_max_overflow,
                pool_pre_ping=self.settings.db_pool_pre_ping,
                pool_recycle=3600,
            )

        self._engine = create_async_engine(self.settings.database_url, **engine_kwargs)
        # expire_on_commit=False: response models read attributes after commit
        self._session_factory = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

        if self.settings.create_tables_on_startup:
            await self.create_tables()

        logger.info("Record store connected")

    async def create_tables(self) -> None:
        """Create any missing tables and indexes (idempotent)."""
        # Models must be imported so they register with Base.metadata
        from exercise_tracker.models import exercise, user  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def ping(self) -> bool:
        """Run SELECT 1; used by the health check."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Yield a session that commits on success and rolls back on error.

        The session is always closed, returning its connection to the pool.
        """
        if self._session_factory is None:
            raise RuntimeError("Database is not connected; call connect() first")
        async with self._session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def dispose(self) -> None:
        """Close all pooled connections. Safe to call more than once."""
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("Record store disconnected")


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    The Database handle lives on `app.state.database`, set by create_app().

    Example usage in a route:
        @router.get("/api/users")
        async def list_users(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    database: Database = request.app.state.database
    async with database.session() as session:
        yield session
