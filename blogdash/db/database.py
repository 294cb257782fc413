"""Database engine and session management."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from logging import getLogger
from typing import Any

from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from blogdash.configs import file_logger, pool_kwargs, settings
from blogdash.errors.base import BaseAppError
from blogdash.errors.database import DatabaseInitializationError

logger = file_logger(getLogger(__name__))


def _configure_engine_events(engine: AsyncEngine) -> None:
    """Configure connection pool events for monitoring."""

    @event.listens_for(engine.sync_engine, "connect")
    def on_connect(dbapi_connection: object, connection_record: object) -> None:
        logger.debug("New database connection established")

    @event.listens_for(engine.sync_engine, "checkin")
    def on_checkin(dbapi_connection: object, connection_record: object) -> None:
        logger.debug("Connection returned to pool")


def _is_memory_sqlite(database_url: str) -> bool:
    return database_url.startswith("sqlite") and (
        ":memory:" in database_url or database_url.rstrip("/").endswith(":")
    )


def build_engine(database_url: str, *, echo: bool = False) -> AsyncEngine:
    """
    Create the async engine for `database_url`.

    In-memory SQLite gets a `StaticPool` so every session sees the same
    database.
    """
    kwargs: dict[str, Any] = pool_kwargs(database_url)
    if _is_memory_sqlite(database_url):
        kwargs = {"poolclass": StaticPool, "connect_args": {"check_same_thread": False}}
    return create_async_engine(database_url, echo=echo, **kwargs)


class Database:
    """
    Store client owning one engine and its session factory.

    Constructed by the application lifespan and kept on `app.state.database`;
    nothing is created at import time.
    """

    def __init__(self, database_url: str, *, echo: bool = False) -> None:
        self.url = database_url
        self.engine = build_engine(database_url, echo=echo)
        self.session_maker: async_sessionmaker[AsyncSession] = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
        if settings.DEBUG:
            _configure_engine_events(self.engine)

    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator[AsyncSession]:
        """
        Yield a session that commits on success and rolls back on error.

        Example:
            ```python
            async with database.transaction() as session:
                session.add(UserDB(username="test", email="test@example.com"))
            ```
        """
        async with self.session_maker() as session:
            try:
                yield session
                await session.commit()
            except BaseAppError:
                await session.rollback()
                raise
            except Exception:
                await session.rollback()
                logger.exception("Transaction error")
                raise

    async def create_all(self) -> None:
        """Create all tables defined by the SQLModel models."""
        # Import models so their tables are registered on the metadata
        from blogdash.models import BlogDB, CategoryDB, UserDB  # noqa: F401, PLC0415

        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
        except SQLAlchemyError as e:
            logger.exception("Failed to create database tables")
            raise DatabaseInitializationError from e
        logger.info("Database initialized successfully!")

    async def ping(self) -> bool:
        """Return True if the database answers a trivial query."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except SQLAlchemyError:
            logger.exception("Database ping failed")
            return False
        return True

    async def close(self) -> None:
        """Dispose of all pooled connections."""
        await self.engine.dispose()
        logger.info("Database connections closed")


def get_database(request: Request) -> Database:
    """Return the store client created by the lifespan."""
    return request.app.state.database


async def get_session(request: Request) -> AsyncGenerator[AsyncSession]:
    """
    Dependency for getting async database sessions.

    Yields:
        AsyncSession: Session committed when the request handler succeeds
    """
    async with get_database(request).transaction() as session:
        yield session
