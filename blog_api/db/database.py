"""Database engine and session management.

The engine and session maker are built once in the application lifespan
and kept on ``app.state``; request handlers receive sessions through the
``get_session`` dependency.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from logging import getLogger
from typing import Any

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession as SQLModelAsyncSession

from blog_api.configs import Settings, file_logger, pool_kwargs, settings
from blog_api.errors.base import BaseAppError

logger = file_logger(getLogger(__name__))

STATEMENT_TIMEOUT_MS = 30000

type SessionMaker = async_sessionmaker[SQLModelAsyncSession]


def _configure_engine_events(engine: AsyncEngine) -> None:
    """Configure connection pool events for monitoring."""

    @event.listens_for(engine.sync_engine, "connect")
    def on_connect(dbapi_connection: object, connection_record: object) -> None:
        logger.debug("New database connection established")

    @event.listens_for(engine.sync_engine, "checkin")
    def on_checkin(dbapi_connection: object, connection_record: object) -> None:
        logger.debug("Connection returned to pool")


def _enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    @event.listens_for(engine.sync_engine, "connect")
    def on_connect(dbapi_connection: Any, connection_record: object) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def create_engine(config: Settings = settings, **overrides: Any) -> AsyncEngine:
    """
    Create the async engine for the configured database.

    Args:
        config: Application settings.
        **overrides: Extra ``create_async_engine`` keyword arguments.

    Returns:
        AsyncEngine: The engine; dispose it with ``close_db``.
    """
    kwargs: dict[str, Any] = {"echo": config.DATABASE_ECHO, **pool_kwargs(config)}
    if config.DATABASE_URL.startswith("postgresql+asyncpg"):
        kwargs["connect_args"] = {
            "command_timeout": STATEMENT_TIMEOUT_MS / 1000,
            "server_settings": {
                "statement_timeout": str(STATEMENT_TIMEOUT_MS),
                "lock_timeout": str(STATEMENT_TIMEOUT_MS),
            },
        }
    kwargs.update(overrides)

    engine = create_async_engine(config.DATABASE_URL, **kwargs)
    if config.is_sqlite:
        _enable_sqlite_foreign_keys(engine)
    if config.DEBUG:
        _configure_engine_events(engine)
    return engine


def create_session_maker(engine: AsyncEngine) -> SessionMaker:
    return async_sessionmaker(
        engine,
        class_=SQLModelAsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@asynccontextmanager
async def transaction(session_maker: SessionMaker) -> AsyncGenerator[AsyncSession]:
    """
    Context manager for explicit transaction management.

    Yields:
        AsyncSession: Database session within a transaction

    Example:
        ```python
        async with transaction(session_maker) as session:
            session.add(BlogDB(title="t", content="c", author_uid="u1"))
            # Commits on successful exit, rolls back on exception
        ```
    """
    async with session_maker() as session:
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


async def get_session(request: Request) -> AsyncGenerator[AsyncSession]:
    """
    Dependency for getting async database sessions.

    One session per request; the transaction commits after the handler
    returns and rolls back if it raises.

    Yields:
        AsyncSession: Database session
    """
    session_maker: SessionMaker = request.app.state.session_maker
    async with transaction(session_maker) as session:
        yield session


async def init_db(engine: AsyncEngine) -> None:
    """
    Create all tables defined in SQLModel models.

    Note:
        This is a simple initialization for development.
        For production, use the Alembic migrations.
    """
    # Import all models to ensure they are registered
    import blog_api.models  # noqa: F401, PLC0415

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Database initialized successfully!")


async def close_db(engine: AsyncEngine) -> None:
    await engine.dispose()
    logger.info("Database connections closed")
