"""Database session management using SQLModel async.

Sessions are handed out per request and never commit on their own:
CargoManager commits (or rolls back) each write explicitly.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel

# Import all models so they are registered with SQLModel metadata
import bricolaje.models  # noqa: F401
from bricolaje.config import get_settings

logger = structlog.get_logger()

_engine = None
_async_session_factory = None


def _unicode_lower(value: str | None) -> str | None:
    return value.lower() if value is not None else None


def install_sqlite_functions(engine: AsyncEngine) -> None:
    """Replace SQLite's ASCII-only ``lower()`` with a Unicode one.

    Case-insensitive filters compile to ``lower(...)``; without this,
    "PEÓN" would not match "Peón" on SQLite. Other backends already
    fold Unicode and are left alone.
    """
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.create_function("lower", 1, _unicode_lower)


def _get_engine():
    """Get or create the async engine."""
    global _engine
    if _engine is None:
        settings = get_settings()
        _engine = create_async_engine(
            settings.database.url,
            echo=settings.database.echo,
            future=True,
        )
        install_sqlite_functions(_engine)
    return _engine


def _get_session_factory():
    global _async_session_factory
    if _async_session_factory is None:
        _async_session_factory = sessionmaker(
            _get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
        )
    return _async_session_factory


async def init_db() -> None:
    """Create tables that do not exist yet.

    Existing tables are left untouched; schema changes need a proper
    migration tool.
    """
    engine = _get_engine()
    logger.info("db.init", url=engine.url.render_as_string(hide_password=True))
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def close_db() -> None:
    """Dispose of the engine; the next session recreates it."""
    global _engine, _async_session_factory
    if _engine is not None:
        await _engine.dispose()
        _engine = None
        _async_session_factory = None


@asynccontextmanager
async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """Open a session; anything left uncommitted is rolled back on close."""
    async with _get_session_factory()() as session:
        yield session


async def get_session_dependency() -> AsyncGenerator[AsyncSession, None]:
    """One session per request, shared by the managers it builds."""
    async with get_async_session() as session:
        yield session
