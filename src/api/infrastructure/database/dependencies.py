"""Database dependency injection for FastAPI.

Provides async session factories for read and write operations. Decision
endpoints only take read sessions; the administration surface takes write
sessions and manages its own transactions.
"""

from __future__ import annotations

import threading
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from infrastructure.database.engines import (
    EngineRole,
    create_read_engine,
    create_write_engine,
    pool_options,
)
from infrastructure.observability import DefaultConnectionProbe
from infrastructure.settings import get_database_settings

_probe = DefaultConnectionProbe()

# Engines and sessionmakers are created on first use, keyed by "read"/"write"
_engines: dict[str, AsyncEngine] = {}
_sessionmakers: dict[str, async_sessionmaker[AsyncSession]] = {}

_engine_lock = threading.Lock()


def _get_sessionmaker(kind: EngineRole) -> async_sessionmaker[AsyncSession]:
    """Get (creating on first call) the sessionmaker for an engine kind.

    Uses double-check locking for thread-safe initialization.
    """
    if kind not in _sessionmakers:
        with _engine_lock:
            if kind not in _sessionmakers:
                settings = get_database_settings()
                factory = create_write_engine if kind == "write" else create_read_engine
                engine = factory(settings)
                _engines[kind] = engine
                _sessionmakers[kind] = async_sessionmaker(
                    engine,
                    expire_on_commit=False,
                    class_=AsyncSession,
                )
                _probe.engine_created(
                    role=kind,
                    target=settings.connection_string,
                    pool_size=pool_options(settings).get("pool_size"),
                )
    return _sessionmakers[kind]


def get_write_engine() -> AsyncEngine:
    """Get the write database engine (singleton)."""
    _get_sessionmaker("write")
    return _engines["write"]


def get_read_engine() -> AsyncEngine:
    """Get the read database engine (singleton)."""
    _get_sessionmaker("read")
    return _engines["read"]


async def get_write_session() -> AsyncGenerator[AsyncSession, None]:
    """Provide a write session for mutations (FastAPI dependency).

    The session is configured to NOT auto-commit. Callers must explicitly
    manage transactions using `async with session.begin()`.

    Yields:
        AsyncSession for database operations
    """
    async with _get_sessionmaker("write")() as session:
        yield session


async def get_read_session() -> AsyncGenerator[AsyncSession, None]:
    """Provide a read-only session for queries (FastAPI dependency).

    One session per request: every authorization check made while handling
    the request reads through it.

    Yields:
        AsyncSession for read-only database operations
    """
    async with _get_sessionmaker("read")() as session:
        yield session


async def close_database_connections() -> None:
    """Close all database engine connections.

    Should be called on application shutdown to properly cleanup connections.
    Also resets sessionmakers to allow reinitialization.
    """
    for kind in list(_engines):
        engine = _engines.pop(kind)
        _sessionmakers.pop(kind, None)
        await engine.dispose()
        _probe.engine_disposed(role=kind)
