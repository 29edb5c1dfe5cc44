"""Process-wide engine and session factory.

The composition root calls these once and hands the session factory to
every service constructor. Services themselves never reach for these
module-level instances.
"""

from __future__ import annotations

import threading

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from infrastructure.database.engines import create_engine, create_session_factory
from infrastructure.observability import DefaultDatabaseProbe
from infrastructure.settings import get_database_settings

_probe = DefaultDatabaseProbe()

_engine: AsyncEngine | None = None
_sessionmaker: async_sessionmaker[AsyncSession] | None = None

# Thread lock for safe engine initialization
_engine_lock = threading.Lock()


def get_engine() -> AsyncEngine:
    """Get the database engine (singleton).

    Creates engine on first call and caches for subsequent calls.
    Uses double-check locking for thread-safe initialization.
    Also creates and caches the sessionmaker for efficient session creation.

    Returns:
        Configured async engine
    """
    global _engine, _sessionmaker
    if _engine is None:
        with _engine_lock:
            # Double-check after acquiring lock
            if _engine is None:
                settings = get_database_settings()
                _engine = create_engine(settings)
                _sessionmaker = create_session_factory(_engine)
                _probe.engine_created(url=settings.connection_string)
    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get the session factory bound to the singleton engine."""
    get_engine()
    assert _sessionmaker is not None
    return _sessionmaker


async def close_database_connections() -> None:
    """Dispose the engine and reset the cached session factory.

    Should be called on application shutdown to properly cleanup connections.
    """
    global _engine, _sessionmaker

    if _engine is not None:
        await _engine.dispose()
        _probe.engine_disposed()
        _engine = None
        _sessionmaker = None
