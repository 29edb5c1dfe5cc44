"""Integration test fixtures backed by a temporary SQLite database.

Each test gets a fresh database file with the full schema, so tests run
without any external service.
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from bootstrap import PortalServices, build_services, create_schema
from infrastructure.database.engines import create_engine, create_session_factory
from infrastructure.settings import DatabaseSettings, IdentitySettings


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (requires database)",
    )


@pytest.fixture
def sqlite_settings(tmp_path) -> DatabaseSettings:
    """Database settings pointing at a per-test SQLite file."""
    return DatabaseSettings(
        _env_file=None,
        driver="sqlite+aiosqlite",
        database=str(tmp_path / "portal.db"),
    )


@pytest_asyncio.fixture
async def engine(sqlite_settings) -> AsyncGenerator[AsyncEngine, None]:
    """Provide an engine with the schema created."""
    engine = create_engine(sqlite_settings)
    await create_schema(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return create_session_factory(engine)


@pytest.fixture
def services(session_factory) -> PortalServices:
    """All services wired against the test database."""
    return build_services(session_factory, IdentitySettings(_env_file=None))


@pytest.fixture
def count_rows(session_factory):
    """Return a coroutine counting rows of an ORM model."""

    async def _count(model) -> int:
        async with session_factory() as session:
            return await session.scalar(select(func.count()).select_from(model))

    return _count
