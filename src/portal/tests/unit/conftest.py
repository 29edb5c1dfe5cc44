"""Unit test fixtures with mocked dependencies."""

from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
def mock_session():
    """Provide a mocked AsyncSession whose begin() works as a context manager."""
    session = MagicMock()

    transaction = MagicMock()
    transaction.__aenter__ = AsyncMock(return_value=transaction)
    transaction.__aexit__ = AsyncMock(return_value=False)
    session.begin.return_value = transaction

    return session


@pytest.fixture
def mock_session_factory(mock_session):
    """Provide a mocked async_sessionmaker yielding mock_session."""
    factory = MagicMock()

    context = MagicMock()
    context.__aenter__ = AsyncMock(return_value=mock_session)
    context.__aexit__ = AsyncMock(return_value=False)
    factory.return_value = context

    return factory
