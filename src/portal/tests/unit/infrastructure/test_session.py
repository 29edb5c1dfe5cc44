"""Unit tests for the transaction scope and storage error translation."""

from unittest.mock import create_autospec

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from infrastructure.database.exceptions import ConstraintViolationError, StorageError
from infrastructure.database.session import transaction
from infrastructure.observability import DatabaseProbe


@pytest.fixture
def mock_probe():
    return create_autospec(DatabaseProbe, instance=True)


class TestTransaction:
    @pytest.mark.asyncio
    async def test_yields_session_inside_begin(
        self, mock_session_factory, mock_session, mock_probe
    ):
        """The block should run inside session.begin() on a fresh session."""
        async with transaction(mock_session_factory, probe=mock_probe) as session:
            assert session is mock_session

        mock_session_factory.assert_called_once_with()
        mock_session.begin.assert_called_once_with()
        mock_session_factory.return_value.__aexit__.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_integrity_error_becomes_constraint_violation(
        self, mock_session_factory, mock_probe
    ):
        with pytest.raises(ConstraintViolationError) as exc_info:
            async with transaction(mock_session_factory, probe=mock_probe):
                raise IntegrityError(
                    "INSERT INTO users", {}, Exception("UNIQUE constraint failed")
                )

        assert isinstance(exc_info.value.__cause__, IntegrityError)
        mock_probe.constraint_violated.assert_called_once_with(
            error="UNIQUE constraint failed"
        )

    @pytest.mark.asyncio
    async def test_other_sqlalchemy_errors_become_storage_error(
        self, mock_session_factory, mock_probe
    ):
        with pytest.raises(StorageError) as exc_info:
            async with transaction(mock_session_factory, probe=mock_probe):
                raise OperationalError("SELECT 1", {}, Exception("connection lost"))

        assert not isinstance(exc_info.value, ConstraintViolationError)
        mock_probe.storage_failed.assert_called_once()

    @pytest.mark.asyncio
    async def test_domain_errors_propagate_unchanged(
        self, mock_session_factory, mock_session, mock_probe
    ):
        """Non-storage exceptions must pass through and still close the session."""
        with pytest.raises(LookupError):
            async with transaction(mock_session_factory, probe=mock_probe):
                raise LookupError("missing")

        mock_probe.storage_failed.assert_not_called()
        mock_session.begin.return_value.__aexit__.assert_awaited_once()
        mock_session_factory.return_value.__aexit__.assert_awaited_once()
