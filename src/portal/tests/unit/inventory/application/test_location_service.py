"""Unit tests for LocationService."""

from unittest.mock import MagicMock, create_autospec

import pytest

from inventory.application.observability import InventoryServiceProbe
from inventory.application.services.location_service import LocationService
from inventory.application.value_objects import LocationInput
from inventory.domain.records import LocationRecord
from inventory.ports.repositories import ILocationRepository


@pytest.fixture
def mock_location_repository():
    return create_autospec(ILocationRepository, instance=True)


@pytest.fixture
def mock_probe():
    return create_autospec(InventoryServiceProbe, instance=True)


@pytest.fixture
def location_service(mock_session_factory, mock_location_repository, mock_probe):
    return LocationService(
        session_factory=mock_session_factory,
        location_repository_factory=MagicMock(return_value=mock_location_repository),
        probe=mock_probe,
    )


class TestLocationService:
    @pytest.mark.asyncio
    async def test_list(self, location_service, mock_location_repository, mock_probe):
        locations = [LocationRecord(id=1, name="Corlu", user_count=2, machine_count=3)]
        mock_location_repository.list_all.return_value = locations

        assert await location_service.list_locations() == locations
        mock_probe.entities_listed.assert_called_once_with(entity="location", count=1)

    @pytest.mark.asyncio
    async def test_create(self, location_service, mock_location_repository, mock_probe):
        mock_location_repository.create.return_value = LocationRecord(id=8, name="Linz")

        created = await location_service.create_location(LocationInput(name="Linz"))

        assert created.id == 8
        mock_location_repository.create.assert_awaited_once_with(name="Linz")
        mock_probe.entity_created.assert_called_once_with(
            entity="location", entity_id=8, name="Linz"
        )

    @pytest.mark.asyncio
    async def test_update_missing_returns_false(
        self, location_service, mock_location_repository, mock_probe
    ):
        mock_location_repository.update.return_value = False

        assert (
            await location_service.update_location(99, LocationInput(name="Linz"))
            is False
        )
        mock_probe.entity_not_found.assert_called_once_with(
            entity="location", entity_id=99, operation="update"
        )

    @pytest.mark.asyncio
    async def test_delete(self, location_service, mock_location_repository, mock_probe):
        mock_location_repository.delete.return_value = True

        assert await location_service.delete_location(3) is True
        mock_probe.entity_deleted.assert_called_once_with(entity="location", entity_id=3)

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(
        self, location_service, mock_location_repository
    ):
        mock_location_repository.get_by_id.return_value = None

        assert await location_service.get_location(3) is None

    @pytest.mark.asyncio
    async def test_failure_is_recorded(
        self, location_service, mock_location_repository, mock_probe
    ):
        mock_location_repository.list_all.side_effect = RuntimeError("boom")

        with pytest.raises(RuntimeError):
            await location_service.list_locations()

        mock_probe.operation_failed.assert_called_once_with(
            entity="location", operation="list", error="boom"
        )
