"""Unit tests for MachineService."""

from unittest.mock import MagicMock, create_autospec

import pytest

from inventory.application.observability import InventoryServiceProbe
from inventory.application.services.machine_service import MachineService
from inventory.application.value_objects import MachineInput
from inventory.domain.records import MachineRecord
from inventory.ports.repositories import IMachineRepository


@pytest.fixture
def mock_machine_repository():
    return create_autospec(IMachineRepository, instance=True)


@pytest.fixture
def mock_probe():
    return create_autospec(InventoryServiceProbe, instance=True)


@pytest.fixture
def machine_service(mock_session_factory, mock_machine_repository, mock_probe):
    return MachineService(
        session_factory=mock_session_factory,
        machine_repository_factory=MagicMock(return_value=mock_machine_repository),
        probe=mock_probe,
    )


class TestMachineService:
    @pytest.mark.asyncio
    async def test_create_passes_soft_references_through(
        self, machine_service, mock_machine_repository
    ):
        """Neither the location nor the user is checked on write."""
        mock_machine_repository.create.return_value = MachineRecord(
            id=1,
            name="PM9",
            location_id=99,
            location_name="",
            app_user_id=None,
            assigned_user_name="Unassigned",
        )

        created = await machine_service.create_machine(
            MachineInput(name="PM9", location_id=99)
        )

        assert created.location_name == ""
        mock_machine_repository.create.assert_awaited_once_with(
            name="PM9", location_id=99, app_user_id=None
        )

    @pytest.mark.asyncio
    async def test_update(self, machine_service, mock_machine_repository, mock_probe):
        mock_machine_repository.update.return_value = True

        assert (
            await machine_service.update_machine(
                4, MachineInput(name="PM4", location_id=2, app_user_id=7)
            )
            is True
        )
        mock_machine_repository.update.assert_awaited_once_with(
            machine_id=4, name="PM4", location_id=2, app_user_id=7
        )
        mock_probe.entity_updated.assert_called_once_with(entity="machine", entity_id=4)

    @pytest.mark.asyncio
    async def test_delete_missing_returns_false(
        self, machine_service, mock_machine_repository, mock_probe
    ):
        mock_machine_repository.delete.return_value = False

        assert await machine_service.delete_machine(4) is False
        mock_probe.entity_not_found.assert_called_once_with(
            entity="machine", entity_id=4, operation="delete"
        )
