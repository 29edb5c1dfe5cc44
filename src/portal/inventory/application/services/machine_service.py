"""Machine application service for Inventory bounded context."""

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from inventory.application.observability import (
    DefaultInventoryServiceProbe,
    InventoryServiceProbe,
)
from inventory.application.value_objects import MachineInput
from inventory.domain.records import MachineRecord
from inventory.ports.repositories import IMachineRepository
from infrastructure.database.session import transaction

_ENTITY = "machine"


class MachineService:
    """Application service for machines.

    The location and the assigned user are soft references and are not
    checked on write. Reads resolve them to names, substituting an empty
    location name and the "Unassigned" user label when they dangle.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        machine_repository_factory: Callable[[AsyncSession], IMachineRepository],
        probe: InventoryServiceProbe | None = None,
    ):
        self._session_factory = session_factory
        self._machine_repository_factory = machine_repository_factory
        self._probe = probe or DefaultInventoryServiceProbe()

    async def list_machines(self) -> list[MachineRecord]:
        """List all machines ordered by name."""
        try:
            async with transaction(self._session_factory) as session:
                machines = await self._machine_repository_factory(session).list_all()
        except Exception as e:
            self._probe.operation_failed(entity=_ENTITY, operation="list", error=str(e))
            raise

        self._probe.entities_listed(entity=_ENTITY, count=len(machines))
        return machines

    async def get_machine(self, machine_id: int) -> MachineRecord | None:
        """Get a machine by id, or None if not found."""
        try:
            async with transaction(self._session_factory) as session:
                repository = self._machine_repository_factory(session)
                return await repository.get_by_id(machine_id)
        except Exception as e:
            self._probe.operation_failed(entity=_ENTITY, operation="get", error=str(e))
            raise

    async def create_machine(self, machine: MachineInput) -> MachineRecord:
        """Create a machine."""
        try:
            async with transaction(self._session_factory) as session:
                created = await self._machine_repository_factory(session).create(
                    name=machine.name,
                    location_id=machine.location_id,
                    app_user_id=machine.app_user_id,
                )
        except Exception as e:
            self._probe.operation_failed(
                entity=_ENTITY, operation="create", error=str(e)
            )
            raise

        self._probe.entity_created(entity=_ENTITY, entity_id=created.id, name=created.name)
        return created

    async def update_machine(self, machine_id: int, machine: MachineInput) -> bool:
        """Update a machine.

        Returns:
            True if updated, False if the machine does not exist
        """
        try:
            async with transaction(self._session_factory) as session:
                updated = await self._machine_repository_factory(session).update(
                    machine_id=machine_id,
                    name=machine.name,
                    location_id=machine.location_id,
                    app_user_id=machine.app_user_id,
                )
        except Exception as e:
            self._probe.operation_failed(
                entity=_ENTITY, operation="update", error=str(e)
            )
            raise

        if not updated:
            self._probe.entity_not_found(
                entity=_ENTITY, entity_id=machine_id, operation="update"
            )
            return False

        self._probe.entity_updated(entity=_ENTITY, entity_id=machine_id)
        return True

    async def delete_machine(self, machine_id: int) -> bool:
        """Delete a machine.

        Returns:
            True if deleted, False if the machine does not exist
        """
        try:
            async with transaction(self._session_factory) as session:
                deleted = await self._machine_repository_factory(session).delete(
                    machine_id
                )
        except Exception as e:
            self._probe.operation_failed(
                entity=_ENTITY, operation="delete", error=str(e)
            )
            raise

        if not deleted:
            self._probe.entity_not_found(
                entity=_ENTITY, entity_id=machine_id, operation="delete"
            )
            return False

        self._probe.entity_deleted(entity=_ENTITY, entity_id=machine_id)
        return True
