"""Location application service for Inventory bounded context."""

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from inventory.application.observability import (
    DefaultInventoryServiceProbe,
    InventoryServiceProbe,
)
from inventory.application.value_objects import LocationInput
from inventory.domain.records import LocationRecord
from inventory.ports.repositories import ILocationRepository
from infrastructure.database.session import transaction

_ENTITY = "location"


class LocationService:
    """Application service for site management.

    Deleting a location does not touch the users and machines that point
    at it; their references dangle and resolve to an empty name.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        location_repository_factory: Callable[[AsyncSession], ILocationRepository],
        probe: InventoryServiceProbe | None = None,
    ):
        """Initialize LocationService with dependencies.

        Args:
            session_factory: Factory for per-call database sessions
            location_repository_factory: Builds a location repository bound to a session
            probe: Optional domain probe for observability
        """
        self._session_factory = session_factory
        self._location_repository_factory = location_repository_factory
        self._probe = probe or DefaultInventoryServiceProbe()

    async def list_locations(self) -> list[LocationRecord]:
        """List all locations ordered by name, with user and machine counts."""
        try:
            async with transaction(self._session_factory) as session:
                locations = await self._location_repository_factory(session).list_all()
        except Exception as e:
            self._probe.operation_failed(entity=_ENTITY, operation="list", error=str(e))
            raise

        self._probe.entities_listed(entity=_ENTITY, count=len(locations))
        return locations

    async def get_location(self, location_id: int) -> LocationRecord | None:
        """Get a location by id, or None if not found."""
        try:
            async with transaction(self._session_factory) as session:
                repository = self._location_repository_factory(session)
                return await repository.get_by_id(location_id)
        except Exception as e:
            self._probe.operation_failed(entity=_ENTITY, operation="get", error=str(e))
            raise

    async def create_location(self, location: LocationInput) -> LocationRecord:
        """Create a location."""
        try:
            async with transaction(self._session_factory) as session:
                created = await self._location_repository_factory(session).create(
                    name=location.name
                )
        except Exception as e:
            self._probe.operation_failed(
                entity=_ENTITY, operation="create", error=str(e)
            )
            raise

        self._probe.entity_created(entity=_ENTITY, entity_id=created.id, name=created.name)
        return created

    async def update_location(self, location_id: int, location: LocationInput) -> bool:
        """Rename a location.

        Returns:
            True if updated, False if the location does not exist
        """
        try:
            async with transaction(self._session_factory) as session:
                updated = await self._location_repository_factory(session).update(
                    location_id=location_id, name=location.name
                )
        except Exception as e:
            self._probe.operation_failed(
                entity=_ENTITY, operation="update", error=str(e)
            )
            raise

        if not updated:
            self._probe.entity_not_found(
                entity=_ENTITY, entity_id=location_id, operation="update"
            )
            return False

        self._probe.entity_updated(entity=_ENTITY, entity_id=location_id)
        return True

    async def delete_location(self, location_id: int) -> bool:
        """Delete a location.

        Returns:
            True if deleted, False if the location does not exist
        """
        try:
            async with transaction(self._session_factory) as session:
                deleted = await self._location_repository_factory(session).delete(
                    location_id
                )
        except Exception as e:
            self._probe.operation_failed(
                entity=_ENTITY, operation="delete", error=str(e)
            )
            raise

        if not deleted:
            self._probe.entity_not_found(
                entity=_ENTITY, entity_id=location_id, operation="delete"
            )
            return False

        self._probe.entity_deleted(entity=_ENTITY, entity_id=location_id)
        return True
