"""Repository protocols (ports) for Inventory bounded context.

Implementations are bound to a single session; services create one per
call. Update and delete report absence by returning False.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from inventory.domain.records import (
    ExternalApplicationRecord,
    LocationRecord,
    MachineRecord,
)


@runtime_checkable
class ILocationRepository(Protocol):
    """Repository for sites."""

    async def list_all(self) -> list[LocationRecord]:
        """List all locations ordered by name, with user and machine counts."""
        ...

    async def get_by_id(self, location_id: int) -> LocationRecord | None:
        """Retrieve a location by id, or None if not found."""
        ...

    async def create(self, name: str) -> LocationRecord:
        """Insert a location."""
        ...

    async def create_many(self, names: Sequence[str]) -> list[int]:
        """Insert several locations.

        Returns:
            Generated ids in the order of ``names``
        """
        ...

    async def update(self, location_id: int, name: str) -> bool:
        """Rename a location.

        Returns:
            True if updated, False if not found
        """
        ...

    async def delete(self, location_id: int) -> bool:
        """Delete a location. Users and machines keep their dangling reference.

        Returns:
            True if deleted, False if not found
        """
        ...

    async def exists_any(self) -> bool:
        """Whether at least one location exists."""
        ...


@runtime_checkable
class IMachineRepository(Protocol):
    """Repository for machines."""

    async def list_all(self) -> list[MachineRecord]:
        """List all machines ordered by name."""
        ...

    async def get_by_id(self, machine_id: int) -> MachineRecord | None:
        """Retrieve a machine by id, or None if not found."""
        ...

    async def create(
        self, name: str, location_id: int, app_user_id: int | None
    ) -> MachineRecord:
        """Insert a machine."""
        ...

    async def create_many(self, machines: Sequence[tuple[str, int]]) -> int:
        """Insert unassigned machines given as (name, location_id) pairs.

        Returns:
            Number of machines inserted
        """
        ...

    async def update(
        self,
        machine_id: int,
        name: str,
        location_id: int,
        app_user_id: int | None,
    ) -> bool:
        """Update a machine.

        Returns:
            True if updated, False if not found
        """
        ...

    async def delete(self, machine_id: int) -> bool:
        """Delete a machine.

        Returns:
            True if deleted, False if not found
        """
        ...

    async def exists_any(self) -> bool:
        """Whether at least one machine exists."""
        ...


@runtime_checkable
class IExternalApplicationRepository(Protocol):
    """Repository for external application shortcuts."""

    async def list_all(self) -> list[ExternalApplicationRecord]:
        """List all external applications ordered by app name."""
        ...

    async def get_by_id(self, application_id: int) -> ExternalApplicationRecord | None:
        """Retrieve an external application by id, or None if not found."""
        ...

    async def create(
        self, app_name: str, app_url: str, icon_name: str
    ) -> ExternalApplicationRecord:
        """Insert an external application."""
        ...

    async def update(
        self,
        application_id: int,
        app_name: str,
        app_url: str,
        icon_name: str,
    ) -> bool:
        """Update an external application.

        Returns:
            True if updated, False if not found
        """
        ...

    async def delete(self, application_id: int) -> bool:
        """Delete an external application.

        Returns:
            True if deleted, False if not found
        """
        ...
