"""External application shortcut service for Inventory bounded context."""

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from inventory.application.observability import (
    DefaultInventoryServiceProbe,
    InventoryServiceProbe,
)
from inventory.application.value_objects import ExternalApplicationInput
from inventory.domain.records import ExternalApplicationRecord
from inventory.ports.repositories import IExternalApplicationRepository
from infrastructure.database.session import transaction

_ENTITY = "external_application"


class ExternalApplicationService:
    """Application service for the portal's external application links."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        application_repository_factory: Callable[
            [AsyncSession], IExternalApplicationRepository
        ],
        probe: InventoryServiceProbe | None = None,
    ):
        self._session_factory = session_factory
        self._application_repository_factory = application_repository_factory
        self._probe = probe or DefaultInventoryServiceProbe()

    async def list_applications(self) -> list[ExternalApplicationRecord]:
        """List all external applications ordered by app name."""
        try:
            async with transaction(self._session_factory) as session:
                applications = await self._application_repository_factory(
                    session
                ).list_all()
        except Exception as e:
            self._probe.operation_failed(entity=_ENTITY, operation="list", error=str(e))
            raise

        self._probe.entities_listed(entity=_ENTITY, count=len(applications))
        return applications

    async def get_application(
        self, application_id: int
    ) -> ExternalApplicationRecord | None:
        """Get an external application by id, or None if not found."""
        try:
            async with transaction(self._session_factory) as session:
                repository = self._application_repository_factory(session)
                return await repository.get_by_id(application_id)
        except Exception as e:
            self._probe.operation_failed(entity=_ENTITY, operation="get", error=str(e))
            raise

    async def create_application(
        self, application: ExternalApplicationInput
    ) -> ExternalApplicationRecord:
        """Create an external application shortcut."""
        try:
            async with transaction(self._session_factory) as session:
                created = await self._application_repository_factory(session).create(
                    app_name=application.app_name,
                    app_url=application.url,
                    icon_name=application.icon_name,
                )
        except Exception as e:
            self._probe.operation_failed(
                entity=_ENTITY, operation="create", error=str(e)
            )
            raise

        self._probe.entity_created(
            entity=_ENTITY, entity_id=created.id, name=created.app_name
        )
        return created

    async def update_application(
        self, application_id: int, application: ExternalApplicationInput
    ) -> bool:
        """Update an external application shortcut.

        Returns:
            True if updated, False if it does not exist
        """
        try:
            async with transaction(self._session_factory) as session:
                updated = await self._application_repository_factory(session).update(
                    application_id=application_id,
                    app_name=application.app_name,
                    app_url=application.url,
                    icon_name=application.icon_name,
                )
        except Exception as e:
            self._probe.operation_failed(
                entity=_ENTITY, operation="update", error=str(e)
            )
            raise

        if not updated:
            self._probe.entity_not_found(
                entity=_ENTITY, entity_id=application_id, operation="update"
            )
            return False

        self._probe.entity_updated(entity=_ENTITY, entity_id=application_id)
        return True

    async def delete_application(self, application_id: int) -> bool:
        """Delete an external application shortcut.

        Returns:
            True if deleted, False if it does not exist
        """
        try:
            async with transaction(self._session_factory) as session:
                deleted = await self._application_repository_factory(session).delete(
                    application_id
                )
        except Exception as e:
            self._probe.operation_failed(
                entity=_ENTITY, operation="delete", error=str(e)
            )
            raise

        if not deleted:
            self._probe.entity_not_found(
                entity=_ENTITY, entity_id=application_id, operation="delete"
            )
            return False

        self._probe.entity_deleted(entity=_ENTITY, entity_id=application_id)
        return True
