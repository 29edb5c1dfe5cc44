"""Permission catalogue service for IAM bounded context."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from iam.application.observability import (
    DefaultPermissionServiceProbe,
    PermissionServiceProbe,
)
from iam.domain.records import PermissionRecord
from iam.ports.repositories import IPermissionRepository
from infrastructure.database.session import transaction


class PermissionService:
    """Read access to permissions plus idempotent catalogue seeding."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        permission_repository_factory: Callable[[AsyncSession], IPermissionRepository],
        probe: PermissionServiceProbe | None = None,
    ):
        self._session_factory = session_factory
        self._permission_repository_factory = permission_repository_factory
        self._probe = probe or DefaultPermissionServiceProbe()

    async def list_permissions(self) -> list[PermissionRecord]:
        """List all permissions ordered by name."""
        try:
            async with transaction(self._session_factory) as session:
                return await self._permission_repository_factory(session).list_all()
        except Exception as e:
            self._probe.operation_failed(operation="list_permissions", error=str(e))
            raise

    async def get_by_name(self, name: str) -> PermissionRecord | None:
        """Look up a permission by name, or None if unknown."""
        try:
            async with transaction(self._session_factory) as session:
                repository = self._permission_repository_factory(session)
                return await repository.get_by_name(name)
        except Exception as e:
            self._probe.operation_failed(operation="get_by_name", error=str(e))
            raise

    async def ensure_permissions(self, names: Iterable[str]) -> int:
        """Insert the permission names that do not exist yet.

        Returns:
            Number of permissions inserted
        """
        wanted = [str(name) for name in names]
        try:
            async with transaction(self._session_factory) as session:
                inserted = await self._permission_repository_factory(
                    session
                ).add_missing(wanted)
        except Exception as e:
            self._probe.operation_failed(operation="ensure_permissions", error=str(e))
            raise

        self._probe.permissions_ensured(requested=len(wanted), inserted=inserted)
        return inserted
