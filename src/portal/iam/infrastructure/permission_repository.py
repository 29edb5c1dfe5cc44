"""SQLAlchemy implementation of IPermissionRepository."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from iam.domain.records import PermissionRecord
from iam.infrastructure.models import PermissionModel
from iam.infrastructure.role_repository import permission_to_record
from iam.ports.repositories import IPermissionRepository


class PermissionRepository(IPermissionRepository):
    """Session-bound repository for the flat permission namespace."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_all(self) -> list[PermissionRecord]:
        """List all permissions ordered by name."""
        stmt = select(PermissionModel).order_by(PermissionModel.name)
        result = await self._session.execute(stmt)
        return [permission_to_record(model) for model in result.scalars().all()]

    async def get_by_id(self, permission_id: int) -> PermissionRecord | None:
        """Retrieve a permission by id, or None if not found."""
        model = await self._session.get(PermissionModel, permission_id)
        if model is None:
            return None
        return permission_to_record(model)

    async def get_by_name(self, name: str) -> PermissionRecord | None:
        """Retrieve a permission by name, or None if not found."""
        stmt = select(PermissionModel).where(PermissionModel.name == name)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            return None
        return permission_to_record(model)

    async def add_missing(self, names: Iterable[str]) -> int:
        """Insert the names that do not exist yet.

        Returns:
            Number of permissions inserted
        """
        wanted = list(dict.fromkeys(names))
        if not wanted:
            return 0

        stmt = select(PermissionModel.name).where(PermissionModel.name.in_(wanted))
        result = await self._session.execute(stmt)
        existing = set(result.scalars().all())

        missing = [name for name in wanted if name not in existing]
        self._session.add_all(PermissionModel(name=name) for name in missing)
        await self._session.flush()
        return len(missing)
