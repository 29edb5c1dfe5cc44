"""SQLAlchemy implementation of IRoleRepository.

Roles are loaded with their permissions in one extra round trip (selectin)
and flattened into RoleRecords.
"""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from iam.domain.records import PermissionRecord, RoleRecord
from iam.infrastructure.models import PermissionModel, RoleModel, user_roles
from iam.ports.exceptions import PermissionNotFoundError, RoleNotFoundError
from iam.ports.repositories import IRoleRepository


def permission_to_record(model: PermissionModel) -> PermissionRecord:
    """Map a permission row to its record."""
    return PermissionRecord(id=model.id, name=model.name)


def role_to_record(model: RoleModel) -> RoleRecord:
    """Map a role row and its loaded permissions to a record."""
    permissions = sorted(model.permissions, key=lambda p: p.name)
    return RoleRecord(
        id=model.id,
        name=model.name,
        permissions=tuple(permission_to_record(p) for p in permissions),
    )


class RoleRepository(IRoleRepository):
    """Session-bound repository for roles and their permission grants."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: AsyncSession scoped to the current service call
        """
        self._session = session

    async def list_all(self) -> list[RoleRecord]:
        """List all roles ordered by name with their permissions."""
        stmt = select(RoleModel).order_by(RoleModel.name)
        result = await self._session.execute(stmt)
        return [role_to_record(model) for model in result.scalars().all()]

    async def get_by_id(self, role_id: int) -> RoleRecord | None:
        """Retrieve a role by id, or None if not found."""
        model = await self._session.get(RoleModel, role_id)
        if model is None:
            return None
        return role_to_record(model)

    async def create(self, name: str, permission_ids: Iterable[int]) -> RoleRecord:
        """Insert a role granting the given permissions.

        Raises:
            PermissionNotFoundError: If any permission id does not exist
        """
        permissions = await self._load_permissions(permission_ids)
        model = RoleModel(name=name, permissions=permissions)
        self._session.add(model)
        await self._session.flush()
        return role_to_record(model)

    async def update(
        self, role_id: int, name: str, permission_ids: Iterable[int]
    ) -> bool:
        """Rename a role and replace its permission set.

        Returns:
            True if updated, False if the role does not exist

        Raises:
            PermissionNotFoundError: If any permission id does not exist
        """
        model = await self._session.get(RoleModel, role_id)
        if model is None:
            return False

        model.name = name
        model.permissions = await self._load_permissions(permission_ids)
        await self._session.flush()
        return True

    async def delete(self, role_id: int) -> bool:
        """Delete a role together with its grants and user assignments.

        Returns:
            True if deleted, False if not found
        """
        model = await self._session.get(RoleModel, role_id)
        if model is None:
            return False

        # Users hold no back-reference to roles, so clear assignments directly.
        await self._session.execute(
            delete(user_roles).where(user_roles.c.role_id == role_id)
        )
        await self._session.delete(model)
        await self._session.flush()
        return True

    async def add_permission(self, role_id: int, permission_id: int) -> bool:
        """Grant a permission to a role.

        Returns:
            True if a new grant was recorded, False if already granted

        Raises:
            RoleNotFoundError: If the role does not exist
            PermissionNotFoundError: If the permission does not exist
        """
        role = await self._session.get(RoleModel, role_id)
        if role is None:
            raise RoleNotFoundError(role_id)

        permission = await self._session.get(PermissionModel, permission_id)
        if permission is None:
            raise PermissionNotFoundError(permission_id)

        if any(p.id == permission_id for p in role.permissions):
            return False

        role.permissions.append(permission)
        await self._session.flush()
        return True

    async def remove_permission(self, role_id: int, permission_id: int) -> bool:
        """Revoke a permission from a role.

        Returns:
            True if revoked, False if the grant did not exist

        Raises:
            RoleNotFoundError: If the role does not exist
        """
        role = await self._session.get(RoleModel, role_id)
        if role is None:
            raise RoleNotFoundError(role_id)

        granted = next((p for p in role.permissions if p.id == permission_id), None)
        if granted is None:
            return False

        role.permissions.remove(granted)
        await self._session.flush()
        return True

    async def _load_permissions(
        self, permission_ids: Iterable[int]
    ) -> list[PermissionModel]:
        """Load permissions by id, failing on the first unknown id."""
        wanted = list(dict.fromkeys(permission_ids))
        if not wanted:
            return []

        stmt = select(PermissionModel).where(PermissionModel.id.in_(wanted))
        result = await self._session.execute(stmt)
        found = {model.id: model for model in result.scalars().all()}

        for permission_id in wanted:
            if permission_id not in found:
                raise PermissionNotFoundError(permission_id)

        return [found[permission_id] for permission_id in wanted]
