"""Role application service for IAM bounded context.

Roles are named bundles of permissions. There is no hierarchy; a role's
permission set is replaced wholesale on update.
"""

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from iam.application.observability import DefaultRoleServiceProbe, RoleServiceProbe
from iam.application.value_objects import RoleInput
from iam.domain.records import PermissionRecord, RoleRecord
from iam.ports.exceptions import PermissionGrantNotFoundError, RoleNotFoundError
from iam.ports.repositories import IRoleRepository
from infrastructure.database.session import transaction


class RoleService:
    """Application service for role management."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        role_repository_factory: Callable[[AsyncSession], IRoleRepository],
        probe: RoleServiceProbe | None = None,
    ):
        """Initialize RoleService with dependencies.

        Args:
            session_factory: Factory for per-call database sessions
            role_repository_factory: Builds a role repository bound to a session
            probe: Optional domain probe for observability
        """
        self._session_factory = session_factory
        self._role_repository_factory = role_repository_factory
        self._probe = probe or DefaultRoleServiceProbe()

    async def list_roles(self) -> list[RoleRecord]:
        """List all roles ordered by name."""
        try:
            async with transaction(self._session_factory) as session:
                return await self._role_repository_factory(session).list_all()
        except Exception as e:
            self._probe.operation_failed(operation="list_roles", error=str(e))
            raise

    async def get_role(self, role_id: int) -> RoleRecord | None:
        """Get a role with its permissions, or None if not found."""
        try:
            async with transaction(self._session_factory) as session:
                return await self._role_repository_factory(session).get_by_id(role_id)
        except Exception as e:
            self._probe.operation_failed(
                operation="get_role", error=str(e), role_id=role_id
            )
            raise

    async def create_role(self, role: RoleInput) -> RoleRecord:
        """Create a role granting the given permissions.

        Raises:
            PermissionNotFoundError: If a permission id does not exist
            ConstraintViolationError: If the role name is taken
        """
        try:
            async with transaction(self._session_factory) as session:
                created = await self._role_repository_factory(session).create(
                    name=role.name, permission_ids=role.permission_ids
                )
        except Exception as e:
            self._probe.operation_failed(
                operation="create_role", error=str(e), name=role.name
            )
            raise

        self._probe.role_created(
            role_id=created.id,
            name=created.name,
            permission_count=len(created.permissions),
        )
        return created

    async def update_role(self, role_id: int, role: RoleInput) -> bool:
        """Rename a role and replace its permissions.

        Returns:
            True if updated, False if the role does not exist

        Raises:
            PermissionNotFoundError: If a permission id does not exist
        """
        try:
            async with transaction(self._session_factory) as session:
                updated = await self._role_repository_factory(session).update(
                    role_id=role_id,
                    name=role.name,
                    permission_ids=role.permission_ids,
                )
        except Exception as e:
            self._probe.operation_failed(
                operation="update_role", error=str(e), role_id=role_id
            )
            raise

        if not updated:
            self._probe.role_not_found(role_id=role_id)
            return False

        self._probe.role_updated(
            role_id=role_id,
            name=role.name,
            permission_count=len(set(role.permission_ids)),
        )
        return True

    async def delete_role(self, role_id: int) -> bool:
        """Delete a role, its permission grants and its user assignments.

        Returns:
            True if deleted, False if the role does not exist
        """
        try:
            async with transaction(self._session_factory) as session:
                deleted = await self._role_repository_factory(session).delete(role_id)
        except Exception as e:
            self._probe.operation_failed(
                operation="delete_role", error=str(e), role_id=role_id
            )
            raise

        if not deleted:
            self._probe.role_not_found(role_id=role_id)
            return False

        self._probe.role_deleted(role_id=role_id)
        return True

    async def assign_permission_to_role(self, role_id: int, permission_id: int) -> None:
        """Grant a permission to a role. Granting twice is a no-op.

        Raises:
            RoleNotFoundError: If the role does not exist
            PermissionNotFoundError: If the permission does not exist
        """
        try:
            async with transaction(self._session_factory) as session:
                was_new = await self._role_repository_factory(session).add_permission(
                    role_id, permission_id
                )
        except Exception as e:
            self._probe.operation_failed(
                operation="assign_permission_to_role",
                error=str(e),
                role_id=role_id,
                permission_id=permission_id,
            )
            raise

        self._probe.permission_granted(
            role_id=role_id, permission_id=permission_id, was_new=was_new
        )

    async def remove_permission_from_role(
        self, role_id: int, permission_id: int
    ) -> None:
        """Revoke a permission from a role.

        Raises:
            RoleNotFoundError: If the role does not exist
            PermissionGrantNotFoundError: If the role does not grant it
        """
        try:
            async with transaction(self._session_factory) as session:
                removed = await self._role_repository_factory(
                    session
                ).remove_permission(role_id, permission_id)
                if not removed:
                    raise PermissionGrantNotFoundError(role_id, permission_id)
        except Exception as e:
            self._probe.operation_failed(
                operation="remove_permission_from_role",
                error=str(e),
                role_id=role_id,
                permission_id=permission_id,
            )
            raise

        self._probe.permission_revoked(role_id=role_id, permission_id=permission_id)

    async def get_permissions_for_role(self, role_id: int) -> list[PermissionRecord]:
        """Permissions granted by a role, ordered by name.

        Raises:
            RoleNotFoundError: If the role does not exist
        """
        role = await self.get_role(role_id)
        if role is None:
            self._probe.role_not_found(role_id=role_id)
            raise RoleNotFoundError(role_id)
        return list(role.permissions)
