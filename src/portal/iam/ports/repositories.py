"""Repository protocols (ports) for IAM bounded context.

Repository protocols define the interface for persisting and retrieving
users, roles and permissions. Implementations are bound to a single
session; services create one per call.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from iam.domain.records import PermissionRecord, RoleRecord, UserRecord


@runtime_checkable
class IUserRepository(Protocol):
    """Repository for application users and their role assignments."""

    async def list_all(self) -> list[UserRecord]:
        """List all users ordered by name, with location names inlined."""
        ...

    async def get_by_id(self, user_id: int) -> UserRecord | None:
        """Retrieve a user by local id.

        Returns:
            The UserRecord, or None if not found
        """
        ...

    async def get_by_external_id(self, external_id: str) -> UserRecord | None:
        """Retrieve a user by identity-provider object id.

        Returns:
            The UserRecord, or None if not found
        """
        ...

    async def create(
        self,
        external_id: str,
        name: str,
        is_active: bool,
        is_admin: bool,
        location_id: int,
    ) -> UserRecord:
        """Insert a new user.

        Returns:
            The persisted UserRecord with its generated id
        """
        ...

    async def update(
        self,
        user_id: int,
        is_active: bool,
        is_admin: bool,
        location_id: int,
    ) -> bool:
        """Update a user's administrative settings.

        Returns:
            True if updated, False if the user does not exist
        """
        ...

    async def lowest_location_id(self) -> int | None:
        """Id of the first location, or None when no location exists."""
        ...

    async def get_roles(self, user_id: int) -> list[RoleRecord] | None:
        """Roles assigned to a user, with their permissions.

        Returns:
            List of RoleRecords, or None if the user does not exist
        """
        ...

    async def add_role(self, user_id: int, role_id: int) -> bool:
        """Assign a role to a user.

        Returns:
            True if a new assignment was recorded, False if already held

        Raises:
            UserNotFoundError: If the user does not exist
            RoleNotFoundError: If the role does not exist
        """
        ...

    async def remove_role(self, user_id: int, role_id: int) -> bool:
        """Remove a role from a user.

        Returns:
            True if removed, False if the assignment did not exist

        Raises:
            UserNotFoundError: If the user does not exist
        """
        ...


@runtime_checkable
class IRoleRepository(Protocol):
    """Repository for roles and their permission grants."""

    async def list_all(self) -> list[RoleRecord]:
        """List all roles ordered by name with their permissions."""
        ...

    async def get_by_id(self, role_id: int) -> RoleRecord | None:
        """Retrieve a role by id, or None if not found."""
        ...

    async def create(self, name: str, permission_ids: Iterable[int]) -> RoleRecord:
        """Insert a role granting the given permissions.

        Raises:
            PermissionNotFoundError: If any permission id does not exist
        """
        ...

    async def update(
        self, role_id: int, name: str, permission_ids: Iterable[int]
    ) -> bool:
        """Rename a role and replace its permission set.

        Returns:
            True if updated, False if the role does not exist

        Raises:
            PermissionNotFoundError: If any permission id does not exist
        """
        ...

    async def delete(self, role_id: int) -> bool:
        """Delete a role together with its grants and user assignments.

        Returns:
            True if deleted, False if not found
        """
        ...

    async def add_permission(self, role_id: int, permission_id: int) -> bool:
        """Grant a permission to a role.

        Returns:
            True if a new grant was recorded, False if already granted

        Raises:
            RoleNotFoundError: If the role does not exist
            PermissionNotFoundError: If the permission does not exist
        """
        ...

    async def remove_permission(self, role_id: int, permission_id: int) -> bool:
        """Revoke a permission from a role.

        Returns:
            True if revoked, False if the grant did not exist

        Raises:
            RoleNotFoundError: If the role does not exist
        """
        ...


@runtime_checkable
class IPermissionRepository(Protocol):
    """Repository for the flat permission namespace."""

    async def list_all(self) -> list[PermissionRecord]:
        """List all permissions ordered by name."""
        ...

    async def get_by_id(self, permission_id: int) -> PermissionRecord | None:
        """Retrieve a permission by id, or None if not found."""
        ...

    async def get_by_name(self, name: str) -> PermissionRecord | None:
        """Retrieve a permission by name, or None if not found."""
        ...

    async def add_missing(self, names: Iterable[str]) -> int:
        """Insert the names that do not exist yet.

        Returns:
            Number of permissions inserted
        """
        ...
