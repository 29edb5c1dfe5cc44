"""Permission and role evaluation for IAM bounded context.

Checks are fail-closed: a user that does not exist holds no role and no
permission. Only ``roles_for`` surfaces the absence.
"""

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from iam.application.observability import (
    DefaultPermissionEvaluatorProbe,
    PermissionEvaluatorProbe,
)
from iam.domain.authorization import grants_permission, holds_role
from iam.domain.records import RoleRecord
from iam.ports.exceptions import UserNotFoundError
from iam.ports.repositories import IUserRepository
from infrastructure.database.session import transaction
from shared_kernel.exceptions import UnauthorizedError


class PermissionEvaluator:
    """Answers "may this user do X" from the user's assigned roles."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        user_repository_factory: Callable[[AsyncSession], IUserRepository],
        probe: PermissionEvaluatorProbe | None = None,
    ):
        self._session_factory = session_factory
        self._user_repository_factory = user_repository_factory
        self._probe = probe or DefaultPermissionEvaluatorProbe()

    async def _load_roles(self, user_id: int) -> list[RoleRecord] | None:
        async with transaction(self._session_factory) as session:
            return await self._user_repository_factory(session).get_roles(user_id)

    async def has_permission(self, user_id: int, permission_name: str) -> bool:
        """Whether any role assigned to the user grants the permission.

        Returns:
            True if granted, False otherwise (including for unknown users)
        """
        try:
            roles = await self._load_roles(user_id)
        except Exception as e:
            self._probe.evaluation_failed(user_id=user_id, error=str(e))
            raise

        if roles is None:
            self._probe.unknown_user_denied(user_id=user_id)
            return False

        granted = grants_permission(roles, permission_name)
        self._probe.permission_checked(
            user_id=user_id, permission=permission_name, granted=granted
        )
        return granted

    async def has_role(self, user_id: int, role_name: str) -> bool:
        """Whether the user is assigned a role with the given name.

        Returns:
            True if held, False otherwise (including for unknown users)
        """
        try:
            roles = await self._load_roles(user_id)
        except Exception as e:
            self._probe.evaluation_failed(user_id=user_id, error=str(e))
            raise

        if roles is None:
            self._probe.unknown_user_denied(user_id=user_id)
            return False

        held = holds_role(roles, role_name)
        self._probe.role_checked(user_id=user_id, role=role_name, held=held)
        return held

    async def roles_for(self, user_id: int) -> list[RoleRecord]:
        """Roles assigned to the user, each with its permissions.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        try:
            roles = await self._load_roles(user_id)
        except Exception as e:
            self._probe.evaluation_failed(user_id=user_id, error=str(e))
            raise

        if roles is None:
            raise UserNotFoundError(user_id)
        return roles

    async def require_permission(self, user_id: int, permission_name: str) -> None:
        """Gate an operation on a permission.

        Raises:
            UnauthorizedError: If the user lacks the permission or does not exist
        """
        if not await self.has_permission(user_id, permission_name):
            self._probe.permission_denied(user_id=user_id, permission=permission_name)
            raise UnauthorizedError(
                f"User {user_id} lacks permission {permission_name}."
            )
