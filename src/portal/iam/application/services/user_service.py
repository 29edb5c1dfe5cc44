"""User administration service for IAM bounded context."""

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from iam.application.observability import DefaultUserServiceProbe, UserServiceProbe
from iam.application.value_objects import UserUpdate
from iam.domain.records import UserRecord
from iam.ports.exceptions import RoleAssignmentNotFoundError, UserNotFoundError
from iam.ports.repositories import IUserRepository
from infrastructure.database.session import transaction


class UserService:
    """Application service for administering reconciled users.

    Users are never created here; they come into existence through
    reconciliation at login.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        user_repository_factory: Callable[[AsyncSession], IUserRepository],
        probe: UserServiceProbe | None = None,
    ):
        """Initialize UserService with dependencies.

        Args:
            session_factory: Factory for per-call database sessions
            user_repository_factory: Builds a user repository bound to a session
            probe: Optional domain probe for observability
        """
        self._session_factory = session_factory
        self._user_repository_factory = user_repository_factory
        self._probe = probe or DefaultUserServiceProbe()

    async def list_users(self) -> list[UserRecord]:
        """List all users ordered by name, with location names inlined."""
        try:
            async with transaction(self._session_factory) as session:
                users = await self._user_repository_factory(session).list_all()
        except Exception as e:
            self._probe.operation_failed(operation="list_users", error=str(e))
            raise

        self._probe.users_listed(count=len(users))
        return users

    async def get_by_external_id(self, external_id: str) -> UserRecord | None:
        """Look up a user by identity-provider object id.

        Returns:
            The UserRecord, or None if no user has that object id
        """
        try:
            async with transaction(self._session_factory) as session:
                repository = self._user_repository_factory(session)
                return await repository.get_by_external_id(external_id)
        except Exception as e:
            self._probe.operation_failed(
                operation="get_by_external_id", error=str(e), external_id=external_id
            )
            raise

    async def update_user(self, user_id: int, update: UserUpdate) -> None:
        """Apply administrative settings to a user.

        Unlike the boolean update paths of the other services, a missing
        user is an error here.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        try:
            async with transaction(self._session_factory) as session:
                updated = await self._user_repository_factory(session).update(
                    user_id=user_id,
                    is_active=update.is_active,
                    is_admin=update.is_admin,
                    location_id=update.location_id,
                )
                if not updated:
                    self._probe.user_not_found(user_id=user_id)
                    raise UserNotFoundError(user_id)
        except UserNotFoundError:
            raise
        except Exception as e:
            self._probe.operation_failed(
                operation="update_user", error=str(e), user_id=user_id
            )
            raise

        self._probe.user_updated(
            user_id=user_id, is_active=update.is_active, is_admin=update.is_admin
        )

    async def assign_role(self, user_id: int, role_id: int) -> None:
        """Assign a role to a user. Assigning a held role is a no-op.

        Raises:
            UserNotFoundError: If the user does not exist
            RoleNotFoundError: If the role does not exist
        """
        try:
            async with transaction(self._session_factory) as session:
                was_new = await self._user_repository_factory(session).add_role(
                    user_id, role_id
                )
        except Exception as e:
            self._probe.operation_failed(
                operation="assign_role", error=str(e), user_id=user_id, role_id=role_id
            )
            raise

        self._probe.role_assigned(user_id=user_id, role_id=role_id, was_new=was_new)

    async def remove_role(self, user_id: int, role_id: int) -> None:
        """Remove a role from a user.

        Raises:
            UserNotFoundError: If the user does not exist
            RoleAssignmentNotFoundError: If the user does not hold the role
        """
        try:
            async with transaction(self._session_factory) as session:
                removed = await self._user_repository_factory(session).remove_role(
                    user_id, role_id
                )
                if not removed:
                    raise RoleAssignmentNotFoundError(user_id, role_id)
        except Exception as e:
            self._probe.operation_failed(
                operation="remove_role", error=str(e), user_id=user_id, role_id=role_id
            )
            raise

        self._probe.role_removed(user_id=user_id, role_id=role_id)
