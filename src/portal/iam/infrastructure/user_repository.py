"""SQLAlchemy implementation of IUserRepository.

Users are provisioned from SSO and administered locally. Location names
are joined in with an outer join on the soft location reference, so a
dangling reference yields an empty name instead of dropping the user.
"""

from __future__ import annotations

from sqlalchemy import Integer, Select, String, column, func, select, table
from sqlalchemy.ext.asyncio import AsyncSession

from iam.domain.records import RoleRecord, UserRecord
from iam.infrastructure.models import RoleModel, UserModel
from iam.infrastructure.role_repository import role_to_record
from iam.ports.exceptions import RoleNotFoundError, UserNotFoundError
from iam.ports.repositories import IUserRepository

# Locations belong to the inventory context; IAM only reads id and name.
_locations = table(
    "locations",
    column("id", Integer),
    column("name", String),
)


def _user_to_record(model: UserModel, location_name: str | None) -> UserRecord:
    """Map a user row and its joined location name to a record."""
    return UserRecord(
        id=model.id,
        external_id=model.external_id,
        name=model.name,
        is_active=model.is_active,
        is_admin=model.is_admin,
        location_id=model.location_id,
        location_name=location_name or "",
    )


def _select_users() -> Select:
    """Users with their location name, tolerating missing locations."""
    return select(UserModel, _locations.c.name).outerjoin(
        _locations, _locations.c.id == UserModel.location_id
    )


class UserRepository(IUserRepository):
    """Session-bound repository for users and their role assignments."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: AsyncSession scoped to the current service call
        """
        self._session = session

    async def list_all(self) -> list[UserRecord]:
        """List all users ordered by name, with location names inlined."""
        stmt = _select_users().order_by(UserModel.name, UserModel.id)
        result = await self._session.execute(stmt)
        return [_user_to_record(model, name) for model, name in result.all()]

    async def get_by_id(self, user_id: int) -> UserRecord | None:
        """Retrieve a user by local id, or None if not found."""
        stmt = _select_users().where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        row = result.one_or_none()
        if row is None:
            return None
        return _user_to_record(*row)

    async def get_by_external_id(self, external_id: str) -> UserRecord | None:
        """Retrieve a user by identity-provider object id, or None."""
        stmt = _select_users().where(UserModel.external_id == external_id)
        result = await self._session.execute(stmt)
        row = result.one_or_none()
        if row is None:
            return None
        return _user_to_record(*row)

    async def create(
        self,
        external_id: str,
        name: str,
        is_active: bool,
        is_admin: bool,
        location_id: int,
    ) -> UserRecord:
        """Insert a new user.

        The flush surfaces a unique violation on external_id immediately.

        Returns:
            The persisted UserRecord with its generated id
        """
        model = UserModel(
            external_id=external_id,
            name=name,
            is_active=is_active,
            is_admin=is_admin,
            location_id=location_id,
        )
        self._session.add(model)
        await self._session.flush()

        location_name = await self._session.scalar(
            select(_locations.c.name).where(_locations.c.id == location_id)
        )
        return _user_to_record(model, location_name)

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
        model = await self._session.get(UserModel, user_id)
        if model is None:
            return False

        model.is_active = is_active
        model.is_admin = is_admin
        model.location_id = location_id
        await self._session.flush()
        return True

    async def lowest_location_id(self) -> int | None:
        """Id of the first location, or None when no location exists."""
        return await self._session.scalar(select(func.min(_locations.c.id)))

    async def get_roles(self, user_id: int) -> list[RoleRecord] | None:
        """Roles assigned to a user, with their permissions.

        Returns:
            List of RoleRecords ordered by name, or None if the user does not exist
        """
        model = await self._session.get(UserModel, user_id)
        if model is None:
            return None
        return [role_to_record(role) for role in model.roles]

    async def add_role(self, user_id: int, role_id: int) -> bool:
        """Assign a role to a user.

        Returns:
            True if a new assignment was recorded, False if already held

        Raises:
            UserNotFoundError: If the user does not exist
            RoleNotFoundError: If the role does not exist
        """
        model = await self._session.get(UserModel, user_id)
        if model is None:
            raise UserNotFoundError(user_id)

        role = await self._session.get(RoleModel, role_id)
        if role is None:
            raise RoleNotFoundError(role_id)

        if any(held.id == role_id for held in model.roles):
            return False

        model.roles.append(role)
        await self._session.flush()
        return True

    async def remove_role(self, user_id: int, role_id: int) -> bool:
        """Remove a role from a user.

        Returns:
            True if removed, False if the assignment did not exist

        Raises:
            UserNotFoundError: If the user does not exist
        """
        model = await self._session.get(UserModel, user_id)
        if model is None:
            raise UserNotFoundError(user_id)

        held = next((role for role in model.roles if role.id == role_id), None)
        if held is None:
            return False

        model.roles.remove(held)
        await self._session.flush()
        return True
