"""Unit tests for UserService."""

from unittest.mock import MagicMock, create_autospec

import pytest
from pydantic import ValidationError

from iam.application.observability import UserServiceProbe
from iam.application.services.user_service import UserService
from iam.application.value_objects import UserUpdate
from iam.domain.records import UserRecord
from iam.ports.exceptions import (
    RoleAssignmentNotFoundError,
    RoleNotFoundError,
    UserNotFoundError,
)
from iam.ports.repositories import IUserRepository


@pytest.fixture
def mock_user_repository():
    return create_autospec(IUserRepository, instance=True)


@pytest.fixture
def mock_probe():
    return create_autospec(UserServiceProbe, instance=True)


@pytest.fixture
def user_service(mock_session_factory, mock_user_repository, mock_probe):
    return UserService(
        session_factory=mock_session_factory,
        user_repository_factory=MagicMock(return_value=mock_user_repository),
        probe=mock_probe,
    )


class TestUserServiceInit:
    def test_uses_default_probe_when_not_provided(self, mock_session_factory):
        service = UserService(
            session_factory=mock_session_factory,
            user_repository_factory=MagicMock(),
        )
        assert service._probe is not None


class TestListUsers:
    @pytest.mark.asyncio
    async def test_returns_repository_listing(
        self, user_service, mock_user_repository, mock_probe
    ):
        users = [
            UserRecord(
                id=1,
                external_id="oid-1",
                name="Ada",
                is_active=True,
                is_admin=False,
                location_id=1,
                location_name="Pitten",
            )
        ]
        mock_user_repository.list_all.return_value = users

        assert await user_service.list_users() == users
        mock_probe.users_listed.assert_called_once_with(count=1)


class TestGetByExternalId:
    @pytest.mark.asyncio
    async def test_returns_none_when_unknown(self, user_service, mock_user_repository):
        mock_user_repository.get_by_external_id.return_value = None

        assert await user_service.get_by_external_id("oid-x") is None


class TestUpdateUser:
    @pytest.mark.asyncio
    async def test_updates_settings(self, user_service, mock_user_repository, mock_probe):
        mock_user_repository.update.return_value = True

        await user_service.update_user(
            3, UserUpdate(is_active=False, is_admin=True, location_id=2)
        )

        mock_user_repository.update.assert_awaited_once_with(
            user_id=3, is_active=False, is_admin=True, location_id=2
        )
        mock_probe.user_updated.assert_called_once_with(
            user_id=3, is_active=False, is_admin=True
        )

    @pytest.mark.asyncio
    async def test_missing_user_raises(self, user_service, mock_user_repository, mock_probe):
        mock_user_repository.update.return_value = False

        with pytest.raises(UserNotFoundError, match="User with ID 3 not found."):
            await user_service.update_user(
                3, UserUpdate(is_active=True, is_admin=False, location_id=1)
            )

        mock_probe.user_not_found.assert_called_once_with(user_id=3)
        mock_probe.user_updated.assert_not_called()

    def test_update_rejects_negative_location(self):
        with pytest.raises(ValidationError):
            UserUpdate(is_active=True, is_admin=False, location_id=-1)


class TestAssignRole:
    @pytest.mark.asyncio
    async def test_new_assignment(self, user_service, mock_user_repository, mock_probe):
        mock_user_repository.add_role.return_value = True

        await user_service.assign_role(1, 2)

        mock_user_repository.add_role.assert_awaited_once_with(1, 2)
        mock_probe.role_assigned.assert_called_once_with(
            user_id=1, role_id=2, was_new=True
        )

    @pytest.mark.asyncio
    async def test_already_held_is_not_an_error(
        self, user_service, mock_user_repository, mock_probe
    ):
        mock_user_repository.add_role.return_value = False

        await user_service.assign_role(1, 2)

        mock_probe.role_assigned.assert_called_once_with(
            user_id=1, role_id=2, was_new=False
        )

    @pytest.mark.asyncio
    async def test_unknown_role_propagates(
        self, user_service, mock_user_repository, mock_probe
    ):
        mock_user_repository.add_role.side_effect = RoleNotFoundError(2)

        with pytest.raises(RoleNotFoundError):
            await user_service.assign_role(1, 2)

        mock_probe.operation_failed.assert_called_once()


class TestRemoveRole:
    @pytest.mark.asyncio
    async def test_removes(self, user_service, mock_user_repository, mock_probe):
        mock_user_repository.remove_role.return_value = True

        await user_service.remove_role(1, 2)

        mock_probe.role_removed.assert_called_once_with(user_id=1, role_id=2)

    @pytest.mark.asyncio
    async def test_absent_assignment_raises(self, user_service, mock_user_repository):
        mock_user_repository.remove_role.return_value = False

        with pytest.raises(RoleAssignmentNotFoundError):
            await user_service.remove_role(1, 2)
