"""Integration tests for roles, permissions and their evaluation."""

import pytest
import pytest_asyncio
from sqlalchemy import func, select

from iam.application.value_objects import RoleInput
from iam.domain.value_objects import ExternalIdentity, PermissionName
from iam.infrastructure.models import user_roles
from iam.ports.exceptions import (
    PermissionGrantNotFoundError,
    PermissionNotFoundError,
    RoleAssignmentNotFoundError,
    RoleNotFoundError,
    UserNotFoundError,
)
from infrastructure.database.exceptions import ConstraintViolationError

pytestmark = pytest.mark.integration


async def _permission_id(services, name: str) -> int:
    permission = await services.permissions.get_by_name(name)
    assert permission is not None
    return permission.id


@pytest_asyncio.fixture
async def catalogue(services):
    await services.permissions.ensure_permissions(PermissionName)
    return services


@pytest_asyncio.fixture
async def editor(catalogue):
    """A user holding an Editor role with ViewUsers and EditUsers."""
    services = catalogue
    role = await services.roles.create_role(
        RoleInput(
            name="Editor",
            permission_ids=[
                await _permission_id(services, "ViewUsers"),
                await _permission_id(services, "EditUsers"),
            ],
        )
    )
    user = await services.reconciliation.reconcile(
        ExternalIdentity(object_id="oid-editor", display_name="Eddie")
    )
    await services.users.assign_role(user.id, role.id)
    return user, role


class TestPermissionEvaluation:
    @pytest.mark.asyncio
    async def test_granted_through_assigned_role(self, services, editor):
        user, _ = editor

        assert await services.permission_evaluator.has_permission(user.id, "EditUsers")
        assert not await services.permission_evaluator.has_permission(
            user.id, "ManageSettings"
        )
        assert await services.permission_evaluator.has_role(user.id, "Editor")

    @pytest.mark.asyncio
    async def test_unknown_user_is_denied(self, services, editor):
        evaluator = services.permission_evaluator

        assert await evaluator.has_permission(9999, "EditUsers") is False
        assert await evaluator.has_role(9999, "Editor") is False

    @pytest.mark.asyncio
    async def test_roles_for_unknown_user_raises(self, services):
        with pytest.raises(UserNotFoundError):
            await services.permission_evaluator.roles_for(9999)

    @pytest.mark.asyncio
    async def test_roles_for_lists_permissions(self, services, editor):
        user, _ = editor

        roles = await services.permission_evaluator.roles_for(user.id)

        assert [role.name for role in roles] == ["Editor"]
        assert roles[0].permission_names == {"EditUsers", "ViewUsers"}


class TestRoleAssignments:
    @pytest.mark.asyncio
    async def test_double_assignment_stores_one_row(
        self, services, editor, session_factory
    ):
        user, role = editor

        await services.users.assign_role(user.id, role.id)

        async with session_factory() as session:
            count = await session.scalar(
                select(func.count())
                .select_from(user_roles)
                .where(user_roles.c.user_id == user.id)
            )
        assert count == 1

    @pytest.mark.asyncio
    async def test_removing_unassigned_role_raises(self, services, catalogue):
        user = await services.reconciliation.reconcile(ExternalIdentity(object_id="oid-1"))
        role = await services.roles.create_role(RoleInput(name="Viewer"))

        with pytest.raises(RoleAssignmentNotFoundError):
            await services.users.remove_role(user.id, role.id)

    @pytest.mark.asyncio
    async def test_remove_role_revokes_permissions(self, services, editor):
        user, role = editor

        await services.users.remove_role(user.id, role.id)

        assert not await services.permission_evaluator.has_permission(
            user.id, "EditUsers"
        )

    @pytest.mark.asyncio
    async def test_assigning_unknown_role_raises(self, services):
        user = await services.reconciliation.reconcile(ExternalIdentity(object_id="oid-1"))

        with pytest.raises(RoleNotFoundError):
            await services.users.assign_role(user.id, 9999)

    @pytest.mark.asyncio
    async def test_assigning_to_unknown_user_raises(self, services):
        role = await services.roles.create_role(RoleInput(name="Viewer"))

        with pytest.raises(UserNotFoundError):
            await services.users.assign_role(9999, role.id)


class TestRoleLifecycle:
    @pytest.mark.asyncio
    async def test_update_replaces_permission_set(self, services, editor):
        user, role = editor
        view_machines = await _permission_id(services, "ViewMachines")

        updated = await services.roles.update_role(
            role.id, RoleInput(name="Machinist", permission_ids=[view_machines])
        )

        assert updated is True
        permissions = await services.roles.get_permissions_for_role(role.id)
        assert [p.name for p in permissions] == ["ViewMachines"]
        assert not await services.permission_evaluator.has_permission(
            user.id, "EditUsers"
        )

    @pytest.mark.asyncio
    async def test_delete_removes_assignments(self, services, editor):
        user, role = editor

        assert await services.roles.delete_role(role.id) is True

        assert await services.permission_evaluator.roles_for(user.id) == []
        assert await services.roles.get_role(role.id) is None

    @pytest.mark.asyncio
    async def test_missing_role_update_and_delete_return_false(self, services):
        assert await services.roles.update_role(9999, RoleInput(name="X")) is False
        assert await services.roles.delete_role(9999) is False

    @pytest.mark.asyncio
    async def test_duplicate_role_name_violates_constraint(self, services):
        await services.roles.create_role(RoleInput(name="Viewer"))

        with pytest.raises(ConstraintViolationError):
            await services.roles.create_role(RoleInput(name="Viewer"))

    @pytest.mark.asyncio
    async def test_unknown_permission_id_rejected(self, services):
        with pytest.raises(PermissionNotFoundError):
            await services.roles.create_role(
                RoleInput(name="Broken", permission_ids=[9999])
            )
        assert await services.roles.list_roles() == []


class TestPermissionGrants:
    @pytest.mark.asyncio
    async def test_grant_is_idempotent_and_revoke_is_strict(self, services, catalogue):
        role = await services.roles.create_role(RoleInput(name="Viewer"))
        view_users = await _permission_id(services, "ViewUsers")

        await services.roles.assign_permission_to_role(role.id, view_users)
        await services.roles.assign_permission_to_role(role.id, view_users)

        permissions = await services.roles.get_permissions_for_role(role.id)
        assert [p.name for p in permissions] == ["ViewUsers"]

        await services.roles.remove_permission_from_role(role.id, view_users)
        with pytest.raises(PermissionGrantNotFoundError):
            await services.roles.remove_permission_from_role(role.id, view_users)

    @pytest.mark.asyncio
    async def test_permissions_for_unknown_role_raise(self, services):
        with pytest.raises(RoleNotFoundError):
            await services.roles.get_permissions_for_role(9999)


class TestPermissionCatalogue:
    @pytest.mark.asyncio
    async def test_ensure_is_idempotent(self, services):
        assert await services.permissions.ensure_permissions(PermissionName) == 17
        assert await services.permissions.ensure_permissions(PermissionName) == 0

        names = [p.name for p in await services.permissions.list_permissions()]
        assert names == sorted(str(p) for p in PermissionName)
