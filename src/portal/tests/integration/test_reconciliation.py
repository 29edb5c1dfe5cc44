"""Integration tests for identity reconciliation against a real database."""

import asyncio

import pytest

from iam.domain.value_objects import ExternalIdentity
from iam.infrastructure.models import UserModel
from iam.infrastructure.user_repository import UserRepository
from iam.ports.exceptions import InvalidIdentityError
from infrastructure.database.exceptions import ConstraintViolationError
from inventory.application.value_objects import LocationInput

pytestmark = pytest.mark.integration


class TestFirstLogin:
    @pytest.mark.asyncio
    async def test_creates_exactly_one_user(self, services, count_rows):
        user = await services.reconciliation.reconcile(
            ExternalIdentity(object_id="oid-ada", display_name="Ada Lovelace")
        )

        assert user.id is not None
        assert user.external_id == "oid-ada"
        assert user.name == "Ada Lovelace"
        assert user.is_active is True
        assert user.is_admin is False
        assert await count_rows(UserModel) == 1

    @pytest.mark.asyncio
    async def test_nameless_login(self, services):
        user = await services.reconciliation.reconcile(ExternalIdentity(object_id="oid-x"))

        assert user.name == "Unknown User"

    @pytest.mark.asyncio
    async def test_placeholder_location_when_none_exist(self, services):
        """Without locations the user gets location 1 and an empty location name."""
        user = await services.reconciliation.reconcile(ExternalIdentity(object_id="oid-x"))

        assert user.location_id == 1
        assert user.location_name == ""

    @pytest.mark.asyncio
    async def test_assigned_to_lowest_existing_location(self, services):
        first = await services.locations.create_location(LocationInput(name="Pitten"))
        await services.locations.create_location(LocationInput(name="Corlu"))

        user = await services.reconciliation.reconcile(ExternalIdentity(object_id="oid-x"))

        assert user.location_id == first.id
        assert user.location_name == "Pitten"


class TestRepeatLogin:
    @pytest.mark.asyncio
    async def test_returns_same_user_unchanged(self, services, count_rows):
        first = await services.reconciliation.reconcile(
            ExternalIdentity(object_id="oid-ada", display_name="Ada")
        )

        again = await services.reconciliation.reconcile(
            ExternalIdentity(object_id="oid-ada", display_name="Ada Renamed")
        )

        assert again == first
        assert again.name == "Ada"
        assert await count_rows(UserModel) == 1


class TestInvalidIdentity:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "identity",
        [None, ExternalIdentity(object_id=None), ExternalIdentity(object_id="")],
    )
    async def test_rejected_without_writes(self, services, count_rows, identity):
        with pytest.raises(InvalidIdentityError):
            await services.reconciliation.reconcile(identity)

        assert await count_rows(UserModel) == 0


class TestConcurrentFirstLogin:
    @pytest.mark.asyncio
    async def test_at_most_one_user_is_created(self, services, count_rows):
        """Racing first logins leave one row; losers see a constraint violation."""
        identity = ExternalIdentity(object_id="oid-race", display_name="Racer")

        results = await asyncio.gather(
            *(services.reconciliation.reconcile(identity) for _ in range(5)),
            return_exceptions=True,
        )

        assert await count_rows(UserModel) == 1
        users = [r for r in results if not isinstance(r, BaseException)]
        failures = [r for r in results if isinstance(r, BaseException)]
        assert users
        assert len({user.id for user in users}) == 1
        assert all(isinstance(f, ConstraintViolationError) for f in failures)

    @pytest.mark.asyncio
    async def test_stale_lookup_surfaces_constraint_violation(
        self, services, count_rows, monkeypatch
    ):
        """An insert that loses to an already committed row must not duplicate it."""
        identity = ExternalIdentity(object_id="oid-stale", display_name="Stale")
        await services.reconciliation.reconcile(identity)

        async def _not_found(self, external_id):
            return None

        monkeypatch.setattr(UserRepository, "get_by_external_id", _not_found)

        with pytest.raises(ConstraintViolationError):
            await services.reconciliation.reconcile(identity)

        assert await count_rows(UserModel) == 1
