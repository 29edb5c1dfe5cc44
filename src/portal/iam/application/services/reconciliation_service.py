"""Reconciliation of SSO identities against the local user table.

Handles user provisioning from SSO with JIT (just-in-time) creation.
"""

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from iam.application.observability import (
    DefaultReconciliationProbe,
    ReconciliationProbe,
)
from iam.domain.records import UserRecord
from iam.domain.value_objects import ExternalIdentity
from iam.ports.exceptions import InvalidIdentityError
from iam.ports.repositories import IUserRepository
from infrastructure.database.session import transaction

DEFAULT_FALLBACK_LOCATION_ID = 1


class ReconciliationService:
    """Maps an authenticated external identity to exactly one local user.

    The lookup and the insert run in one transaction. Two first logins for
    the same identity can still race; the unique index on the external id
    makes the loser fail with ConstraintViolationError. There is no retry.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        user_repository_factory: Callable[[AsyncSession], IUserRepository],
        fallback_location_id: int = DEFAULT_FALLBACK_LOCATION_ID,
        probe: ReconciliationProbe | None = None,
    ):
        """Initialize ReconciliationService with dependencies.

        Args:
            session_factory: Factory for per-call database sessions
            user_repository_factory: Builds a user repository bound to a session
            fallback_location_id: Location given to new users when no
                location exists yet
            probe: Optional domain probe for observability
        """
        self._session_factory = session_factory
        self._user_repository_factory = user_repository_factory
        self._fallback_location_id = fallback_location_id
        self._probe = probe or DefaultReconciliationProbe()

    async def reconcile(self, identity: ExternalIdentity | None) -> UserRecord:
        """Return the local user for an identity, creating it on first login.

        An existing user is returned unchanged; name, flags and location
        are never refreshed from the claims.

        Args:
            identity: Claims of the authenticated principal

        Returns:
            The UserRecord (existing or newly created)

        Raises:
            InvalidIdentityError: If identity or its object id is missing
            ConstraintViolationError: If a concurrent login created the user first
            StorageError: If the store fails
        """
        if identity is None:
            self._probe.identity_rejected(reason="no identity")
            raise InvalidIdentityError("No authenticated identity was provided.")
        if not identity.has_object_id:
            self._probe.identity_rejected(reason="missing object id")
            raise InvalidIdentityError("Identity carries no object id claim.")

        external_id = identity.object_id
        try:
            async with transaction(self._session_factory) as session:
                users = self._user_repository_factory(session)

                existing = await users.get_by_external_id(external_id)
                if existing is not None:
                    self._probe.user_reconciled(
                        user_id=existing.id,
                        external_id=external_id,
                        was_created=False,
                    )
                    return existing

                location_id = await users.lowest_location_id()
                if location_id is None:
                    location_id = self._fallback_location_id

                user = await users.create(
                    external_id=external_id,
                    name=identity.name_or_default,
                    is_active=True,
                    is_admin=False,
                    location_id=location_id,
                )

            self._probe.user_reconciled(
                user_id=user.id,
                external_id=external_id,
                was_created=True,
            )
            return user

        except Exception as e:
            self._probe.reconciliation_failed(external_id=external_id, error=str(e))
            raise
