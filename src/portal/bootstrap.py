"""Composition root for the portal core.

Builds the engine and session factory from settings, creates the schema,
wires every service with its repository factory and probe, and seeds
default data. The hosting layer calls ``start`` once at startup and
``shutdown`` when it stops.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from iam.application.services import (
    PermissionEvaluator,
    PermissionService,
    ReconciliationService,
    RoleService,
    UserService,
)
from iam.domain.value_objects import ExternalIdentity, PermissionName
import iam.infrastructure.models  # noqa: F401  (registers tables)
from iam.infrastructure.permission_repository import PermissionRepository
from iam.infrastructure.role_repository import RoleRepository
from iam.infrastructure.user_repository import UserRepository
from infrastructure.database.dependencies import (
    close_database_connections,
    get_engine,
    get_session_factory,
)
from infrastructure.database.models import Base
from infrastructure.logging import configure_logging
from infrastructure.observability import DatabaseProbe, DefaultDatabaseProbe
from infrastructure.settings import IdentitySettings, Settings, get_settings
from inventory.application.services import (
    ExternalApplicationService,
    LocationService,
    MachineService,
    SeedService,
)
from inventory.domain.records import SeedReport
from inventory.infrastructure.external_application_repository import (
    ExternalApplicationRepository,
)
import inventory.infrastructure.models  # noqa: F401  (registers tables)
from inventory.infrastructure.location_repository import LocationRepository
from inventory.infrastructure.machine_repository import MachineRepository


@dataclass(frozen=True)
class PortalServices:
    """Every application service, wired to one session factory."""

    reconciliation: ReconciliationService
    permission_evaluator: PermissionEvaluator
    users: UserService
    roles: RoleService
    permissions: PermissionService
    locations: LocationService
    machines: MachineService
    external_applications: ExternalApplicationService
    seeder: SeedService


def build_services(
    session_factory: async_sessionmaker[AsyncSession],
    identity_settings: IdentitySettings | None = None,
) -> PortalServices:
    """Wire all services against a session factory.

    Args:
        session_factory: Factory every service opens its sessions from
        identity_settings: Reconciliation settings; defaults apply when omitted

    Returns:
        PortalServices ready for use
    """
    identity_settings = identity_settings or IdentitySettings()
    return PortalServices(
        reconciliation=ReconciliationService(
            session_factory=session_factory,
            user_repository_factory=UserRepository,
            fallback_location_id=identity_settings.fallback_location_id,
        ),
        permission_evaluator=PermissionEvaluator(
            session_factory=session_factory,
            user_repository_factory=UserRepository,
        ),
        users=UserService(
            session_factory=session_factory,
            user_repository_factory=UserRepository,
        ),
        roles=RoleService(
            session_factory=session_factory,
            role_repository_factory=RoleRepository,
        ),
        permissions=PermissionService(
            session_factory=session_factory,
            permission_repository_factory=PermissionRepository,
        ),
        locations=LocationService(
            session_factory=session_factory,
            location_repository_factory=LocationRepository,
        ),
        machines=MachineService(
            session_factory=session_factory,
            machine_repository_factory=MachineRepository,
        ),
        external_applications=ExternalApplicationService(
            session_factory=session_factory,
            application_repository_factory=ExternalApplicationRepository,
        ),
        seeder=SeedService(
            session_factory=session_factory,
            location_repository_factory=LocationRepository,
            machine_repository_factory=MachineRepository,
        ),
    )


async def create_schema(engine: AsyncEngine, probe: DatabaseProbe | None = None) -> None:
    """Create all tables that do not exist yet."""
    probe = probe or DefaultDatabaseProbe()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    probe.schema_created(tables=sorted(Base.metadata.tables))


async def seed_defaults(services: PortalServices) -> SeedReport:
    """Seed the permission catalogue and the default inventory.

    Safe to run on every startup.
    """
    await services.permissions.ensure_permissions(PermissionName)
    return await services.seeder.seed_defaults()


async def start(settings: Settings | None = None) -> PortalServices:
    """Bring up the portal core.

    Configures logging, creates the engine and schema, wires the services
    and, unless disabled, seeds default data.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    await create_schema(get_engine())
    services = build_services(get_session_factory(), settings.identity)

    if settings.seed_on_startup:
        await seed_defaults(services)

    return services


async def shutdown() -> None:
    """Dispose the engine and its connection pool."""
    await close_database_connections()


def identity_from_claims(
    claims: Mapping[str, Any],
    identity_settings: IdentitySettings | None = None,
) -> ExternalIdentity:
    """Build the identity handed to reconciliation from raw login claims."""
    identity_settings = identity_settings or IdentitySettings()
    return ExternalIdentity.from_claims(
        claims,
        object_id_claim=identity_settings.object_id_claim,
        name_claim=identity_settings.name_claim,
    )
