"""First-run seeding of default locations and machines."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from inventory.application.observability import DefaultSeedProbe, SeedProbe
from inventory.domain.records import SeedReport
from inventory.domain.value_objects import (
    DEFAULT_LOCATION_NAMES,
    default_machine_names,
)
from inventory.ports.repositories import ILocationRepository, IMachineRepository
from infrastructure.database.session import transaction


class SeedService:
    """Populates an empty inventory with the default sites and machines.

    Locations are only seeded into an empty table. Machines are only
    seeded alongside freshly seeded locations, and only if no machine
    exists yet, so re-running never duplicates anything.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        location_repository_factory: Callable[[AsyncSession], ILocationRepository],
        machine_repository_factory: Callable[[AsyncSession], IMachineRepository],
        location_names: Sequence[str] = DEFAULT_LOCATION_NAMES,
        probe: SeedProbe | None = None,
    ):
        self._session_factory = session_factory
        self._location_repository_factory = location_repository_factory
        self._machine_repository_factory = machine_repository_factory
        self._location_names = tuple(location_names)
        self._probe = probe or DefaultSeedProbe()

    async def seed_defaults(self) -> SeedReport:
        """Insert default locations and machines into an empty inventory.

        Returns:
            SeedReport with the number of rows inserted
        """
        try:
            async with transaction(self._session_factory) as session:
                locations = self._location_repository_factory(session)
                machines = self._machine_repository_factory(session)

                if await locations.exists_any():
                    self._probe.seeding_skipped(reason="locations exist")
                    return SeedReport()

                location_ids = await locations.create_many(self._location_names)

                machines_created = 0
                if await machines.exists_any():
                    self._probe.seeding_skipped(reason="machines exist")
                else:
                    machines_created = await machines.create_many(
                        [
                            (name, location_id)
                            for location_id in location_ids
                            for name in default_machine_names()
                        ]
                    )
        except Exception as e:
            self._probe.seeding_failed(error=str(e))
            raise

        report = SeedReport(
            locations_created=len(location_ids),
            machines_created=machines_created,
        )
        self._probe.defaults_seeded(
            locations_created=report.locations_created,
            machines_created=report.machines_created,
        )
        return report
