"""Read records for the inventory context.

References between locations, machines and users are soft: a record
whose reference dangles carries an empty or placeholder name rather than
failing to load.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LocationRecord:
    """A site, with derived counts of users and machines pointing at it."""

    id: int
    name: str
    user_count: int = 0
    machine_count: int = 0


@dataclass(frozen=True)
class MachineRecord:
    """A machine with the names of its location and assigned user inlined."""

    id: int
    name: str
    location_id: int
    location_name: str
    app_user_id: int | None
    assigned_user_name: str


@dataclass(frozen=True)
class ExternalApplicationRecord:
    """A shortcut to an external application."""

    id: int
    app_name: str
    app_url: str
    icon_name: str


@dataclass(frozen=True)
class SeedReport:
    """What a seeding run inserted."""

    locations_created: int = 0
    machines_created: int = 0

    @property
    def seeded(self) -> bool:
        return bool(self.locations_created or self.machines_created)
