"""Application services for Inventory bounded context."""

from inventory.application.services.external_application_service import (
    ExternalApplicationService,
)
from inventory.application.services.location_service import LocationService
from inventory.application.services.machine_service import MachineService
from inventory.application.services.seed_service import SeedService

__all__ = [
    "ExternalApplicationService",
    "LocationService",
    "MachineService",
    "SeedService",
]
