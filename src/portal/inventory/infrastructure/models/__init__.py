"""SQLAlchemy ORM models for Inventory bounded context.

These models map to database tables and are used by repository implementations.
"""

from inventory.infrastructure.models.external_application import (
    ExternalApplicationModel,
)
from inventory.infrastructure.models.location import LocationModel
from inventory.infrastructure.models.machine import MachineModel

__all__ = [
    "ExternalApplicationModel",
    "LocationModel",
    "MachineModel",
]
