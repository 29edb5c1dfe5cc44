"""Domain-Oriented Observability for Inventory application layer."""

from inventory.application.observability.inventory_service_probe import (
    DefaultInventoryServiceProbe,
    InventoryServiceProbe,
)
from inventory.application.observability.seed_probe import (
    DefaultSeedProbe,
    SeedProbe,
)

__all__ = [
    "InventoryServiceProbe",
    "DefaultInventoryServiceProbe",
    "SeedProbe",
    "DefaultSeedProbe",
]
