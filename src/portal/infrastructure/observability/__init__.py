"""Probes for infrastructure-level events.

Application services own their own probes; this package covers what
happens below them: engine lifecycle, schema creation and storage
failures translated by the transaction scope.
"""

from shared_kernel.observability_context import ObservationContext
from infrastructure.observability.probes import (
    DatabaseProbe,
    DefaultDatabaseProbe,
)

__all__ = [
    "DatabaseProbe",
    "DefaultDatabaseProbe",
    "ObservationContext",
]
