"""Protocol for first-run seeding observability."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class SeedProbe(Protocol):
    """Domain probe for default data seeding."""

    def seeding_skipped(self, reason: str) -> None:
        ...

    def defaults_seeded(self, locations_created: int, machines_created: int) -> None:
        ...

    def seeding_failed(self, error: str) -> None:
        ...

    def with_context(self, context: ObservationContext) -> SeedProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultSeedProbe:
    """Default implementation of SeedProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultSeedProbe:
        """Create a new probe with observation context bound."""
        return DefaultSeedProbe(logger=self._logger, context=context)

    def seeding_skipped(self, reason: str) -> None:
        self._logger.info(
            "inventory_seeding_skipped",
            reason=reason,
            **self._get_context_kwargs(),
        )

    def defaults_seeded(self, locations_created: int, machines_created: int) -> None:
        self._logger.info(
            "inventory_defaults_seeded",
            locations_created=locations_created,
            machines_created=machines_created,
            **self._get_context_kwargs(),
        )

    def seeding_failed(self, error: str) -> None:
        self._logger.error(
            "inventory_seeding_failed",
            error=error,
            **self._get_context_kwargs(),
        )
