"""Protocol for inventory CRUD service observability.

Locations, machines and external applications share one probe; every
event carries the entity kind it concerns.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class InventoryServiceProbe(Protocol):
    """Domain probe for inventory CRUD operations."""

    def entities_listed(self, entity: str, count: int) -> None:
        """Record that entities of a kind were listed."""
        ...

    def entity_created(self, entity: str, entity_id: int, name: str) -> None:
        """Record that an entity was created."""
        ...

    def entity_updated(self, entity: str, entity_id: int) -> None:
        """Record that an entity was updated."""
        ...

    def entity_deleted(self, entity: str, entity_id: int) -> None:
        """Record that an entity was deleted."""
        ...

    def entity_not_found(self, entity: str, entity_id: int, operation: str) -> None:
        """Record that an update or delete addressed a missing entity."""
        ...

    def operation_failed(self, entity: str, operation: str, error: str) -> None:
        """Record that an operation failed."""
        ...

    def with_context(self, context: ObservationContext) -> InventoryServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultInventoryServiceProbe:
    """Default implementation of InventoryServiceProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultInventoryServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultInventoryServiceProbe(logger=self._logger, context=context)

    def entities_listed(self, entity: str, count: int) -> None:
        """Record that entities of a kind were listed."""
        self._logger.debug(
            "inventory_entities_listed",
            entity=entity,
            count=count,
            **self._get_context_kwargs(),
        )

    def entity_created(self, entity: str, entity_id: int, name: str) -> None:
        """Record that an entity was created."""
        self._logger.info(
            "inventory_entity_created",
            entity=entity,
            entity_id=entity_id,
            name=name,
            **self._get_context_kwargs(),
        )

    def entity_updated(self, entity: str, entity_id: int) -> None:
        """Record that an entity was updated."""
        self._logger.info(
            "inventory_entity_updated",
            entity=entity,
            entity_id=entity_id,
            **self._get_context_kwargs(),
        )

    def entity_deleted(self, entity: str, entity_id: int) -> None:
        """Record that an entity was deleted."""
        self._logger.info(
            "inventory_entity_deleted",
            entity=entity,
            entity_id=entity_id,
            **self._get_context_kwargs(),
        )

    def entity_not_found(self, entity: str, entity_id: int, operation: str) -> None:
        """Record that an update or delete addressed a missing entity."""
        self._logger.warning(
            "inventory_entity_not_found",
            entity=entity,
            entity_id=entity_id,
            operation=operation,
            **self._get_context_kwargs(),
        )

    def operation_failed(self, entity: str, operation: str, error: str) -> None:
        """Record that an operation failed."""
        self._logger.error(
            "inventory_operation_failed",
            entity=entity,
            operation=operation,
            error=error,
            **self._get_context_kwargs(),
        )
