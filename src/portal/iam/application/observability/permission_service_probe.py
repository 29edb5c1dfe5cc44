"""Protocol for permission catalogue observability."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class PermissionServiceProbe(Protocol):
    """Domain probe for the permission catalogue."""

    def permissions_ensured(self, requested: int, inserted: int) -> None:
        """Record that the permission catalogue was topped up."""
        ...

    def operation_failed(self, operation: str, error: str) -> None:
        """Record that a catalogue operation failed."""
        ...

    def with_context(self, context: ObservationContext) -> PermissionServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultPermissionServiceProbe:
    """Default implementation of PermissionServiceProbe using structlog."""

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

    def with_context(
        self, context: ObservationContext
    ) -> DefaultPermissionServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultPermissionServiceProbe(logger=self._logger, context=context)

    def permissions_ensured(self, requested: int, inserted: int) -> None:
        """Record that the permission catalogue was topped up."""
        self._logger.info(
            "permissions_ensured",
            requested=requested,
            inserted=inserted,
            **self._get_context_kwargs(),
        )

    def operation_failed(self, operation: str, error: str) -> None:
        """Record that a catalogue operation failed."""
        self._logger.error(
            "permission_operation_failed",
            operation=operation,
            error=error,
            **self._get_context_kwargs(),
        )
