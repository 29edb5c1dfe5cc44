"""Domain probes for infrastructure observability.

Domain probes provide a high-level instrumentation API oriented around
domain semantics, keeping infrastructure code clean and testable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class DatabaseProbe(Protocol):
    """Domain probe for database lifecycle and storage failures."""

    def engine_created(self, url: str) -> None:
        """Record that the database engine was created."""
        ...

    def engine_disposed(self) -> None:
        """Record that the database engine was disposed."""
        ...

    def schema_created(self, tables: list[str]) -> None:
        """Record that the relational schema was created."""
        ...

    def constraint_violated(self, error: str) -> None:
        """Record that a write was rejected by an integrity constraint."""
        ...

    def storage_failed(self, error: str) -> None:
        """Record that a storage operation failed."""
        ...

    def with_context(self, context: ObservationContext) -> DatabaseProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultDatabaseProbe:
    """Default implementation of DatabaseProbe using structlog.

    Supports observation context for including request-scoped metadata
    with all log events.
    """

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

    def with_context(self, context: ObservationContext) -> DefaultDatabaseProbe:
        """Create a new probe with observation context bound."""
        return DefaultDatabaseProbe(logger=self._logger, context=context)

    def engine_created(self, url: str) -> None:
        """Record that the database engine was created."""
        self._logger.info(
            "database_engine_created",
            url=url,
            **self._get_context_kwargs(),
        )

    def engine_disposed(self) -> None:
        """Record that the database engine was disposed."""
        self._logger.info(
            "database_engine_disposed",
            **self._get_context_kwargs(),
        )

    def schema_created(self, tables: list[str]) -> None:
        """Record that the relational schema was created."""
        self._logger.info(
            "database_schema_created",
            tables=tables,
            table_count=len(tables),
            **self._get_context_kwargs(),
        )

    def constraint_violated(self, error: str) -> None:
        """Record that a write was rejected by an integrity constraint."""
        self._logger.warning(
            "database_constraint_violated",
            error=error,
            **self._get_context_kwargs(),
        )

    def storage_failed(self, error: str) -> None:
        """Record that a storage operation failed."""
        self._logger.error(
            "database_storage_failed",
            error=error,
            **self._get_context_kwargs(),
        )
