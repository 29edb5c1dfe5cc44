"""Protocol for role service observability."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class RoleServiceProbe(Protocol):
    """Domain probe for role and permission-grant operations."""

    def role_created(self, role_id: int, name: str, permission_count: int) -> None:
        ...

    def role_updated(self, role_id: int, name: str, permission_count: int) -> None:
        ...

    def role_deleted(self, role_id: int) -> None:
        ...

    def role_not_found(self, role_id: int) -> None:
        ...

    def permission_granted(self, role_id: int, permission_id: int, was_new: bool) -> None:
        ...

    def permission_revoked(self, role_id: int, permission_id: int) -> None:
        ...

    def operation_failed(self, operation: str, error: str, **details: Any) -> None:
        ...

    def with_context(self, context: ObservationContext) -> RoleServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultRoleServiceProbe:
    """Default implementation of RoleServiceProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultRoleServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultRoleServiceProbe(logger=self._logger, context=context)

    def role_created(self, role_id: int, name: str, permission_count: int) -> None:
        self._logger.info(
            "role_created",
            role_id=role_id,
            name=name,
            permission_count=permission_count,
            **self._get_context_kwargs(),
        )

    def role_updated(self, role_id: int, name: str, permission_count: int) -> None:
        self._logger.info(
            "role_updated",
            role_id=role_id,
            name=name,
            permission_count=permission_count,
            **self._get_context_kwargs(),
        )

    def role_deleted(self, role_id: int) -> None:
        self._logger.info(
            "role_deleted",
            role_id=role_id,
            **self._get_context_kwargs(),
        )

    def role_not_found(self, role_id: int) -> None:
        self._logger.warning(
            "role_not_found",
            role_id=role_id,
            **self._get_context_kwargs(),
        )

    def permission_granted(self, role_id: int, permission_id: int, was_new: bool) -> None:
        self._logger.info(
            "role_permission_granted",
            role_id=role_id,
            permission_id=permission_id,
            was_new=was_new,
            **self._get_context_kwargs(),
        )

    def permission_revoked(self, role_id: int, permission_id: int) -> None:
        self._logger.info(
            "role_permission_revoked",
            role_id=role_id,
            permission_id=permission_id,
            **self._get_context_kwargs(),
        )

    def operation_failed(self, operation: str, error: str, **details: Any) -> None:
        self._logger.error(
            "role_operation_failed",
            operation=operation,
            error=error,
            **details,
            **self._get_context_kwargs(),
        )
