"""Protocol for user administration service observability.

Defines the interface for domain probes that capture application-level
domain events for user service operations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class UserServiceProbe(Protocol):
    """Domain probe for user administration operations."""

    def users_listed(self, count: int) -> None:
        """Record that users were listed."""
        ...

    def user_updated(self, user_id: int, is_active: bool, is_admin: bool) -> None:
        """Record that a user's administrative settings changed."""
        ...

    def user_not_found(self, user_id: int) -> None:
        """Record that an operation addressed a user that does not exist."""
        ...

    def role_assigned(self, user_id: int, role_id: int, was_new: bool) -> None:
        """Record that a role was assigned (or was already held)."""
        ...

    def role_removed(self, user_id: int, role_id: int) -> None:
        """Record that a role was removed from a user."""
        ...

    def operation_failed(self, operation: str, error: str, **details: Any) -> None:
        """Record that a user operation failed."""
        ...

    def with_context(self, context: ObservationContext) -> UserServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultUserServiceProbe:
    """Default implementation of UserServiceProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultUserServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultUserServiceProbe(logger=self._logger, context=context)

    def users_listed(self, count: int) -> None:
        """Record that users were listed."""
        self._logger.debug(
            "users_listed",
            count=count,
            **self._get_context_kwargs(),
        )

    def user_updated(self, user_id: int, is_active: bool, is_admin: bool) -> None:
        """Record that a user's administrative settings changed."""
        self._logger.info(
            "user_updated",
            user_id=user_id,
            is_active=is_active,
            is_admin=is_admin,
            **self._get_context_kwargs(),
        )

    def user_not_found(self, user_id: int) -> None:
        """Record that an operation addressed a user that does not exist."""
        self._logger.warning(
            "user_not_found",
            user_id=user_id,
            **self._get_context_kwargs(),
        )

    def role_assigned(self, user_id: int, role_id: int, was_new: bool) -> None:
        """Record that a role was assigned (or was already held)."""
        self._logger.info(
            "user_role_assigned",
            user_id=user_id,
            role_id=role_id,
            was_new=was_new,
            **self._get_context_kwargs(),
        )

    def role_removed(self, user_id: int, role_id: int) -> None:
        """Record that a role was removed from a user."""
        self._logger.info(
            "user_role_removed",
            user_id=user_id,
            role_id=role_id,
            **self._get_context_kwargs(),
        )

    def operation_failed(self, operation: str, error: str, **details: Any) -> None:
        """Record that a user operation failed."""
        self._logger.error(
            "user_operation_failed",
            operation=operation,
            error=error,
            **details,
            **self._get_context_kwargs(),
        )
