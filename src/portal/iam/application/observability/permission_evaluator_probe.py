"""Protocol for permission evaluation observability."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class PermissionEvaluatorProbe(Protocol):
    """Domain probe for permission and role checks."""

    def permission_checked(self, user_id: int, permission: str, granted: bool) -> None:
        """Record the outcome of a permission check."""
        ...

    def role_checked(self, user_id: int, role: str, held: bool) -> None:
        """Record the outcome of a role membership check."""
        ...

    def unknown_user_denied(self, user_id: int) -> None:
        """Record that a check was denied because the user does not exist."""
        ...

    def permission_denied(self, user_id: int, permission: str) -> None:
        """Record that a required permission was missing."""
        ...

    def evaluation_failed(self, user_id: int, error: str) -> None:
        """Record that an evaluation could not be completed."""
        ...

    def with_context(self, context: ObservationContext) -> PermissionEvaluatorProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultPermissionEvaluatorProbe:
    """Default implementation of PermissionEvaluatorProbe using structlog.

    Successful checks are logged at debug level; they happen on every
    guarded request.
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

    def with_context(
        self, context: ObservationContext
    ) -> DefaultPermissionEvaluatorProbe:
        """Create a new probe with observation context bound."""
        return DefaultPermissionEvaluatorProbe(logger=self._logger, context=context)

    def permission_checked(self, user_id: int, permission: str, granted: bool) -> None:
        self._logger.debug(
            "permission_checked",
            user_id=user_id,
            permission=permission,
            granted=granted,
            **self._get_context_kwargs(),
        )

    def role_checked(self, user_id: int, role: str, held: bool) -> None:
        self._logger.debug(
            "role_checked",
            user_id=user_id,
            role=role,
            held=held,
            **self._get_context_kwargs(),
        )

    def unknown_user_denied(self, user_id: int) -> None:
        self._logger.warning(
            "unknown_user_denied",
            user_id=user_id,
            **self._get_context_kwargs(),
        )

    def permission_denied(self, user_id: int, permission: str) -> None:
        self._logger.warning(
            "permission_denied",
            user_id=user_id,
            permission=permission,
            **self._get_context_kwargs(),
        )

    def evaluation_failed(self, user_id: int, error: str) -> None:
        self._logger.error(
            "permission_evaluation_failed",
            user_id=user_id,
            error=error,
            **self._get_context_kwargs(),
        )
