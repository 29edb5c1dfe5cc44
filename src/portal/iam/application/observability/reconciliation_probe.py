"""Protocol for identity reconciliation observability.

Defines the interface for domain probes that capture what happens when an
SSO login is matched against the local user table.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class ReconciliationProbe(Protocol):
    """Domain probe for identity reconciliation."""

    def identity_rejected(self, reason: str) -> None:
        """Record that a login carried no usable object id."""
        ...

    def user_reconciled(
        self,
        user_id: int,
        external_id: str,
        was_created: bool,
    ) -> None:
        """Record that a login was matched to a local user (found or created)."""
        ...

    def reconciliation_failed(self, external_id: str, error: str) -> None:
        """Record that reconciliation failed."""
        ...

    def with_context(self, context: ObservationContext) -> ReconciliationProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultReconciliationProbe:
    """Default implementation of ReconciliationProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultReconciliationProbe:
        """Create a new probe with observation context bound."""
        return DefaultReconciliationProbe(logger=self._logger, context=context)

    def identity_rejected(self, reason: str) -> None:
        """Record that a login carried no usable object id."""
        self._logger.warning(
            "identity_rejected",
            reason=reason,
            **self._get_context_kwargs(),
        )

    def user_reconciled(
        self,
        user_id: int,
        external_id: str,
        was_created: bool,
    ) -> None:
        """Record that a login was matched to a local user."""
        self._logger.info(
            "user_reconciled",
            user_id=user_id,
            external_id=external_id,
            was_created=was_created,
            **self._get_context_kwargs(),
        )

    def reconciliation_failed(self, external_id: str, error: str) -> None:
        """Record that reconciliation failed."""
        self._logger.error(
            "user_reconciliation_failed",
            external_id=external_id,
            error=error,
            **self._get_context_kwargs(),
        )
