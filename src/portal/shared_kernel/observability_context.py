"""Request-scoped metadata carried by every probe.

Probes merge the context into each event they log, so one login can be
followed from reconciliation through the permission checks after it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ObservationContext:
    """Immutable context containing metadata for observability.

    Captures request-scoped metadata that should be included with all
    instrumentation events, so that a reconciliation at login can be
    correlated with the permission checks that follow it.

    Attributes:
        request_id: Unique identifier for the current request/operation.
        actor_id: Local id of the user performing the operation (if known).
        external_id: Identity-provider object id of the actor (if known).
        extra: Additional contextual metadata.

    Example:
        context = ObservationContext(request_id="req-123", actor_id=7)
        probe = DefaultReconciliationProbe().with_context(context)
    """

    request_id: str | None = None
    actor_id: int | None = None
    external_id: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        """Convert context to a dictionary for logging.

        Only includes non-None values to keep logs clean.
        """
        result: dict[str, Any] = {}
        if self.request_id is not None:
            result["request_id"] = self.request_id
        if self.actor_id is not None:
            result["actor_id"] = self.actor_id
        if self.external_id is not None:
            result["external_id"] = self.external_id
        result.update(self.extra)
        return result

    def with_actor(self, actor_id: int) -> ObservationContext:
        """Create a new context with the acting user set."""
        return ObservationContext(
            request_id=self.request_id,
            actor_id=actor_id,
            external_id=self.external_id,
            extra=self.extra,
        )

    def with_extra(self, **kwargs: Any) -> ObservationContext:
        """Create a new context with additional metadata."""
        new_extra = {**self.extra, **kwargs}
        return ObservationContext(
            request_id=self.request_id,
            actor_id=self.actor_id,
            external_id=self.external_id,
            extra=new_extra,
        )
