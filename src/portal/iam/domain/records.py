"""Read records for the IAM context.

Records are the transfer objects handed to the presentation collaborator.
Joined fields (location name, permission names) are flattened in.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PermissionRecord:
    """A single capability in the flat permission namespace."""

    id: int
    name: str


@dataclass(frozen=True)
class RoleRecord:
    """A role together with the permissions it grants."""

    id: int
    name: str
    permissions: tuple[PermissionRecord, ...] = field(default_factory=tuple)

    @property
    def permission_names(self) -> frozenset[str]:
        """Names of all granted permissions."""
        return frozenset(p.name for p in self.permissions)


@dataclass(frozen=True)
class UserRecord:
    """An application user as seen by administrators.

    ``location_name`` is empty when ``location_id`` does not resolve to an
    existing location; the reference is tolerated as dangling.
    """

    id: int
    external_id: str
    name: str
    is_active: bool
    is_admin: bool
    location_id: int
    location_name: str = ""

    def __str__(self) -> str:
        """Return string representation."""
        return f"User({self.name})"
