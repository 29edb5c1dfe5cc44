"""Flattening of role assignments into authorization decisions.

Roles and permissions form two flat relations with no hierarchy, so a
user's effective permissions are simply the union over assigned roles.
"""

from __future__ import annotations

from collections.abc import Iterable

from iam.domain.records import RoleRecord


def effective_permissions(roles: Iterable[RoleRecord]) -> frozenset[str]:
    """Union of permission names granted by the given roles."""
    granted: set[str] = set()
    for role in roles:
        granted |= role.permission_names
    return frozenset(granted)


def grants_permission(roles: Iterable[RoleRecord], permission_name: str) -> bool:
    """Whether any of the roles grants the named permission."""
    return permission_name in effective_permissions(roles)


def holds_role(roles: Iterable[RoleRecord], role_name: str) -> bool:
    """Whether a role with the given name is among the roles."""
    return any(role.name == role_name for role in roles)
