"""Value objects for IAM domain.

Value objects are immutable descriptors that provide type safety and
domain semantics for identifiers and domain concepts.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

UNKNOWN_USER_NAME = "Unknown User"


class PermissionName(StrEnum):
    """Capability names known to the portal.

    The permission table is a flat namespace; these are the names seeded at
    startup and referenced by the presentation layer's access policies.
    """

    MANAGE_USERS = "ManageUsers"
    VIEW_USERS = "ViewUsers"
    EDIT_USERS = "EditUsers"
    MANAGE_ROLES = "ManageRoles"
    VIEW_ROLES = "ViewRoles"
    ASSIGN_ROLES = "AssignRoles"
    MANAGE_PERMISSIONS = "ManagePermissions"
    VIEW_PERMISSIONS = "ViewPermissions"
    MANAGE_SETTINGS = "ManageSettings"
    ACCESS_ADMIN_PAGES = "AccessAdminPages"
    VIEW_DASHBOARD = "ViewDashboard"
    MANAGE_MACHINES = "ManageMachines"
    VIEW_MACHINES = "ViewMachines"
    MANAGE_LOCATIONS = "ManageLocations"
    VIEW_LOCATIONS = "ViewLocations"
    MANAGE_EXTERNAL_APPLICATIONS = "ManageExternalApplications"
    VIEW_EXTERNAL_APPLICATIONS = "ViewExternalApplications"

    @property
    def policy_name(self) -> str:
        """Name of the access policy guarding this permission."""
        return f"Require{self.value}Permission"


@dataclass(frozen=True)
class ExternalIdentity:
    """The claim bundle handed over after a successful SSO login.

    Only two claims matter to the portal: the identity provider's object id
    (the stable key for the local user) and an optional display name.
    Validation of the object id happens at reconciliation time so that an
    empty claim is reported as a caller error there.
    """

    object_id: str | None
    display_name: str | None = None

    @classmethod
    def from_claims(
        cls,
        claims: Mapping[str, Any],
        object_id_claim: str,
        name_claim: str,
    ) -> ExternalIdentity:
        """Build an identity from a raw claim mapping.

        Args:
            claims: Claims of the authenticated principal
            object_id_claim: Name of the claim carrying the object id
            name_claim: Name of the claim carrying the display name

        Returns:
            ExternalIdentity with whatever the claims provided
        """
        object_id = claims.get(object_id_claim)
        display_name = claims.get(name_claim)
        return cls(
            object_id=str(object_id) if object_id is not None else None,
            display_name=str(display_name) if display_name is not None else None,
        )

    @property
    def has_object_id(self) -> bool:
        """Whether the object id claim is present and non-blank."""
        return bool(self.object_id and self.object_id.strip())

    @property
    def name_or_default(self) -> str:
        """Display name, falling back to the placeholder for nameless logins."""
        return self.display_name if self.display_name else UNKNOWN_USER_NAME
