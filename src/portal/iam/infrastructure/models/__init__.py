"""SQLAlchemy ORM models for IAM bounded context.

These models map to database tables and are used by repository implementations.
"""

from iam.infrastructure.models.role import (
    PermissionModel,
    RoleModel,
    role_permissions,
    user_roles,
)
from iam.infrastructure.models.user import UserModel

__all__ = [
    "PermissionModel",
    "RoleModel",
    "UserModel",
    "role_permissions",
    "user_roles",
]
