"""Application services for IAM bounded context.

Application services orchestrate repositories and domain rules to fulfil
use cases. They are the "front door" to the IAM context. Each call opens
its own session from the injected session factory.
"""

from iam.application.services.permission_evaluator import PermissionEvaluator
from iam.application.services.permission_service import PermissionService
from iam.application.services.reconciliation_service import ReconciliationService
from iam.application.services.role_service import RoleService
from iam.application.services.user_service import UserService

__all__ = [
    "PermissionEvaluator",
    "PermissionService",
    "ReconciliationService",
    "RoleService",
    "UserService",
]
