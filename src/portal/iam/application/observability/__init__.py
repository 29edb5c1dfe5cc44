"""Domain-Oriented Observability for IAM application layer.

Probes for application service operations following Domain-Oriented Observability patterns.
"""

from iam.application.observability.permission_evaluator_probe import (
    DefaultPermissionEvaluatorProbe,
    PermissionEvaluatorProbe,
)
from iam.application.observability.permission_service_probe import (
    DefaultPermissionServiceProbe,
    PermissionServiceProbe,
)
from iam.application.observability.reconciliation_probe import (
    DefaultReconciliationProbe,
    ReconciliationProbe,
)
from iam.application.observability.role_service_probe import (
    DefaultRoleServiceProbe,
    RoleServiceProbe,
)
from iam.application.observability.user_service_probe import (
    DefaultUserServiceProbe,
    UserServiceProbe,
)

__all__ = [
    "ReconciliationProbe",
    "DefaultReconciliationProbe",
    "PermissionEvaluatorProbe",
    "DefaultPermissionEvaluatorProbe",
    "UserServiceProbe",
    "DefaultUserServiceProbe",
    "RoleServiceProbe",
    "DefaultRoleServiceProbe",
    "PermissionServiceProbe",
    "DefaultPermissionServiceProbe",
]
