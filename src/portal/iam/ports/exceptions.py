"""Domain exceptions for IAM bounded context.

These exceptions represent domain-level errors that can occur during
service and repository operations. The presentation collaborator is
responsible for turning them into user feedback.
"""

from shared_kernel.exceptions import InvalidInputError, NotFoundError


class InvalidIdentityError(InvalidInputError):
    """Raised when reconciliation receives no identity or no object id.

    Both cases are caller errors: the login handshake handed over an
    unusable claim bundle. Nothing is written.
    """

    pass


class UserNotFoundError(NotFoundError):
    """Raised when a user id does not resolve on a path that must surface it.

    Boolean permission and role checks never raise this; they deny instead.
    """

    def __init__(self, user_id: int):
        super().__init__(f"User with ID {user_id} not found.")
        self.user_id = user_id


class RoleNotFoundError(NotFoundError):
    """Raised when a role id does not resolve."""

    def __init__(self, role_id: int):
        super().__init__(f"Role with ID {role_id} not found.")
        self.role_id = role_id


class PermissionNotFoundError(NotFoundError):
    """Raised when a permission id does not resolve."""

    def __init__(self, permission_id: int):
        super().__init__(f"Permission with ID {permission_id} not found.")
        self.permission_id = permission_id


class RoleAssignmentNotFoundError(NotFoundError):
    """Raised when removing a role the user does not hold.

    Assigning an already-held role is a no-op, removing an absent one is
    not; the asymmetry is intentional.
    """

    def __init__(self, user_id: int, role_id: int):
        super().__init__(f"User {user_id} is not assigned role {role_id}.")
        self.user_id = user_id
        self.role_id = role_id


class PermissionGrantNotFoundError(NotFoundError):
    """Raised when removing a permission the role does not grant."""

    def __init__(self, role_id: int, permission_id: int):
        super().__init__(f"Role {role_id} does not grant permission {permission_id}.")
        self.role_id = role_id
        self.permission_id = permission_id
