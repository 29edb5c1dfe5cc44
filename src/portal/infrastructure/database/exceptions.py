"""Storage exceptions shared by every repository.

Services translate SQLAlchemy failures into these so callers never have to
import the ORM to tell a constraint violation from any other storage fault.
"""


class StorageError(Exception):
    """Base exception for failures of the underlying store."""

    pass


class ConstraintViolationError(StorageError):
    """Raised when a write violates a uniqueness or integrity constraint.

    The losing side of two concurrent first logins for the same external
    identity observes this error.
    """

    pass
