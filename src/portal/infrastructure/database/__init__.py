"""Database infrastructure - shared connection primitives."""

from infrastructure.database.exceptions import ConstraintViolationError, StorageError

__all__ = [
    "ConstraintViolationError",
    "StorageError",
]
