"""Error categories shared by every bounded context.

Callers distinguish three families of failure:

- ``InvalidInputError``: the caller passed something unusable. Raised
  immediately, before any storage access.
- ``NotFoundError``: an entity addressed by id or name does not exist on a
  path that is required to surface that absence.
- ``infrastructure.database.exceptions.StorageError``: the store itself
  failed (constraint violation, connectivity).
"""


class InvalidInputError(ValueError):
    """Raised when a required input is missing or empty."""

    pass


class NotFoundError(LookupError):
    """Base class for entity-scoped lookups that came back empty."""

    pass


class UnauthorizedError(Exception):
    """Raised when a user lacks a permission required for an operation.

    Permission checks themselves return ``False`` for unknown users; this
    exception is only raised by explicit ``require_*`` gates.
    """

    pass
