"""Scoped session handling for service calls.

Every service operation opens one session, runs one transaction and
releases the session on every exit path. SQLAlchemy failures raised inside
the scope are translated into the storage exceptions callers depend on.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from infrastructure.database.exceptions import ConstraintViolationError, StorageError
from infrastructure.observability.probes import DatabaseProbe, DefaultDatabaseProbe

_default_probe = DefaultDatabaseProbe()


@asynccontextmanager
async def transaction(
    session_factory: async_sessionmaker[AsyncSession],
    probe: DatabaseProbe | None = None,
) -> AsyncIterator[AsyncSession]:
    """Open a session and run the enclosed block in a single transaction.

    The transaction commits when the block exits normally and rolls back
    when it raises. Domain exceptions raised by the block propagate
    unchanged.

    Usage:
        async with transaction(self._session_factory) as session:
            repository = self._repositories(session)
            ...

    Raises:
        ConstraintViolationError: If the store rejected a write on an
            integrity constraint
        StorageError: For any other SQLAlchemy failure
    """
    probe = probe or _default_probe
    try:
        async with session_factory() as session:
            async with session.begin():
                yield session
    except IntegrityError as e:
        probe.constraint_violated(error=str(e.orig))
        raise ConstraintViolationError(f"Constraint violated: {e.orig}") from e
    except SQLAlchemyError as e:
        probe.storage_failed(error=str(e))
        raise StorageError(f"Storage operation failed: {e}") from e
