"""SQLAlchemy implementation of ILocationRepository.

User and machine counts are derived with correlated subqueries; nothing is
denormalized onto the location row.
"""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import Integer, Select, column, delete, func, select, table
from sqlalchemy.ext.asyncio import AsyncSession

from inventory.domain.records import LocationRecord
from inventory.infrastructure.models import LocationModel, MachineModel
from inventory.ports.repositories import ILocationRepository

# Users belong to the IAM context; only their location reference is read.
_users = table("users", column("location_id", Integer))


def _select_locations() -> Select:
    """Locations with the number of users and machines referencing them."""
    user_count = (
        select(func.count())
        .select_from(_users)
        .where(_users.c.location_id == LocationModel.id)
        .scalar_subquery()
    )
    machine_count = (
        select(func.count(MachineModel.id))
        .where(MachineModel.location_id == LocationModel.id)
        .scalar_subquery()
    )
    return select(LocationModel, user_count, machine_count)


class LocationRepository(ILocationRepository):
    """Session-bound repository for sites."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: AsyncSession scoped to the current service call
        """
        self._session = session

    async def list_all(self) -> list[LocationRecord]:
        stmt = _select_locations().order_by(LocationModel.name, LocationModel.id)
        result = await self._session.execute(stmt)
        return [
            LocationRecord(
                id=model.id,
                name=model.name,
                user_count=users,
                machine_count=machines,
            )
            for model, users, machines in result.all()
        ]

    async def get_by_id(self, location_id: int) -> LocationRecord | None:
        stmt = _select_locations().where(LocationModel.id == location_id)
        result = await self._session.execute(stmt)
        row = result.one_or_none()
        if row is None:
            return None
        model, users, machines = row
        return LocationRecord(
            id=model.id, name=model.name, user_count=users, machine_count=machines
        )

    async def create(self, name: str) -> LocationRecord:
        model = LocationModel(name=name)
        self._session.add(model)
        await self._session.flush()
        return LocationRecord(id=model.id, name=model.name)

    async def create_many(self, names: Sequence[str]) -> list[int]:
        models = [LocationModel(name=name) for name in names]
        self._session.add_all(models)
        await self._session.flush()
        return [model.id for model in models]

    async def update(self, location_id: int, name: str) -> bool:
        model = await self._session.get(LocationModel, location_id)
        if model is None:
            return False

        model.name = name
        await self._session.flush()
        return True

    async def delete(self, location_id: int) -> bool:
        result = await self._session.execute(
            delete(LocationModel).where(LocationModel.id == location_id)
        )
        return result.rowcount > 0

    async def exists_any(self) -> bool:
        stmt = select(LocationModel.id).limit(1)
        return await self._session.scalar(stmt) is not None
