"""SQLAlchemy implementation of IMachineRepository.

Location and assigned-user names are resolved with outer joins on soft
references. A dangling location yields an empty name; a missing or
dangling user yields the "Unassigned" label.
"""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import Integer, Select, String, column, delete, select, table
from sqlalchemy.ext.asyncio import AsyncSession

from inventory.domain.records import MachineRecord
from inventory.domain.value_objects import UNASSIGNED_USER_NAME
from inventory.infrastructure.models import LocationModel, MachineModel
from inventory.ports.repositories import IMachineRepository

# Users belong to the IAM context; only id and display name are read.
_users = table("users", column("id", Integer), column("name", String))


def _to_record(
    model: MachineModel, location_name: str | None, user_name: str | None
) -> MachineRecord:
    return MachineRecord(
        id=model.id,
        name=model.name,
        location_id=model.location_id,
        location_name=location_name or "",
        app_user_id=model.app_user_id,
        assigned_user_name=user_name or UNASSIGNED_USER_NAME,
    )


def _select_machines() -> Select:
    """Machines with location and user names, tolerating dangling references."""
    return (
        select(MachineModel, LocationModel.name, _users.c.name)
        .outerjoin(LocationModel, LocationModel.id == MachineModel.location_id)
        .outerjoin(_users, _users.c.id == MachineModel.app_user_id)
    )


class MachineRepository(IMachineRepository):
    """Session-bound repository for machines."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_all(self) -> list[MachineRecord]:
        stmt = _select_machines().order_by(MachineModel.name, MachineModel.id)
        result = await self._session.execute(stmt)
        return [_to_record(*row) for row in result.all()]

    async def get_by_id(self, machine_id: int) -> MachineRecord | None:
        stmt = _select_machines().where(MachineModel.id == machine_id)
        result = await self._session.execute(stmt)
        row = result.one_or_none()
        if row is None:
            return None
        return _to_record(*row)

    async def create(
        self, name: str, location_id: int, app_user_id: int | None
    ) -> MachineRecord:
        model = MachineModel(
            name=name, location_id=location_id, app_user_id=app_user_id
        )
        self._session.add(model)
        await self._session.flush()

        location_name = await self._session.scalar(
            select(LocationModel.name).where(LocationModel.id == location_id)
        )
        user_name = None
        if app_user_id is not None:
            user_name = await self._session.scalar(
                select(_users.c.name).where(_users.c.id == app_user_id)
            )
        return _to_record(model, location_name, user_name)

    async def create_many(self, machines: Sequence[tuple[str, int]]) -> int:
        self._session.add_all(
            MachineModel(name=name, location_id=location_id, app_user_id=None)
            for name, location_id in machines
        )
        await self._session.flush()
        return len(machines)

    async def update(
        self,
        machine_id: int,
        name: str,
        location_id: int,
        app_user_id: int | None,
    ) -> bool:
        model = await self._session.get(MachineModel, machine_id)
        if model is None:
            return False

        model.name = name
        model.location_id = location_id
        model.app_user_id = app_user_id
        await self._session.flush()
        return True

    async def delete(self, machine_id: int) -> bool:
        result = await self._session.execute(
            delete(MachineModel).where(MachineModel.id == machine_id)
        )
        return result.rowcount > 0

    async def exists_any(self) -> bool:
        stmt = select(MachineModel.id).limit(1)
        return await self._session.scalar(stmt) is not None
