"""SQLAlchemy implementation of IExternalApplicationRepository."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from inventory.domain.records import ExternalApplicationRecord
from inventory.infrastructure.models import ExternalApplicationModel
from inventory.ports.repositories import IExternalApplicationRepository


def _to_record(model: ExternalApplicationModel) -> ExternalApplicationRecord:
    return ExternalApplicationRecord(
        id=model.id,
        app_name=model.app_name,
        app_url=model.app_url,
        icon_name=model.icon_name,
    )


class ExternalApplicationRepository(IExternalApplicationRepository):
    """Session-bound repository for external application shortcuts."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_all(self) -> list[ExternalApplicationRecord]:
        stmt = select(ExternalApplicationModel).order_by(
            ExternalApplicationModel.app_name, ExternalApplicationModel.id
        )
        result = await self._session.execute(stmt)
        return [_to_record(model) for model in result.scalars().all()]

    async def get_by_id(self, application_id: int) -> ExternalApplicationRecord | None:
        model = await self._session.get(ExternalApplicationModel, application_id)
        if model is None:
            return None
        return _to_record(model)

    async def create(
        self, app_name: str, app_url: str, icon_name: str
    ) -> ExternalApplicationRecord:
        model = ExternalApplicationModel(
            app_name=app_name, app_url=app_url, icon_name=icon_name
        )
        self._session.add(model)
        await self._session.flush()
        return _to_record(model)

    async def update(
        self,
        application_id: int,
        app_name: str,
        app_url: str,
        icon_name: str,
    ) -> bool:
        model = await self._session.get(ExternalApplicationModel, application_id)
        if model is None:
            return False

        model.app_name = app_name
        model.app_url = app_url
        model.icon_name = icon_name
        await self._session.flush()
        return True

    async def delete(self, application_id: int) -> bool:
        result = await self._session.execute(
            delete(ExternalApplicationModel).where(
                ExternalApplicationModel.id == application_id
            )
        )
        return result.rowcount > 0
