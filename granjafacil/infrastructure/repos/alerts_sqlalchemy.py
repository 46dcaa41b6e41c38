from __future__ import annotations

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from granjafacil.application.interfaces.repositories.alerts import AlertsRepository
from granjafacil.domain.errors import ConflictError
from granjafacil.domain.models.alert import Alert
from granjafacil.domain.value_objects.alert import AlertKind, AlertPriority
from granjafacil.infrastructure.db.orm.alert import AlertORM


class AlertsSQLAlchemyRepository(AlertsRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: AlertORM) -> Alert:
        return Alert(
            id=orm.id,
            batch_id=orm.batch_id,
            event_id=orm.event_id,
            kind=AlertKind(orm.kind),
            priority=AlertPriority(orm.priority),
            title=orm.title,
            description=orm.description,
            created_at=orm.created_at,
            acknowledged=orm.acknowledged,
        )

    async def replace_for_batch(self, batch_id: UUID, alerts: list[Alert]) -> None:
        await self.session.execute(delete(AlertORM).where(AlertORM.batch_id == batch_id))
        for alert in alerts:
            self.session.add(
                AlertORM(
                    id=alert.id,
                    batch_id=batch_id,
                    event_id=alert.event_id,
                    kind=alert.kind.value,
                    priority=alert.priority.value,
                    title=alert.title,
                    description=alert.description,
                    acknowledged=alert.acknowledged,
                    created_at=alert.created_at,
                )
            )
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError(
                "Failed to replace batch alerts", details={"batch_id": str(batch_id)}
            ) from exc

    async def list_for_batch(self, batch_id: UUID, *, only_active: bool = False) -> list[Alert]:
        stmt = select(AlertORM).where(AlertORM.batch_id == batch_id)
        if only_active:
            stmt = stmt.where(AlertORM.acknowledged.is_(False))
        res = await self.session.execute(stmt)
        return [self._to_domain(x) for x in res.scalars().all()]

    async def list_all(self, *, only_active: bool = False) -> list[Alert]:
        stmt = select(AlertORM)
        if only_active:
            stmt = stmt.where(AlertORM.acknowledged.is_(False))
        res = await self.session.execute(stmt)
        return [self._to_domain(x) for x in res.scalars().all()]

    async def get(self, alert_id: str) -> Alert | None:
        orm = await self.session.get(AlertORM, alert_id)
        return self._to_domain(orm) if orm else None

    async def set_acknowledged(self, alert_id: str, acknowledged: bool) -> Alert | None:
        orm = await self.session.get(AlertORM, alert_id)
        if orm is None:
            return None
        orm.acknowledged = acknowledged
        await self.session.flush()
        return self._to_domain(orm)
