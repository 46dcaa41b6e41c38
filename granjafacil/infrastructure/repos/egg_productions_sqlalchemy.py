from __future__ import annotations

from datetime import date, datetime, timezone
from uuid import UUID

from sqlalchemy import and_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from granjafacil.application.interfaces.repositories.egg_productions import (
    EggProductionsRepository,
)
from granjafacil.domain.errors import ConflictError, NotFound
from granjafacil.domain.models.egg_production import EggProduction
from granjafacil.infrastructure.db.orm.egg_production import EggProductionORM


class EggProductionsSQLAlchemyRepository(EggProductionsRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: EggProductionORM) -> EggProduction:
        return EggProduction(
            id=orm.id,
            batch_id=orm.batch_id,
            date=orm.date,
            eggs_collected=orm.eggs_collected,
            bird_count=orm.bird_count,
            laying_rate=orm.laying_rate,
            notes=orm.notes,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )

    async def add(self, record: EggProduction) -> EggProduction:
        orm = EggProductionORM(
            id=record.id,
            batch_id=record.batch_id,
            date=record.date,
            eggs_collected=record.eggs_collected,
            bird_count=record.bird_count,
            laying_rate=record.laying_rate,
            notes=record.notes,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError(
                "Production already recorded for this day",
                details={"batch_id": str(record.batch_id), "date": record.date.isoformat()},
            ) from exc
        return self._to_domain(orm)

    async def get(self, record_id: UUID) -> EggProduction | None:
        orm = await self.session.get(EggProductionORM, record_id)
        return self._to_domain(orm) if orm else None

    async def find_for_day(self, batch_id: UUID, day: date) -> EggProduction | None:
        res = await self.session.execute(
            select(EggProductionORM).where(
                EggProductionORM.batch_id == batch_id, EggProductionORM.date == day
            )
        )
        orm = res.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(
        self,
        *,
        batch_id: UUID | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> list[EggProduction]:
        conds = []
        if batch_id is not None:
            conds.append(EggProductionORM.batch_id == batch_id)
        if date_from:
            conds.append(EggProductionORM.date >= date_from)
        if date_to:
            conds.append(EggProductionORM.date <= date_to)
        stmt = select(EggProductionORM)
        if conds:
            stmt = stmt.where(and_(*conds))
        res = await self.session.execute(
            stmt.order_by(EggProductionORM.date.desc(), EggProductionORM.id)
        )
        return [self._to_domain(x) for x in res.scalars().all()]

    async def update(self, record: EggProduction) -> EggProduction:
        orm = await self.session.get(EggProductionORM, record.id)
        if orm is None:
            raise NotFound("Production record not found", details={"id": str(record.id)})
        orm.eggs_collected = record.eggs_collected
        orm.bird_count = record.bird_count
        orm.laying_rate = record.laying_rate
        orm.notes = record.notes
        orm.updated_at = datetime.now(timezone.utc)
        await self.session.flush()
        return self._to_domain(orm)

    async def delete(self, record_id: UUID) -> bool:
        orm = await self.session.get(EggProductionORM, record_id)
        if orm is None:
            return False
        await self.session.delete(orm)
        await self.session.flush()
        return True
