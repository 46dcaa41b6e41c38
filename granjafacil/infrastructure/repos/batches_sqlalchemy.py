from __future__ import annotations

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from granjafacil.application.interfaces.repositories.batches import BatchesRepository
from granjafacil.domain.errors import ConflictError
from granjafacil.domain.models.batch import Batch
from granjafacil.infrastructure.db.orm.batch import BatchORM


class BatchesSQLAlchemyRepository(BatchesRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: BatchORM) -> Batch:
        return Batch(
            id=orm.id,
            name=orm.name,
            bird_count=orm.bird_count,
            birth_date=orm.birth_date,
            entry_date=orm.entry_date,
            breed_id=orm.breed_id,
            house_id=orm.house_id,
            cost_center=orm.cost_center,
            notes=orm.notes,
            created_at=orm.created_at,
        )

    async def add(self, batch: Batch) -> Batch:
        orm = BatchORM(
            id=batch.id,
            name=batch.name,
            bird_count=batch.bird_count,
            birth_date=batch.birth_date,
            entry_date=batch.entry_date,
            breed_id=batch.breed_id,
            house_id=batch.house_id,
            cost_center=batch.cost_center,
            notes=batch.notes,
            created_at=batch.created_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Failed to create batch") from exc
        return self._to_domain(orm)

    async def get(self, batch_id: UUID) -> Batch | None:
        orm = await self.session.get(BatchORM, batch_id)
        return self._to_domain(orm) if orm else None

    async def list(self) -> list[Batch]:
        res = await self.session.execute(
            select(BatchORM).order_by(BatchORM.entry_date.desc(), BatchORM.name)
        )
        return [self._to_domain(x) for x in res.scalars().all()]

    async def count_for_house(self, house_id: UUID) -> int:
        res = await self.session.execute(
            select(func.count()).select_from(BatchORM).where(BatchORM.house_id == house_id)
        )
        return int(res.scalar_one())
