from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from granjafacil.application.interfaces.repositories.weighing_records import (
    WeighingRecordsRepository,
)
from granjafacil.domain.errors import ConflictError, NotFound
from granjafacil.domain.models.weighing import WeighingRecord
from granjafacil.domain.value_objects.weighing_status import WeighingStatus
from granjafacil.infrastructure.db.orm.weighing_record import WeighingRecordORM


class WeighingRecordsSQLAlchemyRepository(WeighingRecordsRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: WeighingRecordORM) -> WeighingRecord:
        return WeighingRecord(
            id=orm.id,
            batch_id=orm.batch_id,
            week=orm.week,
            age_in_days=orm.age_in_days,
            expected_date=orm.expected_date,
            ideal_weight_grams=orm.ideal_weight_grams,
            actual_weight_grams=orm.actual_weight_grams,
            performed_date=orm.performed_date,
            sample_size=orm.sample_size,
            responsible=orm.responsible,
            notes=orm.notes,
            status=WeighingStatus(orm.status),
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )

    def _apply(self, orm: WeighingRecordORM, record: WeighingRecord) -> None:
        orm.actual_weight_grams = record.actual_weight_grams
        orm.performed_date = record.performed_date
        orm.sample_size = record.sample_size
        orm.responsible = record.responsible
        orm.notes = record.notes
        orm.status = record.status.value
        orm.updated_at = record.updated_at

    async def add_many(self, records: list[WeighingRecord]) -> None:
        if not records:
            return
        batch_ids = {r.batch_id for r in records}
        res = await self.session.execute(
            select(WeighingRecordORM.batch_id, WeighingRecordORM.week).where(
                WeighingRecordORM.batch_id.in_(batch_ids)
            )
        )
        present = {(row.batch_id, row.week) for row in res.all()}
        for record in records:
            key = (record.batch_id, record.week)
            if key in present:
                continue
            present.add(key)
            orm = WeighingRecordORM(
                id=record.id,
                batch_id=record.batch_id,
                week=record.week,
                age_in_days=record.age_in_days,
                expected_date=record.expected_date,
                ideal_weight_grams=record.ideal_weight_grams,
                created_at=record.created_at,
            )
            self._apply(orm, record)
            self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError(
                "Weighing records already exist for this batch",
                details={"batch_ids": sorted(str(b) for b in batch_ids)},
            ) from exc

    async def get_for_week(self, batch_id: UUID, week: int) -> WeighingRecord | None:
        res = await self.session.execute(
            select(WeighingRecordORM).where(
                WeighingRecordORM.batch_id == batch_id, WeighingRecordORM.week == week
            )
        )
        orm = res.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list_for_batch(self, batch_id: UUID) -> list[WeighingRecord]:
        res = await self.session.execute(
            select(WeighingRecordORM)
            .where(WeighingRecordORM.batch_id == batch_id)
            .order_by(WeighingRecordORM.week)
        )
        return [self._to_domain(x) for x in res.scalars().all()]

    async def update(self, record: WeighingRecord) -> WeighingRecord:
        orm = await self.session.get(WeighingRecordORM, record.id)
        if orm is None:
            raise NotFound("Weighing record not found", details={"id": str(record.id)})
        self._apply(orm, record)
        await self.session.flush()
        return self._to_domain(orm)
