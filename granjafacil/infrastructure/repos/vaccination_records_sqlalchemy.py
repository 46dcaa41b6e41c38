from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from granjafacil.application.interfaces.repositories.vaccination_records import (
    VaccinationRecordsRepository,
)
from granjafacil.domain.models.vaccine import VaccinationRecord
from granjafacil.infrastructure.db.orm.vaccination_record import VaccinationRecordORM


class VaccinationRecordsSQLAlchemyRepository(VaccinationRecordsRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: VaccinationRecordORM) -> VaccinationRecord:
        return VaccinationRecord(
            id=orm.id,
            batch_id=orm.batch_id,
            vaccine_id=orm.vaccine_id,
            application_date=orm.application_date,
            age_at_application=orm.age_at_application,
            birds_vaccinated=orm.birds_vaccinated,
            responsible=orm.responsible,
            vaccine_lot=orm.vaccine_lot,
            notes=orm.notes,
            next_application_date=orm.next_application_date,
            created_at=orm.created_at,
        )

    async def add(self, record: VaccinationRecord) -> VaccinationRecord:
        orm = VaccinationRecordORM(
            id=record.id,
            batch_id=record.batch_id,
            vaccine_id=record.vaccine_id,
            application_date=record.application_date,
            age_at_application=record.age_at_application,
            birds_vaccinated=record.birds_vaccinated,
            responsible=record.responsible,
            vaccine_lot=record.vaccine_lot,
            notes=record.notes,
            next_application_date=record.next_application_date,
            created_at=record.created_at,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def list_for_batch(self, batch_id: UUID) -> list[VaccinationRecord]:
        res = await self.session.execute(
            select(VaccinationRecordORM)
            .where(VaccinationRecordORM.batch_id == batch_id)
            .order_by(VaccinationRecordORM.application_date, VaccinationRecordORM.created_at)
        )
        return [self._to_domain(x) for x in res.scalars().all()]
