from __future__ import annotations

from uuid import UUID

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.domain.errors import NotFound
from granjafacil.domain.models.vaccine import VaccinationRecord


async def execute(uow: UnitOfWork, batch_id: UUID) -> list[VaccinationRecord]:
    if await uow.batches.get(batch_id) is None:
        raise NotFound("Batch not found", details={"batch_id": str(batch_id)})
    return await uow.vaccination_records.list_for_batch(batch_id)
