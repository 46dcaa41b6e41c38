from __future__ import annotations

from uuid import UUID

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.domain.errors import NotFound
from granjafacil.domain.models.weighing import WeighingRecord
from granjafacil.domain.services.schedule import seed_weighing_records, weighing_checkpoints


async def execute(uow: UnitOfWork, batch_id: UUID) -> list[WeighingRecord]:
    """Weighing records of a batch, seeding the missing checkpoints first."""
    batch = await uow.batches.get(batch_id)
    if batch is None:
        raise NotFound("Batch not found", details={"batch_id": str(batch_id)})
    breed = await uow.breeds.get(batch.breed_id)
    existing = await uow.weighing_records.list_for_batch(batch.id)
    if breed is None:
        return existing
    missing = seed_weighing_records(batch, weighing_checkpoints(breed), existing)
    if not missing:
        return existing
    await uow.weighing_records.add_many(missing)
    await uow.commit()
    return await uow.weighing_records.list_for_batch(batch.id)
