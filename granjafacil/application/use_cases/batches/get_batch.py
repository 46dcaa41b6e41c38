from __future__ import annotations

from uuid import UUID

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.domain.errors import NotFound
from granjafacil.domain.models.batch import Batch


async def execute(uow: UnitOfWork, batch_id: UUID) -> Batch:
    batch = await uow.batches.get(batch_id)
    if batch is None:
        raise NotFound("Batch not found", details={"batch_id": str(batch_id)})
    return batch
