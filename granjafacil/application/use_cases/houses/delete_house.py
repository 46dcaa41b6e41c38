from __future__ import annotations

from uuid import UUID

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.domain.errors import ConflictError, NotFound


async def execute(uow: UnitOfWork, house_id: UUID) -> None:
    in_use = await uow.batches.count_for_house(house_id)
    if in_use:
        raise ConflictError(
            "House still has batches", details={"house_id": str(house_id), "batches": in_use}
        )
    deleted = await uow.houses.delete(house_id)
    if not deleted:
        raise NotFound("House not found", details={"house_id": str(house_id)})
    await uow.commit()
