from __future__ import annotations

from uuid import UUID

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.domain.errors import NotFound


async def execute(uow: UnitOfWork, item_id: UUID) -> None:
    if not await uow.feed_inputs.delete(item_id):
        raise NotFound("Feed input not found", details={"feed_input_id": str(item_id)})
    await uow.commit()
