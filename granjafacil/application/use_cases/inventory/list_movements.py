from __future__ import annotations

from uuid import UUID

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.domain.errors import NotFound
from granjafacil.domain.models.feed_input import StockMovement


async def execute(uow: UnitOfWork, item_id: UUID) -> list[StockMovement]:
    if await uow.feed_inputs.get(item_id) is None:
        raise NotFound("Feed input not found", details={"feed_input_id": str(item_id)})
    return await uow.stock_movements.list_for_input(item_id)
