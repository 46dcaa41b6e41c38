from __future__ import annotations

from uuid import UUID

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.domain.errors import NotFound


async def execute(uow: UnitOfWork, formula_id: UUID) -> None:
    if not await uow.feed_formulas.delete(formula_id):
        raise NotFound("Formula not found", details={"formula_id": str(formula_id)})
    await uow.commit()
