from __future__ import annotations

from uuid import UUID

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.domain.errors import NotFound


async def execute(uow: UnitOfWork, record_id: UUID) -> None:
    if not await uow.egg_productions.delete(record_id):
        raise NotFound("Production record not found", details={"id": str(record_id)})
    await uow.commit()
