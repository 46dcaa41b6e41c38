from __future__ import annotations

from uuid import UUID

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.domain.errors import NotFound


async def execute(uow: UnitOfWork, supplier_id: UUID) -> None:
    deleted = await uow.suppliers.delete(supplier_id)
    if not deleted:
        raise NotFound("Supplier not found", details={"supplier_id": str(supplier_id)})
    await uow.commit()
