from __future__ import annotations

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.domain.models.supplier import Supplier


async def execute(
    uow: UnitOfWork, *, search: str | None = None, active: bool | None = None
) -> list[Supplier]:
    return await uow.suppliers.list(search=search, active=active)
