from __future__ import annotations

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.domain.models.house import House


async def execute(uow: UnitOfWork) -> list[House]:
    return await uow.houses.list()
