from __future__ import annotations

from uuid import UUID

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.domain.errors import NotFound
from granjafacil.domain.models.house import House


async def execute(uow: UnitOfWork, house_id: UUID) -> House:
    house = await uow.houses.get(house_id)
    if house is None:
        raise NotFound("House not found", details={"house_id": str(house_id)})
    return house
