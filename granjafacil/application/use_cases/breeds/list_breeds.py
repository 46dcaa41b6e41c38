from __future__ import annotations

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.domain.models.breed import BreedParameters


async def execute(uow: UnitOfWork, *, active: bool | None = True) -> list[BreedParameters]:
    return await uow.breeds.list(active=active)
