from __future__ import annotations

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.domain.errors import NotFound
from granjafacil.domain.models.breed import BreedParameters


async def execute(uow: UnitOfWork, breed_id: str) -> BreedParameters:
    breed = await uow.breeds.get(breed_id)
    if breed is None:
        raise NotFound("Breed not found", details={"breed_id": breed_id})
    return breed
