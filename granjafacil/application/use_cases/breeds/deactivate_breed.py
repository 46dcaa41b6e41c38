from __future__ import annotations

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.domain.errors import NotFound, ValidationError


async def execute(uow: UnitOfWork, breed_id: str) -> None:
    breed = await uow.breeds.get(breed_id)
    if breed is None:
        raise NotFound("Breed not found", details={"breed_id": breed_id})
    if breed.is_system_default:
        raise ValidationError(
            "System default breeds cannot be removed", details={"breed_id": breed_id}
        )
    breed.active = False
    breed.touch()
    await uow.breeds.update(breed)
    await uow.commit()
