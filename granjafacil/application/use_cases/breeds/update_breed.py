from __future__ import annotations

from dataclasses import dataclass

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.application.use_cases.breeds._validation import validate_breed
from granjafacil.domain.errors import ConflictError, NotFound
from granjafacil.domain.models.breed import BreedParameters, PhaseParameters


@dataclass(slots=True)
class UpdateBreedInput:
    name: str | None = None
    phases: list[PhaseParameters] | None = None
    growth_curve: dict[int, int] | None = None
    active: bool | None = None


async def execute(uow: UnitOfWork, breed_id: str, payload: UpdateBreedInput) -> BreedParameters:
    """Edit breed parameters.

    Batches are never stored with their schedule, so existing calendars pick up
    the new parameters the next time they are built.
    """
    breed = await uow.breeds.get(breed_id)
    if breed is None:
        raise NotFound("Breed not found", details={"breed_id": breed_id})
    if payload.name is not None and payload.name.strip().lower() != breed.name.lower():
        other = await uow.breeds.find_by_name(payload.name.strip())
        if other and other.id != breed.id:
            raise ConflictError("Breed name already exists", details={"name": payload.name})
        breed.name = payload.name.strip()
    if payload.phases is not None:
        breed.phases = list(payload.phases)
    if payload.growth_curve is not None:
        breed.growth_curve = dict(payload.growth_curve)
    if payload.active is not None:
        breed.active = payload.active
    validate_breed(breed.name, breed.phases, breed.growth_curve)
    breed.touch()
    updated = await uow.breeds.update(breed)
    await uow.commit()
    return updated
