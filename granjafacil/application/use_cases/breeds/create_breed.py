from __future__ import annotations

from dataclasses import dataclass, field

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.application.use_cases.breeds._validation import validate_breed
from granjafacil.domain.errors import ConflictError
from granjafacil.domain.models.breed import BreedParameters, PhaseParameters


@dataclass(slots=True)
class CreateBreedInput:
    name: str
    phases: list[PhaseParameters]
    growth_curve: dict[int, int] = field(default_factory=dict)


async def execute(uow: UnitOfWork, payload: CreateBreedInput) -> BreedParameters:
    validate_breed(payload.name, payload.phases, payload.growth_curve)
    if await uow.breeds.find_by_name(payload.name.strip()):
        raise ConflictError("Breed name already exists", details={"name": payload.name})
    breed = BreedParameters.create(
        payload.name.strip(), payload.phases, growth_curve=payload.growth_curve
    )
    created = await uow.breeds.add(breed)
    await uow.commit()
    return created
