from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.domain.errors import ConfigurationError, NotFound, ValidationError
from granjafacil.domain.models.batch import Batch

logger = logging.getLogger(__name__)

MAX_BIRDS = 100_000


@dataclass(slots=True)
class RegisterBatchInput:
    name: str
    bird_count: int
    birth_date: date
    entry_date: date
    breed_id: str
    house_id: UUID | None = None
    cost_center: str | None = None
    notes: str | None = None


def validate(payload: RegisterBatchInput, today: date) -> None:
    name = payload.name.strip()
    if not 3 <= len(name) <= 100:
        raise ValidationError("Batch name must have between 3 and 100 characters")
    if not 1 <= payload.bird_count <= MAX_BIRDS:
        raise ValidationError(
            f"Bird count must be between 1 and {MAX_BIRDS}",
            details={"bird_count": payload.bird_count},
        )
    if payload.birth_date > payload.entry_date:
        raise ValidationError("Birth date cannot be after the entry date")
    if payload.entry_date > today:
        raise ValidationError(
            "Entry date cannot be in the future",
            details={"entry_date": payload.entry_date.isoformat()},
        )


async def execute(uow: UnitOfWork, payload: RegisterBatchInput, *, today: date) -> Batch:
    validate(payload, today)
    breed = await uow.breeds.get(payload.breed_id)
    if breed is None or not breed.active:
        raise ConfigurationError(
            f"Breed '{payload.breed_id}' is not configured",
            details={"breed_id": payload.breed_id},
        )
    if payload.house_id is not None:
        await _check_house(uow, payload.house_id, payload.bird_count)
    batch = Batch.create(
        name=payload.name.strip(),
        bird_count=payload.bird_count,
        birth_date=payload.birth_date,
        entry_date=payload.entry_date,
        breed_id=breed.id,
        house_id=payload.house_id,
        cost_center=payload.cost_center,
        notes=payload.notes,
    )
    created = await uow.batches.add(batch)
    await uow.commit()
    logger.info("Registered batch %s (%s birds, breed %s)", created.id, created.bird_count, breed.id)
    return created


async def _check_house(uow: UnitOfWork, house_id: UUID, bird_count: int) -> None:
    house = await uow.houses.get(house_id)
    if house is None:
        raise NotFound("House not found", details={"house_id": str(house_id)})
    if bird_count > house.effective_capacity:
        raise ValidationError(
            f"House '{house.name}' holds at most {house.effective_capacity} birds",
            details={"house_id": str(house_id), "capacity": house.effective_capacity},
        )
