from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.domain.errors import ConflictError, NotFound, ValidationError
from granjafacil.domain.models.egg_production import EggProduction
from granjafacil.domain.services.production import laying_rate


@dataclass(slots=True)
class RecordProductionInput:
    batch_id: UUID
    date: date
    eggs_collected: int
    notes: str | None = None


async def execute(
    uow: UnitOfWork, payload: RecordProductionInput, *, today: date
) -> EggProduction:
    batch = await uow.batches.get(payload.batch_id)
    if batch is None:
        raise NotFound("Batch not found", details={"batch_id": str(payload.batch_id)})
    if payload.date > today:
        raise ValidationError("Production date cannot be in the future")
    if payload.date < batch.entry_date:
        raise ValidationError("Production date cannot be before the batch entry date")
    if await uow.egg_productions.find_for_day(batch.id, payload.date):
        raise ConflictError(
            "Production already recorded for this day",
            details={"batch_id": str(batch.id), "date": payload.date.isoformat()},
        )
    record = EggProduction.create(
        batch.id,
        payload.date,
        payload.eggs_collected,
        batch.bird_count,
        laying_rate(payload.eggs_collected, batch.bird_count),
        notes=payload.notes,
    )
    created = await uow.egg_productions.add(record)
    await uow.commit()
    return created
