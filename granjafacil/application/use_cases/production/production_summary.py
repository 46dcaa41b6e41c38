from __future__ import annotations

from datetime import date
from uuid import UUID

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.domain.errors import NotFound, ValidationError
from granjafacil.domain.services.production import (
    ProductionSummary,
    ProductionTarget,
    production_target,
    summarize_production,
)


async def targets(uow: UnitOfWork, batch_id: UUID, *, laying_pct: int) -> ProductionTarget:
    batch = await uow.batches.get(batch_id)
    if batch is None:
        raise NotFound("Batch not found", details={"batch_id": str(batch_id)})
    return production_target(batch.bird_count, laying_pct)


async def execute(
    uow: UnitOfWork,
    batch_id: UUID,
    *,
    date_from: date | None = None,
    date_to: date | None = None,
    laying_pct: int,
) -> ProductionSummary:
    if date_from and date_to and date_from > date_to:
        raise ValidationError("date_from must be before date_to")
    target = await targets(uow, batch_id, laying_pct=laying_pct)
    records = await uow.egg_productions.list(
        batch_id=batch_id, date_from=date_from, date_to=date_to
    )
    return summarize_production(records, target)
