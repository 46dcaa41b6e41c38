from __future__ import annotations

from datetime import date
from uuid import UUID

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.domain.errors import ValidationError
from granjafacil.domain.models.egg_production import EggProduction


async def execute(
    uow: UnitOfWork,
    *,
    batch_id: UUID | None = None,
    date_from: date | None = None,
    date_to: date | None = None,
) -> list[EggProduction]:
    if date_from and date_to and date_from > date_to:
        raise ValidationError("date_from must be before date_to")
    return await uow.egg_productions.list(
        batch_id=batch_id, date_from=date_from, date_to=date_to
    )
