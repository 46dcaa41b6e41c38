from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.domain.errors import NotFound
from granjafacil.domain.models.egg_production import EggProduction
from granjafacil.domain.services.production import laying_rate


async def execute(uow: UnitOfWork, record_id: UUID, data: dict) -> EggProduction:
    record = await uow.egg_productions.get(record_id)
    if record is None:
        raise NotFound("Production record not found", details={"id": str(record_id)})
    if data.get("eggs_collected") is not None:
        record.eggs_collected = data["eggs_collected"]
        record.laying_rate = laying_rate(record.eggs_collected, record.bird_count)
    if "notes" in data:
        record.notes = data["notes"]
    record.updated_at = datetime.now(timezone.utc)
    updated = await uow.egg_productions.update(record)
    await uow.commit()
    return updated
