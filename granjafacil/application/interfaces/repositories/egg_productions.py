from __future__ import annotations

from datetime import date
from typing import Protocol
from uuid import UUID

from granjafacil.domain.models.egg_production import EggProduction


class EggProductionsRepository(Protocol):
    async def add(self, record: EggProduction) -> EggProduction: ...
    async def get(self, record_id: UUID) -> EggProduction | None: ...
    async def find_for_day(self, batch_id: UUID, day: date) -> EggProduction | None: ...
    async def list(
        self,
        *,
        batch_id: UUID | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> list[EggProduction]: ...
    async def update(self, record: EggProduction) -> EggProduction: ...
    async def delete(self, record_id: UUID) -> bool: ...
