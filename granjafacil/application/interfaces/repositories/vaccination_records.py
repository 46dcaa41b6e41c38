from __future__ import annotations

from typing import Protocol
from uuid import UUID

from granjafacil.domain.models.vaccine import VaccinationRecord


class VaccinationRecordsRepository(Protocol):
    async def add(self, record: VaccinationRecord) -> VaccinationRecord: ...
    async def list_for_batch(self, batch_id: UUID) -> list[VaccinationRecord]: ...
