from __future__ import annotations

from typing import Protocol
from uuid import UUID

from granjafacil.domain.models.weighing import WeighingRecord


class WeighingRecordsRepository(Protocol):
    async def add_many(self, records: list[WeighingRecord]) -> None:
        """Insert records whose (batch_id, week) is not stored yet; others are skipped."""
        ...

    async def get_for_week(self, batch_id: UUID, week: int) -> WeighingRecord | None: ...
    async def list_for_batch(self, batch_id: UUID) -> list[WeighingRecord]: ...
    async def update(self, record: WeighingRecord) -> WeighingRecord: ...
