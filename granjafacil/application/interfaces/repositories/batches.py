from __future__ import annotations

from typing import Protocol
from uuid import UUID

from granjafacil.domain.models.batch import Batch


class BatchesRepository(Protocol):
    async def add(self, batch: Batch) -> Batch: ...
    async def get(self, batch_id: UUID) -> Batch | None: ...
    async def list(self) -> list[Batch]: ...
    async def count_for_house(self, house_id: UUID) -> int: ...
