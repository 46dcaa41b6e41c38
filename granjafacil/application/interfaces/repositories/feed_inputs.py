from __future__ import annotations

from typing import Protocol
from uuid import UUID

from granjafacil.domain.models.feed_input import FeedInput, StockMovement
from granjafacil.domain.value_objects.inventory import FeedInputCategory


class FeedInputsRepository(Protocol):
    async def add(self, item: FeedInput) -> FeedInput: ...
    async def get(self, item_id: UUID) -> FeedInput | None: ...
    async def list(
        self, *, category: FeedInputCategory | None = None, search: str | None = None
    ) -> list[FeedInput]: ...
    async def update(self, item: FeedInput) -> FeedInput: ...
    async def delete(self, item_id: UUID) -> bool: ...


class StockMovementsRepository(Protocol):
    async def add(self, movement: StockMovement) -> StockMovement: ...
    async def list_for_input(self, feed_input_id: UUID) -> list[StockMovement]: ...
