from __future__ import annotations

from typing import Protocol
from uuid import UUID

from granjafacil.domain.models.house import House


class HousesRepository(Protocol):
    async def add(self, house: House) -> House: ...
    async def get(self, house_id: UUID) -> House | None: ...
    async def list(self) -> list[House]: ...
    async def update(self, house: House) -> House: ...
    async def delete(self, house_id: UUID) -> bool: ...
