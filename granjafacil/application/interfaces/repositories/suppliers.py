from __future__ import annotations

from typing import Protocol
from uuid import UUID

from granjafacil.domain.models.supplier import Supplier


class SuppliersRepository(Protocol):
    async def add(self, supplier: Supplier) -> Supplier: ...
    async def get(self, supplier_id: UUID) -> Supplier | None: ...
    async def list(
        self, *, search: str | None = None, active: bool | None = None
    ) -> list[Supplier]: ...
    async def update(self, supplier: Supplier) -> Supplier: ...
    async def delete(self, supplier_id: UUID) -> bool: ...
