from __future__ import annotations

from typing import Protocol
from uuid import UUID

from granjafacil.domain.models.feed_formula import FeedFormula


class FeedFormulasRepository(Protocol):
    async def add(self, formula: FeedFormula) -> FeedFormula: ...
    async def get(self, formula_id: UUID) -> FeedFormula | None: ...
    async def list(self, *, active: bool | None = None) -> list[FeedFormula]: ...
    async def delete(self, formula_id: UUID) -> bool: ...
