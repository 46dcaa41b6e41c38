from __future__ import annotations

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.domain.models.feed_formula import FeedFormula


async def execute(uow: UnitOfWork, *, active: bool | None = None) -> list[FeedFormula]:
    return await uow.feed_formulas.list(active=active)
