from __future__ import annotations

from uuid import UUID

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.domain.errors import NotFound
from granjafacil.domain.models.feed_formula import FeedFormula


async def execute(uow: UnitOfWork, formula_id: UUID) -> FeedFormula:
    formula = await uow.feed_formulas.get(formula_id)
    if formula is None:
        raise NotFound("Formula not found", details={"formula_id": str(formula_id)})
    return formula
