from __future__ import annotations

from decimal import Decimal
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from granjafacil.application.interfaces.repositories.feed_formulas import FeedFormulasRepository
from granjafacil.domain.models.feed_formula import FeedFormula, FormulaIngredient
from granjafacil.domain.value_objects.inventory import FormulaType
from granjafacil.infrastructure.db.orm.feed_formula import FeedFormulaORM


def _ingredient_to_json(ingredient: FormulaIngredient) -> dict:
    return {
        "feed_input_id": str(ingredient.feed_input_id),
        "name": ingredient.name,
        "percent": str(ingredient.percent),
        "price_per_kg": str(ingredient.price_per_kg),
    }


def _ingredient_from_json(data: dict) -> FormulaIngredient:
    return FormulaIngredient(
        feed_input_id=UUID(data["feed_input_id"]),
        name=data["name"],
        percent=Decimal(data["percent"]),
        price_per_kg=Decimal(data["price_per_kg"]),
    )


class FeedFormulasSQLAlchemyRepository(FeedFormulasRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: FeedFormulaORM) -> FeedFormula:
        return FeedFormula(
            id=orm.id,
            name=orm.name,
            type=FormulaType(orm.type),
            ingredients=[_ingredient_from_json(i) for i in orm.ingredients or []],
            cost_per_kg=orm.cost_per_kg,
            notes=orm.notes,
            active=orm.active,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )

    async def add(self, formula: FeedFormula) -> FeedFormula:
        orm = FeedFormulaORM(
            id=formula.id,
            name=formula.name,
            type=formula.type.value,
            ingredients=[_ingredient_to_json(i) for i in formula.ingredients],
            cost_per_kg=formula.cost_per_kg,
            notes=formula.notes,
            active=formula.active,
            created_at=formula.created_at,
            updated_at=formula.updated_at,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def get(self, formula_id: UUID) -> FeedFormula | None:
        orm = await self.session.get(FeedFormulaORM, formula_id)
        return self._to_domain(orm) if orm else None

    async def list(self, *, active: bool | None = None) -> list[FeedFormula]:
        stmt = select(FeedFormulaORM)
        if active is not None:
            stmt = stmt.where(FeedFormulaORM.active.is_(active))
        res = await self.session.execute(stmt.order_by(FeedFormulaORM.name))
        return [self._to_domain(x) for x in res.scalars().all()]

    async def delete(self, formula_id: UUID) -> bool:
        orm = await self.session.get(FeedFormulaORM, formula_id)
        if orm is None:
            return False
        await self.session.delete(orm)
        await self.session.flush()
        return True
