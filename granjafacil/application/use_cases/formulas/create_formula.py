from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.domain.errors import NotFound, ValidationError
from granjafacil.domain.models.feed_formula import FeedFormula, FormulaIngredient
from granjafacil.domain.models.feed_input import FeedInput
from granjafacil.domain.services.formulation import cost_per_kg, validate_percentages
from granjafacil.domain.value_objects.inventory import FeedInputCategory, FormulaType, StockUnit


@dataclass(slots=True)
class IngredientInput:
    feed_input_id: UUID
    percent: Decimal


@dataclass(slots=True)
class CreateFormulaInput:
    name: str
    type: FormulaType
    ingredients: list[IngredientInput]
    notes: str | None = None


def price_per_kg(item: FeedInput) -> Decimal:
    if item.unit is StockUnit.KG:
        return item.price_per_unit
    if item.unit is StockUnit.G:
        return item.price_per_unit * 1000
    raise ValidationError(
        "Formula ingredients must be priced by weight",
        details={"feed_input_id": str(item.id), "unit": item.unit.value},
    )


async def execute(uow: UnitOfWork, payload: CreateFormulaInput) -> FeedFormula:
    if len(payload.name.strip()) < 3:
        raise ValidationError("Formula name must have at least 3 characters")
    ingredients: list[FormulaIngredient] = []
    for entry in payload.ingredients:
        item = await uow.feed_inputs.get(entry.feed_input_id)
        if item is None:
            raise NotFound(
                "Feed input not found", details={"feed_input_id": str(entry.feed_input_id)}
            )
        if item.category is not FeedInputCategory.FEED:
            raise ValidationError(
                "Only feed inputs can be used as ingredients",
                details={"feed_input_id": str(item.id), "category": item.category.value},
            )
        ingredients.append(
            FormulaIngredient(
                feed_input_id=item.id,
                name=item.name,
                percent=entry.percent,
                price_per_kg=price_per_kg(item),
            )
        )
    validate_percentages(ingredients)
    formula = FeedFormula.create(
        payload.name.strip(),
        payload.type,
        ingredients,
        cost_per_kg(ingredients),
        notes=payload.notes,
    )
    created = await uow.feed_formulas.add(formula)
    await uow.commit()
    return created
