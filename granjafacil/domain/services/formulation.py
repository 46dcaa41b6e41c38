from __future__ import annotations

from collections.abc import Iterable, Sequence
from decimal import ROUND_HALF_UP, Decimal

from granjafacil.domain.errors import ValidationError
from granjafacil.domain.models.feed_formula import FormulaIngredient

HUNDRED = Decimal("100")
MIN_PERCENT = Decimal("0.1")


def validate_percentages(ingredients: Sequence[FormulaIngredient]) -> None:
    if not ingredients:
        raise ValidationError("A formula needs at least one ingredient")
    for ingredient in ingredients:
        if not MIN_PERCENT <= ingredient.percent <= HUNDRED:
            raise ValidationError(
                "Ingredient percent must be between 0.1 and 100",
                details={"feed_input_id": str(ingredient.feed_input_id)},
            )
    total = sum((i.percent for i in ingredients), Decimal("0"))
    if total != HUNDRED:
        raise ValidationError(
            "Ingredient percentages must add up to 100", details={"total": str(total)}
        )
    seen: set = set()
    for ingredient in ingredients:
        if ingredient.feed_input_id in seen:
            raise ValidationError(
                "Ingredient repeated in formula",
                details={"feed_input_id": str(ingredient.feed_input_id)},
            )
        seen.add(ingredient.feed_input_id)


def cost_per_kg(ingredients: Iterable[FormulaIngredient]) -> Decimal:
    total = sum((i.price_per_kg * i.percent / HUNDRED for i in ingredients), Decimal("0"))
    return total.quantize(Decimal("0.0001"), rounding=ROUND_HALF_UP)


def feed_cost(cost_per_kg_value: Decimal, kilograms: int | Decimal) -> Decimal:
    return (cost_per_kg_value * Decimal(kilograms)).quantize(
        Decimal("0.01"), rounding=ROUND_HALF_UP
    )
