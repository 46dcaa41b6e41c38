from __future__ import annotations

from decimal import Decimal
from uuid import uuid4

import pytest

from granjafacil.domain.errors import ValidationError
from granjafacil.domain.models.feed_formula import FormulaIngredient
from granjafacil.domain.services.formulation import cost_per_kg, feed_cost, validate_percentages


def _ingredient(percent: str, price: str, feed_input_id=None) -> FormulaIngredient:
    return FormulaIngredient(
        feed_input_id=feed_input_id or uuid4(),
        name="Milho",
        percent=Decimal(percent),
        price_per_kg=Decimal(price),
    )


def test_cost_per_kg_is_weighted_by_percent():
    ingredients = [_ingredient("60", "1.20"), _ingredient("30", "2.50"), _ingredient("10", "4.00")]

    validate_percentages(ingredients)

    assert cost_per_kg(ingredients) == Decimal("1.8700")


def test_feed_cost_rounds_to_cents():
    assert feed_cost(Decimal("1.8700"), 126) == Decimal("235.62")


@pytest.mark.parametrize(
    "percents",
    [
        [],
        ["60", "30"],
        ["60", "30", "10.5"],
        ["99.95", "0.05"],
    ],
)
def test_invalid_percentages(percents):
    with pytest.raises(ValidationError):
        validate_percentages([_ingredient(p, "1") for p in percents])


def test_repeated_ingredient_is_rejected():
    shared = uuid4()
    with pytest.raises(ValidationError):
        validate_percentages([_ingredient("50", "1", shared), _ingredient("50", "1", shared)])
