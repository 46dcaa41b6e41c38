from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from granjafacil.domain.value_objects.inventory import FormulaType


class IngredientCreate(BaseModel):
    feed_input_id: UUID
    percent: Decimal = Field(ge=Decimal("0.1"), le=Decimal("100"))


class FormulaCreate(BaseModel):
    name: str = Field(min_length=3, max_length=255)
    type: FormulaType
    ingredients: list[IngredientCreate] = Field(min_length=1)
    notes: str | None = None


class IngredientResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    feed_input_id: UUID
    name: str
    percent: Decimal
    price_per_kg: Decimal


class FormulaResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    name: str
    type: FormulaType
    ingredients: list[IngredientResponse]
    cost_per_kg: Decimal
    notes: str | None
    active: bool
    created_at: datetime


class PhaseCostResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    formula_id: UUID
    batch_id: UUID
    phase: str
    weeks: int
    feed_kg: int
    cost_per_kg: Decimal
    total_cost: Decimal
