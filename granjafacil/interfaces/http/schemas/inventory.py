from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from granjafacil.domain.value_objects.inventory import (
    FeedInputCategory,
    MovementType,
    StockUnit,
)


class FeedInputCreate(BaseModel):
    name: str = Field(min_length=2, max_length=255)
    category: FeedInputCategory
    unit: StockUnit
    price_per_unit: Decimal = Field(ge=0)
    current_stock: Decimal = Field(default=Decimal("0"), ge=0)
    minimum_stock: Decimal = Field(default=Decimal("0"), ge=0)
    supplier_id: UUID | None = None
    description: str | None = None


class FeedInputUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=2, max_length=255)
    category: FeedInputCategory | None = None
    unit: StockUnit | None = None
    price_per_unit: Decimal | None = Field(default=None, ge=0)
    minimum_stock: Decimal | None = Field(default=None, ge=0)
    supplier_id: UUID | None = None
    description: str | None = None


class FeedInputResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    name: str
    category: FeedInputCategory
    unit: StockUnit
    price_per_unit: Decimal
    current_stock: Decimal
    minimum_stock: Decimal
    supplier_id: UUID | None
    description: str | None
    is_low_stock: bool
    stock_value: Decimal
    created_at: datetime
    updated_at: datetime


class MovementCreate(BaseModel):
    type: MovementType
    quantity: Decimal = Field(gt=0)
    reason: str = Field(min_length=1, max_length=255)
    responsible: str = Field(min_length=1, max_length=100)
    unit_cost: Decimal | None = Field(default=None, ge=0)
    batch_id: UUID | None = None
    invoice_number: str | None = None
    notes: str | None = None


class MovementResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    feed_input_id: UUID
    type: MovementType
    quantity: Decimal
    reason: str
    responsible: str
    unit_cost: Decimal | None
    batch_id: UUID | None
    invoice_number: str | None
    notes: str | None
    created_at: datetime


class MovementResult(BaseModel):
    movement: MovementResponse
    feed_input: FeedInputResponse
