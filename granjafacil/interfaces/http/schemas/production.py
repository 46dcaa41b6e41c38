from __future__ import annotations

from datetime import date as DtDate
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ProductionCreate(BaseModel):
    batch_id: UUID
    date: DtDate
    eggs_collected: int = Field(ge=0)
    notes: str | None = None


class ProductionUpdate(BaseModel):
    eggs_collected: int | None = Field(default=None, ge=0)
    notes: str | None = None


class ProductionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    batch_id: UUID
    date: DtDate
    eggs_collected: int
    bird_count: int
    laying_rate: Decimal
    notes: str | None
    created_at: datetime
    updated_at: datetime


class TargetResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    daily: int
    monthly: int
    laying_pct: int


class ProductionSummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    days_recorded: int
    total_eggs: int
    average_laying_rate: Decimal
    average_daily_eggs: Decimal
    target: TargetResponse
    target_attainment_pct: Decimal
