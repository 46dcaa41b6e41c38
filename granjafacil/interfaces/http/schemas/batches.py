from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class BatchCreate(BaseModel):
    name: str = Field(min_length=3, max_length=100)
    bird_count: int = Field(ge=1, le=100_000)
    birth_date: date
    entry_date: date
    breed_id: str
    house_id: UUID | None = None
    cost_center: str | None = None
    notes: str | None = None


class BatchResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    name: str
    bird_count: int
    birth_date: date
    entry_date: date
    breed_id: str
    house_id: UUID | None
    cost_center: str | None
    notes: str | None
    created_at: datetime
