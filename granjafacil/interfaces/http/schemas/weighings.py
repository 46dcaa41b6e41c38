from __future__ import annotations

from datetime import date
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from granjafacil.domain.value_objects.weighing_status import WeighingStatus
from granjafacil.interfaces.http.schemas.calendar import DeviationResponse


class WeighingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    batch_id: UUID
    week: int
    age_in_days: int
    expected_date: date
    ideal_weight_grams: int
    actual_weight_grams: float | None
    performed_date: date | None
    sample_size: int | None
    responsible: str | None
    notes: str | None
    status: WeighingStatus


class WeightCreate(BaseModel):
    actual_weight_grams: float = Field(gt=0)
    performed_date: date | None = None
    sample_size: int | None = Field(default=None, ge=1)
    responsible: str | None = None
    notes: str | None = None


class RecordedWeightResponse(BaseModel):
    record: WeighingResponse
    deviation: DeviationResponse | None
