from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from granjafacil.domain.value_objects.vaccine import ApplicationRoute, VaccineType


class VaccinePresetResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: str
    name: str
    manufacturer: str
    type: VaccineType
    route: ApplicationRoute
    age_in_days: int
    dose_ml: float
    booster_interval_days: int | None
    notes: str | None


class VaccinationCreate(BaseModel):
    vaccine_id: str
    application_date: date
    birds_vaccinated: int = Field(ge=1)
    responsible: str = Field(min_length=2, max_length=100)
    age_at_application: int | None = Field(default=None, ge=0)
    vaccine_lot: str | None = None
    notes: str | None = None


class VaccinationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    batch_id: UUID
    vaccine_id: str
    application_date: date
    age_at_application: int
    birds_vaccinated: int
    responsible: str
    vaccine_lot: str | None
    notes: str | None
    next_application_date: date | None
    created_at: datetime
