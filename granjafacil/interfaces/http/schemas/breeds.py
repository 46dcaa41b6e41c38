from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PhaseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    name: str = Field(min_length=1, max_length=50)
    duration_weeks: int = Field(ge=1, le=100)
    weekly_consumption_grams: float | None = Field(default=None, ge=0, le=1000)
    accumulated_consumption_grams: float | None = Field(default=None, ge=0, le=1000)

    @model_validator(mode="after")
    def require_consumption(self) -> PhaseSchema:
        if self.weekly_consumption_grams is None and self.accumulated_consumption_grams is None:
            raise ValueError("weekly or accumulated consumption is required")
        return self


class BreedCreate(BaseModel):
    name: str = Field(min_length=3, max_length=50)
    phases: list[PhaseSchema] = Field(min_length=1)
    growth_curve: dict[int, int] = Field(default_factory=dict)


class BreedUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=3, max_length=50)
    phases: list[PhaseSchema] | None = Field(default=None, min_length=1)
    growth_curve: dict[int, int] | None = None
    active: bool | None = None


class PhaseResponse(PhaseSchema):
    consumption_per_bird_week: float


class BreedResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: str
    name: str
    phases: list[PhaseResponse]
    growth_curve: dict[int, int]
    total_weeks: int
    is_system_default: bool
    active: bool
