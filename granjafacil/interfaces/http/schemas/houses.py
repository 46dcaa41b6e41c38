from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from granjafacil.domain.models.house import Responsible
from granjafacil.domain.services.housing import DEFAULT_DENSITY


class ResponsibleSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    name: str = Field(max_length=100)
    role: str = Field(max_length=100)

    def to_domain(self) -> Responsible:
        return Responsible(self.name, self.role)


class HouseCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    width_m: Decimal
    length_m: Decimal
    height_m: Decimal
    density: Decimal = DEFAULT_DENSITY
    responsibles: list[ResponsibleSchema] = Field(default_factory=list)
    manual_capacity: int | None = None
    capacity_override: bool = False
    notes: str | None = Field(default=None, max_length=1024)


class HouseUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    width_m: Decimal | None = None
    length_m: Decimal | None = None
    height_m: Decimal | None = None
    density: Decimal | None = None
    responsibles: list[ResponsibleSchema] | None = None
    manual_capacity: int | None = None
    capacity_override: bool | None = None
    notes: str | None = Field(default=None, max_length=1024)


class HouseResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    name: str
    width_m: Decimal
    length_m: Decimal
    height_m: Decimal
    density: Decimal
    area_m2: Decimal
    max_capacity: int
    manual_capacity: int | None
    capacity_override: bool
    effective_capacity: int
    responsibles: list[ResponsibleSchema]
    notes: str | None
    created_at: datetime
    updated_at: datetime
