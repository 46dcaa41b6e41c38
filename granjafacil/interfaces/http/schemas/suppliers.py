from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class SupplierCreate(BaseModel):
    name: str = Field(min_length=3, max_length=255)
    contact: str = Field(min_length=2, max_length=255)
    cnpj: str | None = None
    phone: str | None = None
    email: EmailStr | None = None
    address: str | None = None
    notes: str | None = None
    active: bool = True


class SupplierUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=3, max_length=255)
    contact: str | None = Field(default=None, min_length=2, max_length=255)
    cnpj: str | None = None
    phone: str | None = None
    email: EmailStr | None = None
    address: str | None = None
    notes: str | None = None
    active: bool | None = None


class SupplierResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    name: str
    contact: str
    cnpj: str | None
    phone: str | None
    email: str | None
    address: str | None
    notes: str | None
    active: bool
    created_at: datetime
    updated_at: datetime
