from __future__ import annotations

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, status

from granjafacil.application.use_cases.vaccination import (
    apply_vaccine,
    list_vaccinations,
    list_vaccine_presets,
)
from granjafacil.infrastructure.db.session import SQLAlchemyUnitOfWork
from granjafacil.interfaces.http.deps import get_today, get_uow
from granjafacil.interfaces.http.schemas.vaccinations import (
    VaccinationCreate,
    VaccinationResponse,
    VaccinePresetResponse,
)

router = APIRouter(tags=["vaccinations"])


@router.get("/vaccines", response_model=list[VaccinePresetResponse])
async def list_presets(*, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    presets = await list_vaccine_presets.execute(uow)
    return [VaccinePresetResponse.model_validate(p) for p in presets]


@router.get("/batches/{batch_id}/vaccinations", response_model=list[VaccinationResponse])
async def list_records(batch_id: UUID, *, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    records = await list_vaccinations.execute(uow, batch_id)
    return [VaccinationResponse.model_validate(r) for r in records]


@router.post(
    "/batches/{batch_id}/vaccinations",
    response_model=VaccinationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def apply(
    batch_id: UUID,
    payload: VaccinationCreate,
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    today: date = Depends(get_today),
):
    created = await apply_vaccine.execute(
        uow, batch_id, apply_vaccine.ApplyVaccineInput(**payload.model_dump()), today=today
    )
    return VaccinationResponse.model_validate(created)
