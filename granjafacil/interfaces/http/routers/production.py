from __future__ import annotations

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from granjafacil.application.use_cases.production import (
    delete_production,
    list_production,
    production_summary,
    record_production,
    update_production,
)
from granjafacil.config.settings import Settings
from granjafacil.infrastructure.db.session import SQLAlchemyUnitOfWork
from granjafacil.interfaces.http.deps import get_app_settings, get_today, get_uow
from granjafacil.interfaces.http.schemas.production import (
    ProductionCreate,
    ProductionResponse,
    ProductionSummaryResponse,
    ProductionUpdate,
    TargetResponse,
)

router = APIRouter(prefix="/egg-production", tags=["production"])


@router.get("/", response_model=list[ProductionResponse])
async def list_all(
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    batch_id: UUID | None = Query(None),
    date_from: date | None = Query(None),
    date_to: date | None = Query(None),
):
    items = await list_production.execute(
        uow, batch_id=batch_id, date_from=date_from, date_to=date_to
    )
    return [ProductionResponse.model_validate(p) for p in items]


@router.post("/", response_model=ProductionResponse, status_code=status.HTTP_201_CREATED)
async def create(
    payload: ProductionCreate,
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    today: date = Depends(get_today),
):
    created = await record_production.execute(
        uow, record_production.RecordProductionInput(**payload.model_dump()), today=today
    )
    return ProductionResponse.model_validate(created)


@router.get("/summary", response_model=ProductionSummaryResponse)
async def summary(
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    settings: Settings = Depends(get_app_settings),
    batch_id: UUID = Query(...),
    date_from: date | None = Query(None),
    date_to: date | None = Query(None),
):
    result = await production_summary.execute(
        uow,
        batch_id,
        date_from=date_from,
        date_to=date_to,
        laying_pct=settings.laying_target_pct,
    )
    return ProductionSummaryResponse.model_validate(result)


@router.get("/targets", response_model=TargetResponse)
async def targets(
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    settings: Settings = Depends(get_app_settings),
    batch_id: UUID = Query(...),
):
    target = await production_summary.targets(
        uow, batch_id, laying_pct=settings.laying_target_pct
    )
    return TargetResponse.model_validate(target)


@router.put("/{record_id}", response_model=ProductionResponse)
async def update(
    record_id: UUID, payload: ProductionUpdate, *, uow: SQLAlchemyUnitOfWork = Depends(get_uow)
):
    updated = await update_production.execute(
        uow, record_id, payload.model_dump(exclude_unset=True)
    )
    return ProductionResponse.model_validate(updated)


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete(record_id: UUID, *, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    await delete_production.execute(uow, record_id)
    return None
