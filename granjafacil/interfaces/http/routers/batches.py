from __future__ import annotations

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, status

from granjafacil.application.use_cases.batches import get_batch, list_batches, register_batch
from granjafacil.infrastructure.db.session import SQLAlchemyUnitOfWork
from granjafacil.interfaces.http.deps import get_today, get_uow
from granjafacil.interfaces.http.schemas.batches import BatchCreate, BatchResponse

router = APIRouter(prefix="/batches", tags=["batches"])


@router.get("/", response_model=list[BatchResponse])
async def list_all(*, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    batches = await list_batches.execute(uow)
    return [BatchResponse.model_validate(b) for b in batches]


@router.post("/", response_model=BatchResponse, status_code=status.HTTP_201_CREATED)
async def register(
    payload: BatchCreate,
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    today: date = Depends(get_today),
):
    created = await register_batch.execute(
        uow, register_batch.RegisterBatchInput(**payload.model_dump()), today=today
    )
    return BatchResponse.model_validate(created)


@router.get("/{batch_id}", response_model=BatchResponse)
async def get_one(batch_id: UUID, *, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    batch = await get_batch.execute(uow, batch_id)
    return BatchResponse.model_validate(batch)
