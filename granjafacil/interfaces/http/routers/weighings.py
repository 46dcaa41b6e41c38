from __future__ import annotations

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, Path

from granjafacil.application.use_cases.weighing import list_weighings, record_weight
from granjafacil.infrastructure.db.session import SQLAlchemyUnitOfWork
from granjafacil.interfaces.http.deps import get_today, get_uow
from granjafacil.interfaces.http.schemas.calendar import DeviationResponse
from granjafacil.interfaces.http.schemas.weighings import (
    RecordedWeightResponse,
    WeighingResponse,
    WeightCreate,
)

router = APIRouter(prefix="/batches/{batch_id}/weighings", tags=["weighings"])


@router.get("", response_model=list[WeighingResponse])
async def list_records(batch_id: UUID, *, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    records = await list_weighings.execute(uow, batch_id)
    return [WeighingResponse.model_validate(r) for r in records]


@router.put("/{week}", response_model=RecordedWeightResponse)
async def record(
    batch_id: UUID,
    payload: WeightCreate,
    week: int = Path(ge=1),
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    today: date = Depends(get_today),
):
    result = await record_weight.execute(
        uow, batch_id, week, record_weight.RecordWeightInput(**payload.model_dump()), today=today
    )
    deviation = result.deviation
    return RecordedWeightResponse(
        record=WeighingResponse.model_validate(result.record),
        deviation=(
            DeviationResponse(
                percent=round(deviation.percent, 2),
                severity=deviation.severity,
                grade=deviation.grade,
                label=deviation.label,
            )
            if deviation
            else None
        ),
    )
