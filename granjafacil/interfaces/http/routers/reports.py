from __future__ import annotations

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from granjafacil.application.use_cases.reports import feed_consumption
from granjafacil.infrastructure.db.session import SQLAlchemyUnitOfWork
from granjafacil.infrastructure.exports.consumption_csv import (
    export_filename,
    render_consumption_csv,
)
from granjafacil.interfaces.http.deps import get_today, get_uow
from granjafacil.interfaces.http.schemas.reports import FeedConsumptionResponse

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/feed-consumption", response_model=FeedConsumptionResponse)
async def get_feed_consumption(
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    batch_id: UUID | None = Query(None),
):
    report = await feed_consumption.execute(uow, batch_id=batch_id)
    return FeedConsumptionResponse.from_report(report)


@router.get("/feed-consumption/export")
async def export_feed_consumption(
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    today: date = Depends(get_today),
    batch_id: UUID | None = Query(None),
):
    report = await feed_consumption.execute(uow, batch_id=batch_id)
    content = render_consumption_csv(report.rows, report.phase_names)
    filename = export_filename(today.isoformat())
    return Response(
        content=content,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
