from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from granjafacil.application.use_cases.calendar import build_calendar
from granjafacil.config.settings import Settings
from granjafacil.domain.value_objects.event import EventKind, EventStatus
from granjafacil.infrastructure.db.session import SQLAlchemyUnitOfWork
from granjafacil.infrastructure.exports.calendar_csv import export_filename, render_calendar_csv
from granjafacil.interfaces.http.deps import get_app_settings, get_now, get_today, get_uow
from granjafacil.interfaces.http.schemas.alerts import AlertResponse
from granjafacil.interfaces.http.schemas.batches import BatchResponse
from granjafacil.interfaces.http.schemas.calendar import (
    CalendarResponse,
    EventResponse,
    PhaseWindowResponse,
    SummaryResponse,
)

router = APIRouter(prefix="/batches/{batch_id}/calendar", tags=["calendar"])


async def _build(
    uow: SQLAlchemyUnitOfWork,
    batch_id: UUID,
    settings: Settings,
    now: datetime,
    today: date,
    filters: build_calendar.CalendarFilters | None = None,
) -> build_calendar.BuildCalendarOutput:
    return await build_calendar.execute(
        uow,
        batch_id,
        now=now,
        today=today,
        tolerance_days=settings.vaccine_match_tolerance_days,
        policy=settings.alert_regeneration_policy,
        filters=filters,
    )


@router.get("", response_model=CalendarResponse)
async def get_calendar(
    batch_id: UUID,
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    settings: Settings = Depends(get_app_settings),
    now: datetime = Depends(get_now),
    today: date = Depends(get_today),
    kind: list[EventKind] | None = Query(None),
    status: list[EventStatus] | None = Query(None),
    date_from: date | None = Query(None),
    date_to: date | None = Query(None),
):
    filters = build_calendar.CalendarFilters(
        kinds=kind, statuses=status, start=date_from, end=date_to
    )
    result = await _build(uow, batch_id, settings, now, today, filters)
    return CalendarResponse(
        batch=BatchResponse.model_validate(result.batch),
        events=[EventResponse.from_classified(e) for e in result.events],
        alerts=[AlertResponse.model_validate(a) for a in result.alerts],
        phases=[PhaseWindowResponse.from_window(w) for w in result.phases],
        summary=SummaryResponse.from_summary(result.summary) if result.summary else None,
        error=result.error,
    )


@router.get("/export")
async def export_calendar(
    batch_id: UUID,
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    settings: Settings = Depends(get_app_settings),
    now: datetime = Depends(get_now),
    today: date = Depends(get_today),
):
    result = await _build(uow, batch_id, settings, now, today)
    content = render_calendar_csv(result.events, result.batch.name)
    filename = export_filename(result.batch.name, today.isoformat())
    return Response(
        content=content,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
