from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel

from granjafacil.domain.models.schedule_event import (
    ClassifiedEvent,
    PhasePayload,
    VaccinePayload,
)
from granjafacil.domain.services.calendar_summary import CalendarSummary
from granjafacil.domain.services.schedule import PhaseWindow
from granjafacil.domain.value_objects.deviation import DeviationSeverity, WeightGrade
from granjafacil.domain.value_objects.event import EventKind, EventStatus
from granjafacil.interfaces.http.schemas.alerts import AlertResponse
from granjafacil.interfaces.http.schemas.batches import BatchResponse


class EventResponse(BaseModel):
    id: str
    kind: EventKind
    status: EventStatus
    expected_date: date
    expected_end_date: date | None
    title: str
    description: str
    data: dict[str, Any]

    @classmethod
    def from_classified(cls, item: ClassifiedEvent) -> EventResponse:
        event = item.event
        payload = event.payload
        if isinstance(payload, PhasePayload):
            data = {
                "week": payload.week,
                "phase": payload.phase,
                "phase_start": payload.phase_start.isoformat(),
                "phase_end": payload.phase_end.isoformat(),
                "consumption_per_bird_grams": payload.consumption_per_bird_grams,
                "total_consumption_kg": payload.total_consumption_kg,
            }
        elif isinstance(payload, VaccinePayload):
            vaccine = payload.vaccine
            data = {
                "vaccine_id": vaccine.id,
                "name": vaccine.name,
                "manufacturer": vaccine.manufacturer,
                "type": vaccine.type.value,
                "route": vaccine.route.value,
                "age_in_days": vaccine.age_in_days,
                "dose_ml": vaccine.dose_ml,
            }
        else:
            checkpoint = payload.checkpoint
            data = {
                "week": checkpoint.week,
                "age_in_days": checkpoint.age_in_days,
                "ideal_weight_grams": checkpoint.ideal_weight_grams,
            }
        return cls(
            id=event.id,
            kind=event.kind,
            status=item.status,
            expected_date=event.expected_date,
            expected_end_date=event.expected_end_date,
            title=event.title,
            description=event.description,
            data=data,
        )


class PhaseWindowResponse(BaseModel):
    name: str
    start: date
    end: date
    first_week: int
    duration_weeks: int
    consumption_per_bird_week: float
    weekly_consumption_kg: int
    phase_consumption_kg: int

    @classmethod
    def from_window(cls, window: PhaseWindow) -> PhaseWindowResponse:
        return cls(
            name=window.name,
            start=window.start,
            end=window.end,
            first_week=window.first_week,
            duration_weeks=window.duration_weeks,
            consumption_per_bird_week=window.consumption_per_bird_week,
            weekly_consumption_kg=window.weekly_consumption_kg,
            phase_consumption_kg=window.phase_consumption_kg,
        )


class DeviationResponse(BaseModel):
    percent: float
    severity: DeviationSeverity
    grade: WeightGrade
    label: str


class SummaryResponse(BaseModel):
    total_events: int
    pending: int
    late: int
    completed: int
    completion_pct: int
    vaccination_pct: int
    late_vaccines: int
    active_alerts: int
    critical_alerts: int
    current_phase: str | None
    latest_weight_grams: float | None
    latest_ideal_grams: int | None
    latest_deviation: DeviationResponse | None

    @classmethod
    def from_summary(cls, summary: CalendarSummary) -> SummaryResponse:
        deviation = summary.latest_deviation
        return cls(
            total_events=summary.total_events,
            pending=summary.pending,
            late=summary.late,
            completed=summary.completed,
            completion_pct=summary.completion_pct,
            vaccination_pct=summary.vaccination_pct,
            late_vaccines=summary.late_vaccines,
            active_alerts=summary.active_alerts,
            critical_alerts=summary.critical_alerts,
            current_phase=summary.current_phase,
            latest_weight_grams=summary.latest_weight_grams,
            latest_ideal_grams=summary.latest_ideal_grams,
            latest_deviation=(
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


class CalendarResponse(BaseModel):
    batch: BatchResponse
    events: list[EventResponse]
    alerts: list[AlertResponse]
    phases: list[PhaseWindowResponse]
    summary: SummaryResponse | None
    error: str | None
