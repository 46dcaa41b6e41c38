from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Union
from uuid import UUID

from granjafacil.domain.models.vaccine import VaccinePreset
from granjafacil.domain.models.weighing import WeighingCheckpoint
from granjafacil.domain.value_objects.event import EventKind, EventStatus


@dataclass(slots=True, frozen=True)
class PhasePayload:
    week: int
    phase: str
    phase_start: date
    phase_end: date
    consumption_per_bird_grams: float
    total_consumption_kg: int


@dataclass(slots=True, frozen=True)
class VaccinePayload:
    vaccine: VaccinePreset

    @property
    def age_in_days(self) -> int:
        return self.vaccine.age_in_days


@dataclass(slots=True, frozen=True)
class WeighingPayload:
    checkpoint: WeighingCheckpoint

    @property
    def week(self) -> int:
        return self.checkpoint.week


EventPayload = Union[PhasePayload, VaccinePayload, WeighingPayload]


@dataclass(slots=True, frozen=True)
class ScheduleEvent:
    """A generated calendar entry. Never persisted; recomputed from the batch."""

    id: str
    batch_id: UUID
    kind: EventKind
    expected_date: date
    payload: EventPayload
    expected_end_date: date | None = None

    @property
    def title(self) -> str:
        payload = self.payload
        if isinstance(payload, PhasePayload):
            return f"Semana {payload.week} - {payload.phase.capitalize()}"
        if isinstance(payload, VaccinePayload):
            return payload.vaccine.name
        return f"Pesagem - Semana {payload.week}"

    @property
    def description(self) -> str:
        payload = self.payload
        if isinstance(payload, PhasePayload):
            return (
                f"{payload.consumption_per_bird_grams:g}g/ave • "
                f"{payload.total_consumption_kg}kg total"
            )
        if isinstance(payload, VaccinePayload):
            vaccine = payload.vaccine
            return f"{vaccine.route.value} • {vaccine.dose_ml:g}ml • {vaccine.age_in_days} dias"
        checkpoint = payload.checkpoint
        return f"Peso ideal: {checkpoint.ideal_weight_grams}g • {checkpoint.age_in_days} dias"


@dataclass(slots=True, frozen=True)
class ClassifiedEvent:
    event: ScheduleEvent
    status: EventStatus

    @property
    def id(self) -> str:
        return self.event.id

    @property
    def kind(self) -> EventKind:
        return self.event.kind

    @property
    def expected_date(self) -> date:
        return self.event.expected_date
