"""Calendar generation for a batch.

Every date is derived from the batch's entry date. The functions here are pure:
they never read the clock and never touch storage, so calling them repeatedly
with the same inputs yields identical events.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal

from granjafacil.domain.errors import ConfigurationError, ValidationError
from granjafacil.domain.models.batch import Batch
from granjafacil.domain.models.breed import BreedParameters, PhaseParameters
from granjafacil.domain.models.schedule_event import (
    PhasePayload,
    ScheduleEvent,
    VaccinePayload,
    WeighingPayload,
)
from granjafacil.domain.models.vaccine import VaccinePreset
from granjafacil.domain.models.weighing import WeighingCheckpoint, WeighingRecord
from granjafacil.domain.presets.weighings import WEIGHING_WEEKS
from granjafacil.domain.value_objects.event import EventKind


@dataclass(slots=True, frozen=True)
class PhaseWindow:
    name: str
    start: date
    end: date
    first_week: int
    duration_weeks: int
    consumption_per_bird_week: float
    weekly_consumption_kg: int
    phase_consumption_kg: int

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


def phase_event_id(batch_id, week: int) -> str:
    return f"phase-{batch_id}-{week}"


def vaccine_event_id(batch_id, vaccine_id: str) -> str:
    return f"vaccine-{batch_id}-{vaccine_id}"


def weighing_event_id(batch_id, week: int) -> str:
    return f"weighing-{batch_id}-{week}"


def weekly_feed_kg(grams_per_bird: float, bird_count: int, weeks: int = 1) -> int:
    """Flock feed over `weeks` weeks in kg, rounded half-up once to a whole kilogram."""
    grams = Decimal(str(grams_per_bird)) * bird_count * weeks
    return int((grams / 1000).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def weighing_checkpoints(
    breed: BreedParameters, weeks: Iterable[int] = WEIGHING_WEEKS
) -> list[WeighingCheckpoint]:
    """Expected weighings for a breed.

    Weeks missing from the growth curve take the closest earlier curve point.
    Breeds without a curve have no checkpoints.
    """
    curve = breed.growth_curve
    if not curve:
        return []
    known = sorted(curve)
    checkpoints: list[WeighingCheckpoint] = []
    for week in weeks:
        if week in curve:
            ideal = curve[week]
        else:
            earlier = [w for w in known if w < week]
            if not earlier:
                continue
            ideal = curve[earlier[-1]]
        checkpoints.append(
            WeighingCheckpoint(week=week, age_in_days=week * 7, ideal_weight_grams=int(ideal))
        )
    return checkpoints


def _ensure_schedulable(batch: Batch, breed: BreedParameters | None) -> BreedParameters:
    if breed is None or breed.id != batch.breed_id:
        raise ConfigurationError(
            f"Breed '{batch.breed_id}' is not configured",
            details={"batch_id": str(batch.id), "breed_id": batch.breed_id},
        )
    if batch.bird_count <= 0:
        raise ValidationError(
            "Bird count must be positive", details={"bird_count": batch.bird_count}
        )
    return breed


def _window(phase: PhaseParameters, start: date, first_week: int, bird_count: int) -> PhaseWindow:
    per_bird = phase.consumption_per_bird_week
    return PhaseWindow(
        name=phase.name,
        start=start,
        end=start + timedelta(days=phase.duration_weeks * 7 - 1),
        first_week=first_week,
        duration_weeks=phase.duration_weeks,
        consumption_per_bird_week=per_bird,
        weekly_consumption_kg=weekly_feed_kg(per_bird, bird_count),
        phase_consumption_kg=weekly_feed_kg(per_bird, bird_count, phase.duration_weeks),
    )


def phase_windows(batch: Batch, breed: BreedParameters | None) -> list[PhaseWindow]:
    breed = _ensure_schedulable(batch, breed)
    windows: list[PhaseWindow] = []
    start = batch.entry_date
    week = 1
    for phase in breed.phases:
        window = _window(phase, start, week, batch.bird_count)
        windows.append(window)
        start = window.end + timedelta(days=1)
        week += phase.duration_weeks
    return windows


def _phase_events(batch: Batch, windows: Sequence[PhaseWindow]) -> list[ScheduleEvent]:
    events: list[ScheduleEvent] = []
    for window in windows:
        for offset in range(window.duration_weeks):
            week = window.first_week + offset
            start = window.start + timedelta(weeks=offset)
            events.append(
                ScheduleEvent(
                    id=phase_event_id(batch.id, week),
                    batch_id=batch.id,
                    kind=EventKind.PHASE,
                    expected_date=start,
                    expected_end_date=start + timedelta(days=6),
                    payload=PhasePayload(
                        week=week,
                        phase=window.name,
                        phase_start=window.start,
                        phase_end=window.end,
                        consumption_per_bird_grams=window.consumption_per_bird_week,
                        total_consumption_kg=window.weekly_consumption_kg,
                    ),
                )
            )
    return events


def generate_schedule(
    batch: Batch,
    breed: BreedParameters | None,
    vaccine_presets: Sequence[VaccinePreset],
    checkpoints: Sequence[WeighingCheckpoint],
) -> list[ScheduleEvent]:
    """Phase, vaccine and weighing events for a batch.

    Phase events are one per production week. Booster doses are not scheduled.
    """
    windows = phase_windows(batch, breed)
    events = _phase_events(batch, windows)
    for vaccine in vaccine_presets:
        events.append(
            ScheduleEvent(
                id=vaccine_event_id(batch.id, vaccine.id),
                batch_id=batch.id,
                kind=EventKind.VACCINE,
                expected_date=batch.entry_date + timedelta(days=vaccine.age_in_days),
                payload=VaccinePayload(vaccine=vaccine),
            )
        )
    for checkpoint in sorted(checkpoints, key=lambda c: c.week):
        events.append(
            ScheduleEvent(
                id=weighing_event_id(batch.id, checkpoint.week),
                batch_id=batch.id,
                kind=EventKind.WEIGHING,
                expected_date=batch.entry_date + timedelta(days=checkpoint.age_in_days),
                payload=WeighingPayload(checkpoint=checkpoint),
            )
        )
    return events


def seed_weighing_records(
    batch: Batch,
    checkpoints: Iterable[WeighingCheckpoint],
    existing: Iterable[WeighingRecord],
) -> list[WeighingRecord]:
    """Records still missing for the batch, one per checkpoint week."""
    present = {r.week for r in existing if r.batch_id == batch.id}
    missing: list[WeighingRecord] = []
    for checkpoint in checkpoints:
        if checkpoint.week in present:
            continue
        present.add(checkpoint.week)
        expected = batch.entry_date + timedelta(days=checkpoint.age_in_days)
        missing.append(WeighingRecord.seed(batch.id, checkpoint, expected))
    return missing


def current_phase(windows: Sequence[PhaseWindow], today: date) -> PhaseWindow | None:
    for window in windows:
        if window.contains(today):
            return window
    return None
