from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date

from granjafacil.domain.models.schedule_event import (
    ClassifiedEvent,
    PhasePayload,
    ScheduleEvent,
    VaccinePayload,
    WeighingPayload,
)
from granjafacil.domain.models.vaccine import VaccinationRecord
from granjafacil.domain.models.weighing import WeighingRecord
from granjafacil.domain.value_objects.event import EventStatus

DEFAULT_TOLERANCE_DAYS = 3


def _by_date(expected: date, today: date) -> EventStatus:
    # Late only strictly after the expected day.
    return EventStatus.LATE if today > expected else EventStatus.PENDING


def find_vaccination(
    event: ScheduleEvent,
    vaccinations: Iterable[VaccinationRecord],
    tolerance_days: int = DEFAULT_TOLERANCE_DAYS,
) -> VaccinationRecord | None:
    payload = event.payload
    if not isinstance(payload, VaccinePayload):
        return None
    for record in vaccinations:
        if (
            record.batch_id == event.batch_id
            and record.vaccine_id == payload.vaccine.id
            and abs(record.age_at_application - payload.age_in_days) <= tolerance_days
        ):
            return record
    return None


def find_weighing(
    event: ScheduleEvent, weighings: Iterable[WeighingRecord]
) -> WeighingRecord | None:
    payload = event.payload
    if not isinstance(payload, WeighingPayload):
        return None
    for record in weighings:
        if record.batch_id == event.batch_id and record.week == payload.week:
            return record
    return None


def classify(
    event: ScheduleEvent,
    vaccinations: Iterable[VaccinationRecord],
    weighings: Iterable[WeighingRecord],
    today: date,
    *,
    tolerance_days: int = DEFAULT_TOLERANCE_DAYS,
) -> EventStatus:
    payload = event.payload
    if isinstance(payload, PhasePayload):
        end = event.expected_end_date or event.expected_date
        return EventStatus.DONE if today > end else EventStatus.PENDING
    if isinstance(payload, VaccinePayload):
        if find_vaccination(event, vaccinations, tolerance_days) is not None:
            return EventStatus.APPLIED
        return _by_date(event.expected_date, today)
    record = find_weighing(event, weighings)
    if record is not None and record.has_actual:
        return EventStatus.DONE
    return _by_date(event.expected_date, today)


def classify_events(
    events: Sequence[ScheduleEvent],
    vaccinations: Sequence[VaccinationRecord],
    weighings: Sequence[WeighingRecord],
    today: date,
    *,
    tolerance_days: int = DEFAULT_TOLERANCE_DAYS,
) -> list[ClassifiedEvent]:
    return [
        ClassifiedEvent(
            event=event,
            status=classify(
                event, vaccinations, weighings, today, tolerance_days=tolerance_days
            ),
        )
        for event in events
    ]
