from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.domain.errors import ConfigurationError, NotFound
from granjafacil.domain.models.alert import Alert
from granjafacil.domain.models.batch import Batch
from granjafacil.domain.models.schedule_event import ClassifiedEvent
from granjafacil.domain.models.weighing import WeighingRecord
from granjafacil.domain.services.alerts import derive_alerts, merge_alerts, sort_for_display
from granjafacil.domain.services.calendar_summary import (
    CalendarSummary,
    filter_events,
    summarize,
)
from granjafacil.domain.services.classifier import DEFAULT_TOLERANCE_DAYS, classify_events
from granjafacil.domain.services.schedule import (
    PhaseWindow,
    generate_schedule,
    phase_windows,
    seed_weighing_records,
    weighing_checkpoints,
)
from granjafacil.domain.value_objects.alert import AlertRegenerationPolicy
from granjafacil.domain.value_objects.event import EventKind, EventStatus

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CalendarFilters:
    kinds: list[EventKind] | None = None
    statuses: list[EventStatus] | None = None
    start: date | None = None
    end: date | None = None


@dataclass(slots=True)
class BuildCalendarOutput:
    batch: Batch
    events: list[ClassifiedEvent]
    alerts: list[Alert]
    weighings: list[WeighingRecord] = field(default_factory=list)
    phases: list[PhaseWindow] = field(default_factory=list)
    summary: CalendarSummary | None = None
    # Set when the batch cannot be scheduled; events are then empty
    error: str | None = None


async def _seed_weighings(uow: UnitOfWork, batch: Batch, checkpoints) -> list[WeighingRecord]:
    existing = await uow.weighing_records.list_for_batch(batch.id)
    missing = seed_weighing_records(batch, checkpoints, existing)
    if not missing:
        return existing
    await uow.weighing_records.add_many(missing)
    logger.info("Seeded %s weighing records for batch %s", len(missing), batch.id)
    return await uow.weighing_records.list_for_batch(batch.id)


async def execute(
    uow: UnitOfWork,
    batch_id: UUID,
    *,
    now: datetime,
    today: date,
    tolerance_days: int = DEFAULT_TOLERANCE_DAYS,
    policy: AlertRegenerationPolicy = AlertRegenerationPolicy.REPLACE,
    filters: CalendarFilters | None = None,
) -> BuildCalendarOutput:
    """Generate, classify and persist derived state for one batch.

    Weighing records are seeded for the breed's checkpoints and the batch's
    alerts are regenerated. A batch whose breed is not configured yields an
    empty calendar with `error` set instead of failing.
    """
    batch = await uow.batches.get(batch_id)
    if batch is None:
        raise NotFound("Batch not found", details={"batch_id": str(batch_id)})

    breed = await uow.breeds.get(batch.breed_id)
    try:
        windows = phase_windows(batch, breed)
        checkpoints = weighing_checkpoints(breed)
        events = generate_schedule(batch, breed, uow.vaccines.list(), checkpoints)
    except ConfigurationError as exc:
        logger.warning("Cannot build calendar for batch %s: %s", batch.id, exc.message)
        alerts = await uow.alerts.list_for_batch(batch.id)
        return BuildCalendarOutput(
            batch=batch, events=[], alerts=sort_for_display(alerts), error=exc.message
        )

    weighings = await _seed_weighings(uow, batch, checkpoints)
    vaccinations = await uow.vaccination_records.list_for_batch(batch.id)
    classified = classify_events(
        events, vaccinations, weighings, today, tolerance_days=tolerance_days
    )

    previous = await uow.alerts.list_for_batch(batch.id)
    fresh = derive_alerts(batch.id, classified, weighings, now, today=today)
    alerts = merge_alerts(previous, fresh, policy)
    await uow.alerts.replace_for_batch(batch.id, alerts)
    await uow.commit()
    logger.info("Regenerated %s alerts for batch %s", len(alerts), batch.id)

    summary = summarize(classified, alerts, weighings, windows, today)
    if filters is not None:
        classified = filter_events(
            classified,
            kinds=filters.kinds,
            statuses=filters.statuses,
            start=filters.start,
            end=filters.end,
        )
    return BuildCalendarOutput(
        batch=batch,
        events=classified,
        alerts=sort_for_display(alerts),
        weighings=weighings,
        phases=windows,
        summary=summary,
    )
