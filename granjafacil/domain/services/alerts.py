from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import date, datetime
from uuid import UUID

from granjafacil.domain.errors import InvalidInputError
from granjafacil.domain.models.alert import Alert
from granjafacil.domain.models.schedule_event import ClassifiedEvent, WeighingPayload
from granjafacil.domain.models.weighing import WeighingRecord
from granjafacil.domain.services.deviation import analyze_deviation
from granjafacil.domain.services.schedule import weighing_event_id
from granjafacil.domain.value_objects.alert import (
    AlertKind,
    AlertPriority,
    AlertRegenerationPolicy,
)
from granjafacil.domain.value_objects.deviation import DeviationSeverity
from granjafacil.domain.value_objects.event import EventKind, EventStatus
from granjafacil.utils.datetime_tz import format_br_date

logger = logging.getLogger(__name__)

_WEIGHT_PRIORITY = {
    DeviationSeverity.ATTENTION: AlertPriority.HIGH,
    DeviationSeverity.CRITICAL: AlertPriority.CRITICAL,
}


def derive_alerts(
    batch_id: UUID,
    classified: Sequence[ClassifiedEvent],
    weighing_records: Iterable[WeighingRecord],
    now: datetime,
    *,
    today: date | None = None,
) -> list[Alert]:
    """Late vaccines, late weighings and out-of-range weights for one batch.

    The result is the complete alert set for the batch; no order is implied.
    `today` defaults to the calendar day of `now`.
    """
    today = today or now.date()
    alerts: list[Alert] = []

    for item in classified:
        event = item.event
        if event.batch_id != batch_id or item.status is not EventStatus.LATE:
            continue
        if event.kind is EventKind.VACCINE:
            days_late = (today - event.expected_date).days
            alerts.append(
                Alert(
                    id=f"alert-{event.id}",
                    batch_id=batch_id,
                    event_id=event.id,
                    kind=AlertKind.VACCINE_LATE,
                    priority=AlertPriority.HIGH,
                    title=f"Vacina {event.title} atrasada",
                    description=(
                        f"Prevista para {format_br_date(event.expected_date)} - "
                        f"{days_late} dias de atraso"
                    ),
                    created_at=now,
                )
            )
        elif event.kind is EventKind.WEIGHING:
            payload = event.payload
            week = payload.week if isinstance(payload, WeighingPayload) else "?"
            alerts.append(
                Alert(
                    id=f"alert-{event.id}",
                    batch_id=batch_id,
                    event_id=event.id,
                    kind=AlertKind.WEIGHING_LATE,
                    priority=AlertPriority.MEDIUM,
                    title=f"Pesagem semana {week} atrasada",
                    description=f"Prevista para {format_br_date(event.expected_date)}",
                    created_at=now,
                )
            )

    for record in weighing_records:
        if record.batch_id != batch_id or record.actual_weight_grams is None:
            continue
        try:
            deviation = analyze_deviation(record.actual_weight_grams, record.ideal_weight_grams)
        except InvalidInputError as exc:
            logger.warning(
                "Skipping weight alert for batch %s week %s: %s", batch_id, record.week, exc
            )
            continue
        priority = _WEIGHT_PRIORITY.get(deviation.severity)
        if priority is None:
            continue
        event_id = weighing_event_id(batch_id, record.week)
        alerts.append(
            Alert(
                id=f"alert-weight-{event_id}",
                batch_id=batch_id,
                event_id=event_id,
                kind=AlertKind.WEIGHT_OUT_OF_RANGE,
                priority=priority,
                title=f"Peso fora do ideal - Semana {record.week}",
                description=(
                    f"Desvio de {abs(deviation.percent):.1f}% "
                    f"(Real: {record.actual_weight_grams:g}g, "
                    f"Ideal: {record.ideal_weight_grams}g)"
                ),
                created_at=now,
            )
        )
    return alerts


def merge_alerts(
    previous: Iterable[Alert],
    fresh: Sequence[Alert],
    policy: AlertRegenerationPolicy = AlertRegenerationPolicy.REPLACE,
) -> list[Alert]:
    """Reconcile a batch's stored alerts with a newly derived set."""
    if policy is AlertRegenerationPolicy.REPLACE:
        return list(fresh)
    acknowledged = {a.id for a in previous if a.acknowledged}
    return [a.acknowledge() if a.id in acknowledged else a for a in fresh]


def sort_for_display(alerts: Iterable[Alert]) -> list[Alert]:
    """Most urgent first, then newest."""
    return sorted(
        alerts,
        key=lambda a: (-a.priority.rank, -a.created_at.timestamp(), a.id),
    )
