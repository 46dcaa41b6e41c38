from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date

from granjafacil.domain.models.alert import Alert
from granjafacil.domain.models.schedule_event import ClassifiedEvent
from granjafacil.domain.models.weighing import WeighingRecord
from granjafacil.domain.services.deviation import Deviation, analyze_deviation
from granjafacil.domain.services.schedule import PhaseWindow, current_phase
from granjafacil.domain.value_objects.alert import AlertPriority
from granjafacil.domain.value_objects.event import EventKind, EventStatus


@dataclass(slots=True, frozen=True)
class CalendarSummary:
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
    latest_deviation: Deviation | None


def _pct(part: int, whole: int) -> int:
    return round(part * 100 / whole) if whole else 0


def filter_events(
    classified: Iterable[ClassifiedEvent],
    *,
    kinds: Iterable[EventKind] | None = None,
    statuses: Iterable[EventStatus] | None = None,
    start: date | None = None,
    end: date | None = None,
) -> list[ClassifiedEvent]:
    kind_set = set(kinds) if kinds else None
    status_set = set(statuses) if statuses else None
    result = []
    for item in classified:
        if kind_set and item.kind not in kind_set:
            continue
        if status_set and item.status not in status_set:
            continue
        if start and item.expected_date < start:
            continue
        if end and item.expected_date > end:
            continue
        result.append(item)
    return result


def summarize(
    classified: Sequence[ClassifiedEvent],
    alerts: Iterable[Alert],
    weighings: Iterable[WeighingRecord],
    windows: Sequence[PhaseWindow],
    today: date,
) -> CalendarSummary:
    pending = sum(1 for c in classified if c.status is EventStatus.PENDING)
    late = sum(1 for c in classified if c.status is EventStatus.LATE)
    completed = sum(1 for c in classified if c.status.is_completed)

    vaccines = [c for c in classified if c.kind is EventKind.VACCINE]
    applied = sum(1 for c in vaccines if c.status is EventStatus.APPLIED)
    late_vaccines = sum(1 for c in vaccines if c.status is EventStatus.LATE)

    active = [a for a in alerts if not a.acknowledged]
    critical = sum(1 for a in active if a.priority is AlertPriority.CRITICAL)

    weighed = sorted((w for w in weighings if w.has_actual), key=lambda w: w.week)
    latest = weighed[-1] if weighed else None
    deviation = None
    if latest is not None and latest.ideal_weight_grams > 0:
        deviation = analyze_deviation(latest.actual_weight_grams, latest.ideal_weight_grams)

    phase = current_phase(windows, today)
    return CalendarSummary(
        total_events=len(classified),
        pending=pending,
        late=late,
        completed=completed,
        completion_pct=_pct(completed, len(classified)),
        vaccination_pct=_pct(applied, len(vaccines)),
        late_vaccines=late_vaccines,
        active_alerts=len(active),
        critical_alerts=critical,
        current_phase=phase.name if phase else None,
        latest_weight_grams=latest.actual_weight_grams if latest else None,
        latest_ideal_grams=latest.ideal_weight_grams if latest else None,
        latest_deviation=deviation,
    )
