from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from granjafacil.domain.services.alerts import derive_alerts, merge_alerts, sort_for_display
from granjafacil.domain.services.classifier import classify_events
from granjafacil.domain.services.schedule import generate_schedule, weighing_checkpoints
from granjafacil.domain.value_objects.alert import (
    AlertKind,
    AlertPriority,
    AlertRegenerationPolicy,
)
from granjafacil.domain.value_objects.event import EventKind, EventStatus
from tests.factories import NOW, make_batch, make_breed, make_vaccine, make_weighing


def _classified(batch, breed, vaccines, weighings, today):
    events = generate_schedule(batch, breed, vaccines, weighing_checkpoints(breed))
    return classify_events(events, [], weighings, today)


def test_late_vaccine_raises_high_priority_alert():
    batch = make_batch(entry=date(2024, 1, 1))
    classified = _classified(batch, make_breed(), [make_vaccine(age=7)], [], date(2024, 1, 10))

    alerts = derive_alerts(batch.id, classified, [], NOW, today=date(2024, 1, 10))

    assert len(alerts) == 1
    alert = alerts[0]
    assert alert.id == f"alert-vaccine-{batch.id}-newcastle-7d"
    assert alert.kind is AlertKind.VACCINE_LATE
    assert alert.priority is AlertPriority.HIGH
    assert alert.title == "Vacina Newcastle (La Sota) atrasada"
    assert alert.description == "Prevista para 08/01/2024 - 2 dias de atraso"
    assert alert.acknowledged is False


def test_critical_weight_raises_critical_alert():
    batch = make_batch()
    record = make_weighing(batch, 10, 500, actual=350)

    alerts = derive_alerts(batch.id, [], [record], NOW)

    assert [a.priority for a in alerts] == [AlertPriority.CRITICAL]
    assert alerts[0].id == f"alert-weight-weighing-{batch.id}-10"
    assert alerts[0].title == "Peso fora do ideal - Semana 10"


def test_attention_weight_raises_high_alert_and_in_range_none():
    batch = make_batch()
    attention = make_weighing(batch, 3, 500, actual=560)
    fine = make_weighing(batch, 4, 500, actual=520)

    alerts = derive_alerts(batch.id, [], [attention, fine], NOW)

    assert [(a.kind, a.priority) for a in alerts] == [
        (AlertKind.WEIGHT_OUT_OF_RANGE, AlertPriority.HIGH)
    ]


def test_one_alert_per_late_event_and_out_of_range_weight():
    breed = make_breed(curve={1: 70, 2: 120, 3: 200})
    batch = make_batch(entry=date(2024, 1, 1))
    today = date(2024, 1, 25)
    weighings = [make_weighing(batch, 1, 70, actual=40)]
    vaccines = [make_vaccine("v-7", 7), make_vaccine("v-14", 14), make_vaccine("v-60", 60)]
    classified = _classified(batch, breed, vaccines, weighings, today)

    alerts = derive_alerts(batch.id, classified, weighings, NOW, today=today)

    late = [
        c for c in classified
        if c.status is EventStatus.LATE and c.kind in (EventKind.VACCINE, EventKind.WEIGHING)
    ]
    assert len(alerts) == len(late) + 1
    assert len({a.id for a in alerts}) == len(alerts)
    by_kind = {a.kind for a in alerts}
    assert by_kind == {
        AlertKind.VACCINE_LATE,
        AlertKind.WEIGHING_LATE,
        AlertKind.WEIGHT_OUT_OF_RANGE,
    }


def test_derivation_is_stable_for_the_same_inputs():
    batch = make_batch(entry=date(2024, 1, 1))
    classified = _classified(batch, make_breed(), [make_vaccine()], [], date(2024, 1, 10))

    first = derive_alerts(batch.id, classified, [], NOW, today=date(2024, 1, 10))
    second = derive_alerts(batch.id, classified, [], NOW, today=date(2024, 1, 10))

    assert first == second


def test_invalid_ideal_weight_is_skipped():
    batch = make_batch()
    record = make_weighing(batch, 5, 0, actual=400)

    assert derive_alerts(batch.id, [], [record], NOW) == []


def test_replace_policy_drops_acknowledgements():
    batch = make_batch()
    record = make_weighing(batch, 10, 500, actual=350)
    previous = [a.acknowledge() for a in derive_alerts(batch.id, [], [record], NOW)]
    fresh = derive_alerts(batch.id, [], [record], NOW)

    merged = merge_alerts(previous, fresh, AlertRegenerationPolicy.REPLACE)

    assert [a.acknowledged for a in merged] == [False]


def test_preserve_policy_keeps_acknowledged_ids():
    batch = make_batch()
    critical = make_weighing(batch, 10, 500, actual=350)
    attention = make_weighing(batch, 11, 500, actual=560)
    previous = derive_alerts(batch.id, [], [critical], NOW)
    previous = [a.acknowledge() for a in previous]
    fresh = derive_alerts(batch.id, [], [critical, attention], NOW)

    merged = merge_alerts(previous, fresh, AlertRegenerationPolicy.PRESERVE_ACKNOWLEDGED)

    flags = {a.title: a.acknowledged for a in merged}
    assert flags == {
        "Peso fora do ideal - Semana 10": True,
        "Peso fora do ideal - Semana 11": False,
    }


def test_display_order_is_priority_then_newest():
    batch = make_batch()
    older = datetime(2024, 1, 1, tzinfo=timezone.utc)
    newer = older + timedelta(days=1)
    high_old = derive_alerts(batch.id, [], [make_weighing(batch, 3, 500, actual=560)], older)
    high_new = derive_alerts(batch.id, [], [make_weighing(batch, 4, 500, actual=560)], newer)
    critical = derive_alerts(batch.id, [], [make_weighing(batch, 5, 500, actual=300)], older)

    ordered = sort_for_display(high_old + critical + high_new)

    assert [a.title[-1] for a in ordered] == ["5", "4", "3"]
