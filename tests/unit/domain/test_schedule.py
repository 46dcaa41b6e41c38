from __future__ import annotations

from datetime import date, timedelta

import pytest

from granjafacil.domain.errors import ConfigurationError, ValidationError
from granjafacil.domain.presets.breeds import default_breeds
from granjafacil.domain.presets.vaccines import VACCINE_PRESETS
from granjafacil.domain.services.schedule import (
    current_phase,
    generate_schedule,
    phase_windows,
    seed_weighing_records,
    weekly_feed_kg,
    weighing_checkpoints,
)
from granjafacil.domain.value_objects.event import EventKind
from tests.factories import make_batch, make_breed, make_vaccine, make_weighing


def test_first_phase_week_spans_seven_days_with_rounded_feed():
    breed = make_breed()
    batch = make_batch(entry=date(2024, 1, 1), birds=1000)

    events = generate_schedule(batch, breed, [], [])

    first = events[0]
    assert first.kind is EventKind.PHASE
    assert first.id == f"phase-{batch.id}-1"
    assert first.expected_date == date(2024, 1, 1)
    assert first.expected_end_date == date(2024, 1, 7)
    assert first.payload.total_consumption_kg == 7
    assert first.payload.phase == "recria"


def test_one_phase_event_per_production_week():
    breed = make_breed()
    batch = make_batch()

    events = generate_schedule(batch, breed, [], [])

    phases = [e for e in events if e.kind is EventKind.PHASE]
    assert len(phases) == breed.total_weeks == 76
    assert phases[18].payload.phase == "crescimento"
    assert phases[18].expected_date == date(2024, 1, 1) + timedelta(weeks=18)
    assert phases[18].payload.total_consumption_kg == 140


def test_phase_windows_are_contiguous():
    batch = make_batch()
    windows = phase_windows(batch, make_breed())

    assert windows[0].start == batch.entry_date
    for previous, following in zip(windows, windows[1:]):
        assert following.start == previous.end + timedelta(days=1)
    assert windows[-1].end == batch.entry_date + timedelta(days=76 * 7 - 1)


def test_accumulated_consumption_is_spread_over_phase():
    novogen = next(b for b in default_breeds() if b.id == "novogen-tinted")
    batch = make_batch(breed_id=novogen.id)

    windows = phase_windows(batch, novogen)

    assert windows[0].consumption_per_bird_week == 7
    assert windows[0].weekly_consumption_kg == 7


def test_vaccine_and_weighing_dates_follow_entry_date():
    breed = make_breed(curve={1: 70, 2: 120})
    batch = make_batch(entry=date(2024, 1, 1))
    vaccine = make_vaccine(age=7)

    events = generate_schedule(batch, breed, [vaccine], weighing_checkpoints(breed))

    vaccine_event = next(e for e in events if e.kind is EventKind.VACCINE)
    assert vaccine_event.id == f"vaccine-{batch.id}-newcastle-7d"
    assert vaccine_event.expected_date == date(2024, 1, 8)
    weighings = [e for e in events if e.kind is EventKind.WEIGHING]
    assert weighings[0].expected_date == date(2024, 1, 8)
    assert weighings[0].id == f"weighing-{batch.id}-1"


def test_events_never_precede_entry_date():
    novogen = next(b for b in default_breeds() if b.id == "novogen-tinted")
    batch = make_batch(breed_id=novogen.id, entry=date(2024, 2, 29))

    events = generate_schedule(batch, novogen, VACCINE_PRESETS, weighing_checkpoints(novogen))

    assert all(e.expected_date >= batch.entry_date for e in events)


def test_generation_is_deterministic():
    novogen = next(b for b in default_breeds() if b.id == "novogen-tinted")
    batch = make_batch(breed_id=novogen.id)
    checkpoints = weighing_checkpoints(novogen)

    first = generate_schedule(batch, novogen, VACCINE_PRESETS, checkpoints)
    second = generate_schedule(batch, novogen, VACCINE_PRESETS, checkpoints)

    assert first == second
    assert len({e.id for e in first}) == len(first)


def test_missing_breed_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        generate_schedule(make_batch(breed_id="unknown"), None, [], [])


def test_breed_mismatch_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        generate_schedule(make_batch(breed_id="other"), make_breed(), [], [])


def test_non_positive_bird_count_is_rejected():
    with pytest.raises(ValidationError):
        generate_schedule(make_batch(birds=0), make_breed(), [], [])


def test_checkpoints_plateau_on_curve_gaps():
    breed = make_breed(curve={22: 1780, 26: 1850})

    checkpoints = {c.week: c for c in weighing_checkpoints(breed)}

    assert 21 not in checkpoints
    assert checkpoints[22].ideal_weight_grams == 1780
    assert checkpoints[30].ideal_weight_grams == 1850
    assert checkpoints[30].age_in_days == 210


def test_breed_without_curve_has_no_checkpoints():
    assert weighing_checkpoints(make_breed()) == []


def test_seeding_skips_existing_weeks():
    breed = make_breed(curve={1: 70, 2: 120, 3: 200})
    batch = make_batch()
    existing = [make_weighing(batch, 2, 120)]

    missing = seed_weighing_records(batch, weighing_checkpoints(breed), existing)

    assert [r.week for r in missing] == [1, 3] + list(range(4, 23)) + list(range(26, 75, 4))
    assert missing[0].expected_date == date(2024, 1, 8)
    again = seed_weighing_records(batch, weighing_checkpoints(breed), existing + missing)
    assert again == []


def test_current_phase_by_day():
    batch = make_batch()
    windows = phase_windows(batch, make_breed())

    assert current_phase(windows, date(2024, 1, 10)).name == "recria"
    assert current_phase(windows, batch.entry_date + timedelta(weeks=19)).name == "crescimento"
    assert current_phase(windows, date(2023, 12, 31)) is None


def test_weekly_feed_rounds_half_up():
    assert weekly_feed_kg(7, 1500) == 11
    assert weekly_feed_kg(126, 1000) == 126
    assert weekly_feed_kg(0.5, 1000) == 1


def test_phase_consumption_rounds_once_over_the_whole_phase():
    windows = phase_windows(make_batch(birds=1500), make_breed())

    recria = windows[0]
    assert recria.weekly_consumption_kg == 11
    assert recria.phase_consumption_kg == 189
    assert weekly_feed_kg(7, 1500, weeks=18) == 189
