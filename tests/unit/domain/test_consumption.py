from __future__ import annotations

from decimal import Decimal

from granjafacil.domain.services.consumption import batch_consumption, consumption_totals
from tests.factories import make_batch, make_breed


def test_batch_consumption_per_phase_for_odd_flock():
    row = batch_consumption(make_batch(birds=1500), make_breed())

    assert [(p.phase, p.weeks, p.feed_kg) for p in row.phases] == [
        ("recria", 18, 189),
        ("crescimento", 4, 840),
        ("producao", 54, 10206),
    ]
    assert row.total_kg == 11235
    assert row.weeks == 76
    assert row.kg_per_bird == Decimal("7.490")
    assert row.breed_name == "Test Breed"


def test_totals_skip_batches_without_breed():
    rows = [
        batch_consumption(make_batch(birds=1500), make_breed()),
        batch_consumption(make_batch(birds=1000), make_breed()),
        batch_consumption(make_batch(breed_id="gone", birds=400), None),
    ]

    assert rows[2].phases == []
    assert rows[2].error is not None

    totals = consumption_totals(rows)
    assert totals.batches == 2
    assert totals.birds == 2500
    assert totals.feed_kg == 18725
    assert totals.kg_per_bird == Decimal("7.490")


def test_totals_of_nothing_are_zero():
    totals = consumption_totals([])

    assert totals.feed_kg == 0
    assert totals.kg_per_bird == Decimal("0.000")
