"""Lifetime feed consumption per batch, derived from the breed's phases."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal

from granjafacil.domain.errors import ConfigurationError
from granjafacil.domain.models.batch import Batch
from granjafacil.domain.models.breed import BreedParameters
from granjafacil.domain.services.schedule import phase_windows

KG_PER_BIRD = Decimal("0.001")


@dataclass(slots=True, frozen=True)
class PhaseConsumption:
    phase: str
    weeks: int
    feed_kg: int


@dataclass(slots=True)
class BatchConsumption:
    batch: Batch
    breed_name: str | None
    phases: list[PhaseConsumption] = field(default_factory=list)
    error: str | None = None

    @property
    def total_kg(self) -> int:
        return sum(p.feed_kg for p in self.phases)

    @property
    def weeks(self) -> int:
        return sum(p.weeks for p in self.phases)

    @property
    def kg_per_bird(self) -> Decimal:
        return _per_bird(self.total_kg, self.batch.bird_count)


@dataclass(slots=True, frozen=True)
class ConsumptionTotals:
    batches: int
    birds: int
    feed_kg: int
    kg_per_bird: Decimal


def _per_bird(kilograms: int, birds: int) -> Decimal:
    if birds <= 0:
        return Decimal("0.000")
    return (Decimal(kilograms) / birds).quantize(KG_PER_BIRD, rounding=ROUND_HALF_UP)


def batch_consumption(batch: Batch, breed: BreedParameters | None) -> BatchConsumption:
    """Feed for each phase of the batch's breed.

    A batch whose breed is no longer configured yields no phases and carries
    the configuration message in `error`.
    """
    try:
        windows = phase_windows(batch, breed)
    except ConfigurationError as exc:
        return BatchConsumption(batch=batch, breed_name=None, error=exc.message)
    return BatchConsumption(
        batch=batch,
        breed_name=breed.name,
        phases=[
            PhaseConsumption(w.name, w.duration_weeks, w.phase_consumption_kg) for w in windows
        ],
    )


def consumption_totals(rows: Sequence[BatchConsumption]) -> ConsumptionTotals:
    counted = [r for r in rows if r.error is None]
    birds = sum(r.batch.bird_count for r in counted)
    feed_kg = sum(r.total_kg for r in counted)
    return ConsumptionTotals(
        batches=len(counted),
        birds=birds,
        feed_kg=feed_kg,
        kg_per_bird=_per_bird(feed_kg, birds),
    )
