from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.application.use_cases.formulas import get_formula
from granjafacil.domain.errors import ConfigurationError, NotFound
from granjafacil.domain.services.formulation import feed_cost
from granjafacil.domain.services.schedule import phase_windows


@dataclass(slots=True)
class PhaseCostEstimate:
    formula_id: UUID
    batch_id: UUID
    phase: str
    weeks: int
    feed_kg: int
    cost_per_kg: Decimal
    total_cost: Decimal


async def execute(
    uow: UnitOfWork, formula_id: UUID, batch_id: UUID, phase: str
) -> PhaseCostEstimate:
    """Cost of feeding a batch with a formula for a whole phase."""
    formula = await get_formula.execute(uow, formula_id)
    batch = await uow.batches.get(batch_id)
    if batch is None:
        raise NotFound("Batch not found", details={"batch_id": str(batch_id)})
    breed = await uow.breeds.get(batch.breed_id)
    windows = phase_windows(batch, breed)
    window = next((w for w in windows if w.name == phase), None)
    if window is None:
        raise ConfigurationError(
            f"Phase '{phase}' is not configured for the batch breed",
            details={"breed_id": batch.breed_id, "phase": phase},
        )
    feed_kg = window.phase_consumption_kg
    return PhaseCostEstimate(
        formula_id=formula.id,
        batch_id=batch.id,
        phase=window.name,
        weeks=window.duration_weeks,
        feed_kg=feed_kg,
        cost_per_kg=formula.cost_per_kg,
        total_cost=feed_cost(formula.cost_per_kg, feed_kg),
    )
