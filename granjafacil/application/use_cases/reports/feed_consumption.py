from __future__ import annotations

import logging
from dataclasses import dataclass
from uuid import UUID

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.application.use_cases.batches import get_batch
from granjafacil.domain.services.consumption import (
    BatchConsumption,
    ConsumptionTotals,
    batch_consumption,
    consumption_totals,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class FeedConsumptionReport:
    rows: list[BatchConsumption]
    totals: ConsumptionTotals

    @property
    def phase_names(self) -> list[str]:
        """Phase names across all rows, in first-seen order."""
        names: list[str] = []
        for row in self.rows:
            for phase in row.phases:
                if phase.phase not in names:
                    names.append(phase.phase)
        return names


async def execute(uow: UnitOfWork, *, batch_id: UUID | None = None) -> FeedConsumptionReport:
    """Lifetime feed per batch; one batch when `batch_id` is given, else all of them."""
    if batch_id is not None:
        batches = [await get_batch.execute(uow, batch_id)]
    else:
        batches = await uow.batches.list()
    breeds = {}
    rows: list[BatchConsumption] = []
    for batch in batches:
        if batch.breed_id not in breeds:
            breeds[batch.breed_id] = await uow.breeds.get(batch.breed_id)
        row = batch_consumption(batch, breeds[batch.breed_id])
        if row.error:
            logger.warning("Batch %s left out of consumption totals: %s", batch.id, row.error)
        rows.append(row)
    return FeedConsumptionReport(rows=rows, totals=consumption_totals(rows))
