from __future__ import annotations

from datetime import date
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel

from granjafacil.application.use_cases.reports.feed_consumption import FeedConsumptionReport
from granjafacil.domain.services.consumption import BatchConsumption


class PhaseConsumptionResponse(BaseModel):
    phase: str
    weeks: int
    feed_kg: int


class BatchConsumptionResponse(BaseModel):
    batch_id: UUID
    batch_name: str
    breed_id: str
    breed_name: str | None
    bird_count: int
    entry_date: date
    phases: list[PhaseConsumptionResponse]
    weeks: int
    total_kg: int
    kg_per_bird: Decimal
    error: str | None

    @classmethod
    def from_row(cls, row: BatchConsumption) -> BatchConsumptionResponse:
        return cls(
            batch_id=row.batch.id,
            batch_name=row.batch.name,
            breed_id=row.batch.breed_id,
            breed_name=row.breed_name,
            bird_count=row.batch.bird_count,
            entry_date=row.batch.entry_date,
            phases=[
                PhaseConsumptionResponse(phase=p.phase, weeks=p.weeks, feed_kg=p.feed_kg)
                for p in row.phases
            ],
            weeks=row.weeks,
            total_kg=row.total_kg,
            kg_per_bird=row.kg_per_bird,
            error=row.error,
        )


class ConsumptionTotalsResponse(BaseModel):
    batches: int
    birds: int
    feed_kg: int
    kg_per_bird: Decimal


class FeedConsumptionResponse(BaseModel):
    rows: list[BatchConsumptionResponse]
    totals: ConsumptionTotalsResponse

    @classmethod
    def from_report(cls, report: FeedConsumptionReport) -> FeedConsumptionResponse:
        totals = report.totals
        return cls(
            rows=[BatchConsumptionResponse.from_row(r) for r in report.rows],
            totals=ConsumptionTotalsResponse(
                batches=totals.batches,
                birds=totals.birds,
                feed_kg=totals.feed_kg,
                kg_per_bird=totals.kg_per_bird,
            ),
        )
