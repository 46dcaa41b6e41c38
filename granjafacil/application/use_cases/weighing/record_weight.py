from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.application.use_cases.weighing import list_weighings
from granjafacil.domain.errors import NotFound, ValidationError
from granjafacil.domain.models.weighing import WeighingRecord
from granjafacil.domain.services.deviation import Deviation, analyze_deviation

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RecordWeightInput:
    actual_weight_grams: float
    performed_date: date | None = None
    sample_size: int | None = None
    responsible: str | None = None
    notes: str | None = None


@dataclass(slots=True)
class RecordWeightOutput:
    record: WeighingRecord
    deviation: Deviation | None


async def execute(
    uow: UnitOfWork, batch_id: UUID, week: int, payload: RecordWeightInput, *, today: date
) -> RecordWeightOutput:
    if payload.actual_weight_grams <= 0:
        raise ValidationError(
            "Actual weight must be positive",
            details={"actual_weight_grams": payload.actual_weight_grams},
        )
    if payload.sample_size is not None and payload.sample_size < 1:
        raise ValidationError("Sample size must be at least 1")
    performed = payload.performed_date or today
    if performed > today:
        raise ValidationError("Weighing date cannot be in the future")

    # Seeds the record for `week` when the calendar was never opened.
    await list_weighings.execute(uow, batch_id)
    record = await uow.weighing_records.get_for_week(batch_id, week)
    if record is None:
        raise NotFound(
            "No weighing expected for this week", details={"batch_id": str(batch_id), "week": week}
        )
    record.record_actual(
        payload.actual_weight_grams,
        performed,
        sample_size=payload.sample_size,
        responsible=payload.responsible,
        notes=payload.notes,
    )
    updated = await uow.weighing_records.update(record)
    await uow.commit()

    deviation = None
    if updated.ideal_weight_grams > 0:
        deviation = analyze_deviation(updated.actual_weight_grams, updated.ideal_weight_grams)
        logger.info(
            "Batch %s week %s weighed %sg (%.1f%%)",
            batch_id,
            week,
            updated.actual_weight_grams,
            deviation.percent,
        )
    return RecordWeightOutput(record=updated, deviation=deviation)
