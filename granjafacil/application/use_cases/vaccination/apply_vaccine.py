from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.domain.errors import ConfigurationError, NotFound, ValidationError
from granjafacil.domain.models.vaccine import VaccinationRecord

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ApplyVaccineInput:
    vaccine_id: str
    application_date: date
    birds_vaccinated: int
    responsible: str
    age_at_application: int | None = None
    vaccine_lot: str | None = None
    notes: str | None = None


async def execute(
    uow: UnitOfWork, batch_id: UUID, payload: ApplyVaccineInput, *, today: date
) -> VaccinationRecord:
    batch = await uow.batches.get(batch_id)
    if batch is None:
        raise NotFound("Batch not found", details={"batch_id": str(batch_id)})
    vaccine = uow.vaccines.get(payload.vaccine_id)
    if vaccine is None:
        raise ConfigurationError(
            f"Vaccine '{payload.vaccine_id}' is not configured",
            details={"vaccine_id": payload.vaccine_id},
        )
    if payload.application_date > today:
        raise ValidationError("Application date cannot be in the future")
    if payload.application_date < batch.entry_date:
        raise ValidationError("Application date cannot be before the batch entry date")
    if not 1 <= payload.birds_vaccinated <= batch.bird_count:
        raise ValidationError(
            "Vaccinated birds must be between 1 and the batch bird count",
            details={"birds_vaccinated": payload.birds_vaccinated, "bird_count": batch.bird_count},
        )
    if len(payload.responsible.strip()) < 2:
        raise ValidationError("Responsible is required")

    age = payload.age_at_application
    if age is None:
        age = batch.age_in_days(payload.application_date)
    if age < 0:
        raise ValidationError("Age at application cannot be negative")

    record = VaccinationRecord.create(
        batch.id,
        vaccine,
        payload.application_date,
        age,
        payload.birds_vaccinated,
        payload.responsible.strip(),
        vaccine_lot=payload.vaccine_lot,
        notes=payload.notes,
    )
    created = await uow.vaccination_records.add(record)
    await uow.commit()
    logger.info("Vaccine %s applied to batch %s at day %s", vaccine.id, batch.id, age)
    return created
