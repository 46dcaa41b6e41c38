from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from uuid import UUID, uuid4

from granjafacil.domain.value_objects.vaccine import ApplicationRoute, VaccineType


@dataclass(slots=True, frozen=True)
class VaccinePreset:
    id: str
    name: str
    manufacturer: str
    type: VaccineType
    route: ApplicationRoute
    age_in_days: int
    dose_ml: float
    booster_interval_days: int | None = None
    notes: str | None = None


@dataclass(slots=True)
class VaccinationRecord:
    id: UUID
    batch_id: UUID
    vaccine_id: str
    application_date: date
    age_at_application: int
    birds_vaccinated: int
    responsible: str
    vaccine_lot: str | None = None
    notes: str | None = None
    next_application_date: date | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        batch_id: UUID,
        vaccine: VaccinePreset,
        application_date: date,
        age_at_application: int,
        birds_vaccinated: int,
        responsible: str,
        *,
        vaccine_lot: str | None = None,
        notes: str | None = None,
    ) -> VaccinationRecord:
        next_date = None
        if vaccine.booster_interval_days:
            next_date = application_date + timedelta(days=vaccine.booster_interval_days)
        return cls(
            id=uuid4(),
            batch_id=batch_id,
            vaccine_id=vaccine.id,
            application_date=application_date,
            age_at_application=age_at_application,
            birds_vaccinated=birds_vaccinated,
            responsible=responsible,
            vaccine_lot=vaccine_lot,
            notes=notes,
            next_application_date=next_date,
            created_at=datetime.now(timezone.utc),
        )
