from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import UUID, uuid4

from granjafacil.domain.value_objects.weighing_status import WeighingStatus


@dataclass(slots=True, frozen=True)
class WeighingCheckpoint:
    week: int
    age_in_days: int
    ideal_weight_grams: int


@dataclass(slots=True)
class WeighingRecord:
    id: UUID
    batch_id: UUID
    week: int
    age_in_days: int
    expected_date: date
    ideal_weight_grams: int
    actual_weight_grams: float | None = None
    performed_date: date | None = None
    sample_size: int | None = None
    responsible: str | None = None
    notes: str | None = None
    status: WeighingStatus = WeighingStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime | None = None

    @classmethod
    def seed(
        cls, batch_id: UUID, checkpoint: WeighingCheckpoint, expected_date: date
    ) -> WeighingRecord:
        return cls(
            id=uuid4(),
            batch_id=batch_id,
            week=checkpoint.week,
            age_in_days=checkpoint.age_in_days,
            expected_date=expected_date,
            ideal_weight_grams=checkpoint.ideal_weight_grams,
            status=WeighingStatus.PENDING,
            created_at=datetime.now(timezone.utc),
        )

    @property
    def has_actual(self) -> bool:
        return self.actual_weight_grams is not None

    def record_actual(
        self,
        actual_weight_grams: float,
        performed_date: date,
        *,
        sample_size: int | None = None,
        responsible: str | None = None,
        notes: str | None = None,
    ) -> None:
        self.actual_weight_grams = actual_weight_grams
        self.performed_date = performed_date
        self.sample_size = sample_size
        self.responsible = responsible
        if notes is not None:
            self.notes = notes
        self.status = WeighingStatus.DONE
        self.updated_at = datetime.now(timezone.utc)
