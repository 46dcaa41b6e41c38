from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import UUID, uuid4


@dataclass(slots=True)
class Batch:
    """A cohort of birds housed together (lote).

    `entry_date` is the epoch of every schedule computation and never changes.
    """

    id: UUID
    name: str
    bird_count: int
    birth_date: date
    entry_date: date
    breed_id: str
    house_id: UUID | None = None
    cost_center: str | None = None
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        name: str,
        bird_count: int,
        birth_date: date,
        entry_date: date,
        breed_id: str,
        *,
        house_id: UUID | None = None,
        cost_center: str | None = None,
        notes: str | None = None,
    ) -> Batch:
        return cls(
            id=uuid4(),
            name=name,
            bird_count=bird_count,
            birth_date=birth_date,
            entry_date=entry_date,
            breed_id=breed_id,
            house_id=house_id,
            cost_center=cost_center,
            notes=notes,
            created_at=datetime.now(timezone.utc),
        )

    def age_in_days(self, on: date) -> int:
        return (on - self.entry_date).days
