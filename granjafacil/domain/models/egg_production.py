from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4


@dataclass(slots=True)
class EggProduction:
    id: UUID
    batch_id: UUID
    date: date
    eggs_collected: int
    bird_count: int
    laying_rate: Decimal
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        batch_id: UUID,
        day: date,
        eggs_collected: int,
        bird_count: int,
        laying_rate: Decimal,
        *,
        notes: str | None = None,
    ) -> EggProduction:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            batch_id=batch_id,
            date=day,
            eggs_collected=eggs_collected,
            bird_count=bird_count,
            laying_rate=laying_rate,
            notes=notes,
            created_at=now,
            updated_at=now,
        )
