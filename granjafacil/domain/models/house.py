from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4


@dataclass(slots=True, frozen=True)
class Responsible:
    name: str
    role: str


@dataclass(slots=True)
class House:
    """A poultry house (galpão) with its stocking limit.

    `max_capacity` is always the computed figure; `manual_capacity` only applies
    while `capacity_override` is set.
    """

    id: UUID
    name: str
    width_m: Decimal
    length_m: Decimal
    height_m: Decimal
    density: Decimal
    area_m2: Decimal
    max_capacity: int
    responsibles: list[Responsible]
    manual_capacity: int | None = None
    capacity_override: bool = False
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        name: str,
        width_m: Decimal,
        length_m: Decimal,
        height_m: Decimal,
        density: Decimal,
        area_m2: Decimal,
        max_capacity: int,
        responsibles: list[Responsible],
        *,
        manual_capacity: int | None = None,
        capacity_override: bool = False,
        notes: str | None = None,
    ) -> House:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            name=name,
            width_m=width_m,
            length_m=length_m,
            height_m=height_m,
            density=density,
            area_m2=area_m2,
            max_capacity=max_capacity,
            responsibles=list(responsibles),
            manual_capacity=manual_capacity,
            capacity_override=capacity_override,
            notes=notes,
            created_at=now,
            updated_at=now,
        )

    @property
    def effective_capacity(self) -> int:
        if self.capacity_override and self.manual_capacity:
            return self.manual_capacity
        return self.max_capacity
