from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


@dataclass(slots=True, frozen=True)
class PhaseParameters:
    name: str
    duration_weeks: int
    weekly_consumption_grams: float | None = None
    accumulated_consumption_grams: float | None = None

    @property
    def consumption_per_bird_week(self) -> float:
        """Grams eaten per bird per week in this phase."""
        if self.weekly_consumption_grams is not None:
            return self.weekly_consumption_grams
        if self.accumulated_consumption_grams is not None and self.duration_weeks > 0:
            return self.accumulated_consumption_grams / self.duration_weeks
        return 0.0


@dataclass(slots=True)
class BreedParameters:
    id: str
    name: str
    phases: list[PhaseParameters]
    # week -> ideal body weight in grams
    growth_curve: dict[int, int] = field(default_factory=dict)
    is_system_default: bool = False
    active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        name: str,
        phases: list[PhaseParameters],
        *,
        growth_curve: dict[int, int] | None = None,
        breed_id: str | None = None,
        is_system_default: bool = False,
    ) -> BreedParameters:
        now = datetime.now(timezone.utc)
        return cls(
            id=breed_id or f"custom-{uuid4().hex[:12]}",
            name=name,
            phases=list(phases),
            growth_curve=dict(growth_curve or {}),
            is_system_default=is_system_default,
            active=True,
            created_at=now,
            updated_at=now,
        )

    @property
    def total_weeks(self) -> int:
        return sum(p.duration_weeks for p in self.phases)

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
