from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4

from granjafacil.domain.value_objects.inventory import FormulaType


@dataclass(slots=True, frozen=True)
class FormulaIngredient:
    feed_input_id: UUID
    name: str
    percent: Decimal
    price_per_kg: Decimal


@dataclass(slots=True)
class FeedFormula:
    id: UUID
    name: str
    type: FormulaType
    ingredients: list[FormulaIngredient]
    cost_per_kg: Decimal
    notes: str | None = None
    active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        name: str,
        type: FormulaType,
        ingredients: list[FormulaIngredient],
        cost_per_kg: Decimal,
        *,
        notes: str | None = None,
    ) -> FeedFormula:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            name=name,
            type=type,
            ingredients=list(ingredients),
            cost_per_kg=cost_per_kg,
            notes=notes,
            active=True,
            created_at=now,
            updated_at=now,
        )
