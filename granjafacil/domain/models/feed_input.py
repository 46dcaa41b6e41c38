from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4

from granjafacil.domain.value_objects.inventory import FeedInputCategory, MovementType, StockUnit


@dataclass(slots=True)
class FeedInput:
    """An inventory item (insumo): grain, meal, premix, medicine..."""

    id: UUID
    name: str
    category: FeedInputCategory
    unit: StockUnit
    price_per_unit: Decimal
    current_stock: Decimal
    minimum_stock: Decimal
    supplier_id: UUID | None = None
    description: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        name: str,
        category: FeedInputCategory,
        unit: StockUnit,
        price_per_unit: Decimal,
        *,
        current_stock: Decimal = Decimal("0"),
        minimum_stock: Decimal = Decimal("0"),
        supplier_id: UUID | None = None,
        description: str | None = None,
    ) -> FeedInput:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            name=name,
            category=category,
            unit=unit,
            price_per_unit=price_per_unit,
            current_stock=current_stock,
            minimum_stock=minimum_stock,
            supplier_id=supplier_id,
            description=description,
            created_at=now,
            updated_at=now,
        )

    @property
    def is_low_stock(self) -> bool:
        return self.current_stock <= self.minimum_stock

    @property
    def stock_value(self) -> Decimal:
        return self.current_stock * self.price_per_unit


@dataclass(slots=True)
class StockMovement:
    id: UUID
    feed_input_id: UUID
    type: MovementType
    quantity: Decimal
    reason: str
    responsible: str
    unit_cost: Decimal | None = None
    batch_id: UUID | None = None
    invoice_number: str | None = None
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        feed_input_id: UUID,
        type: MovementType,
        quantity: Decimal,
        reason: str,
        responsible: str,
        *,
        unit_cost: Decimal | None = None,
        batch_id: UUID | None = None,
        invoice_number: str | None = None,
        notes: str | None = None,
    ) -> StockMovement:
        return cls(
            id=uuid4(),
            feed_input_id=feed_input_id,
            type=type,
            quantity=quantity,
            reason=reason,
            responsible=responsible,
            unit_cost=unit_cost,
            batch_id=batch_id,
            invoice_number=invoice_number,
            notes=notes,
            created_at=datetime.now(timezone.utc),
        )
