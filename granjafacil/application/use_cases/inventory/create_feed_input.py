from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.domain.errors import NotFound, ValidationError
from granjafacil.domain.models.feed_input import FeedInput
from granjafacil.domain.value_objects.inventory import FeedInputCategory, StockUnit


@dataclass(slots=True)
class CreateFeedInputInput:
    name: str
    category: FeedInputCategory
    unit: StockUnit
    price_per_unit: Decimal
    current_stock: Decimal = Decimal("0")
    minimum_stock: Decimal = Decimal("0")
    supplier_id: UUID | None = None
    description: str | None = None


def validate_amounts(price: Decimal, current: Decimal, minimum: Decimal) -> None:
    if price < 0:
        raise ValidationError("Price cannot be negative")
    if current < 0 or minimum < 0:
        raise ValidationError("Stock quantities cannot be negative")


async def ensure_supplier(uow: UnitOfWork, supplier_id: UUID | None) -> None:
    if supplier_id is not None and await uow.suppliers.get(supplier_id) is None:
        raise NotFound("Supplier not found", details={"supplier_id": str(supplier_id)})


async def execute(uow: UnitOfWork, payload: CreateFeedInputInput) -> FeedInput:
    if len(payload.name.strip()) < 2:
        raise ValidationError("Feed input name must have at least 2 characters")
    validate_amounts(payload.price_per_unit, payload.current_stock, payload.minimum_stock)
    await ensure_supplier(uow, payload.supplier_id)
    item = FeedInput.create(
        payload.name.strip(),
        payload.category,
        payload.unit,
        payload.price_per_unit,
        current_stock=payload.current_stock,
        minimum_stock=payload.minimum_stock,
        supplier_id=payload.supplier_id,
        description=payload.description,
    )
    created = await uow.feed_inputs.add(item)
    await uow.commit()
    return created
