from __future__ import annotations

from uuid import UUID

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.application.use_cases.inventory.create_feed_input import (
    ensure_supplier,
    validate_amounts,
)
from granjafacil.domain.errors import NotFound, ValidationError
from granjafacil.domain.models.feed_input import FeedInput

_REQUIRED = ("name", "category", "unit", "price_per_unit", "minimum_stock")
_OPTIONAL = ("supplier_id", "description")


async def execute(uow: UnitOfWork, item_id: UUID, data: dict) -> FeedInput:
    """Edit a feed input. Stock levels only change through movements."""
    item = await uow.feed_inputs.get(item_id)
    if item is None:
        raise NotFound("Feed input not found", details={"feed_input_id": str(item_id)})
    for key in _REQUIRED:
        if data.get(key) is not None:
            setattr(item, key, data[key])
    for key in _OPTIONAL:
        if key in data:
            setattr(item, key, data[key])
    if len(item.name.strip()) < 2:
        raise ValidationError("Feed input name must have at least 2 characters")
    validate_amounts(item.price_per_unit, item.current_stock, item.minimum_stock)
    if "supplier_id" in data:
        await ensure_supplier(uow, item.supplier_id)
    updated = await uow.feed_inputs.update(item)
    await uow.commit()
    return updated
