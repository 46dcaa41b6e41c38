from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from uuid import UUID

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.domain.errors import NotFound, ValidationError
from granjafacil.domain.models.feed_input import FeedInput, StockMovement
from granjafacil.domain.value_objects.inventory import MovementType

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RecordMovementInput:
    type: MovementType
    quantity: Decimal
    reason: str
    responsible: str
    unit_cost: Decimal | None = None
    batch_id: UUID | None = None
    invoice_number: str | None = None
    notes: str | None = None


@dataclass(slots=True)
class RecordMovementOutput:
    movement: StockMovement
    feed_input: FeedInput


async def execute(
    uow: UnitOfWork, item_id: UUID, payload: RecordMovementInput
) -> RecordMovementOutput:
    item = await uow.feed_inputs.get(item_id)
    if item is None:
        raise NotFound("Feed input not found", details={"feed_input_id": str(item_id)})
    if payload.quantity <= 0:
        raise ValidationError("Quantity must be positive")
    if payload.unit_cost is not None and payload.unit_cost < 0:
        raise ValidationError("Unit cost cannot be negative")
    if not payload.reason.strip() or not payload.responsible.strip():
        raise ValidationError("Reason and responsible are required")
    if payload.batch_id is not None and await uow.batches.get(payload.batch_id) is None:
        raise NotFound("Batch not found", details={"batch_id": str(payload.batch_id)})

    if payload.type is MovementType.OUT:
        if payload.quantity > item.current_stock:
            raise ValidationError(
                "Insufficient stock",
                details={"available": str(item.current_stock), "requested": str(payload.quantity)},
            )
        item.current_stock -= payload.quantity
    else:
        item.current_stock += payload.quantity
        if payload.unit_cost is not None:
            item.price_per_unit = payload.unit_cost
    item.updated_at = datetime.now(timezone.utc)

    movement = StockMovement.create(
        item.id,
        payload.type,
        payload.quantity,
        payload.reason.strip(),
        payload.responsible.strip(),
        unit_cost=payload.unit_cost,
        batch_id=payload.batch_id,
        invoice_number=payload.invoice_number,
        notes=payload.notes,
    )
    created = await uow.stock_movements.add(movement)
    updated = await uow.feed_inputs.update(item)
    await uow.commit()
    logger.info(
        "Stock %s of %s %s for %s; now %s",
        payload.type.value,
        payload.quantity,
        item.unit.value,
        item.name,
        updated.current_stock,
    )
    if updated.is_low_stock:
        logger.warning("Feed input %s is at or below minimum stock", item.name)
    return RecordMovementOutput(movement=created, feed_input=updated)
