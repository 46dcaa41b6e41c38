from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from granjafacil.application.interfaces.repositories.feed_inputs import (
    FeedInputsRepository,
    StockMovementsRepository,
)
from granjafacil.domain.errors import ConflictError, InfrastructureError, NotFound
from granjafacil.domain.models.feed_input import FeedInput, StockMovement
from granjafacil.domain.value_objects.inventory import (
    FeedInputCategory,
    MovementType,
    StockUnit,
)
from granjafacil.infrastructure.db.orm.feed_input import FeedInputORM, StockMovementORM


class FeedInputsSQLAlchemyRepository(FeedInputsRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: FeedInputORM) -> FeedInput:
        return FeedInput(
            id=orm.id,
            name=orm.name,
            category=FeedInputCategory(orm.category),
            unit=StockUnit(orm.unit),
            price_per_unit=orm.price_per_unit,
            current_stock=orm.current_stock,
            minimum_stock=orm.minimum_stock,
            supplier_id=orm.supplier_id,
            description=orm.description,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )

    async def add(self, item: FeedInput) -> FeedInput:
        orm = FeedInputORM(
            id=item.id,
            name=item.name,
            category=item.category.value,
            unit=item.unit.value,
            price_per_unit=item.price_per_unit,
            current_stock=item.current_stock,
            minimum_stock=item.minimum_stock,
            supplier_id=item.supplier_id,
            description=item.description,
            created_at=item.created_at,
            updated_at=item.updated_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Failed to create feed input") from exc
        return self._to_domain(orm)

    async def get(self, item_id: UUID) -> FeedInput | None:
        orm = await self.session.get(FeedInputORM, item_id)
        return self._to_domain(orm) if orm else None

    async def list(
        self, *, category: FeedInputCategory | None = None, search: str | None = None
    ) -> list[FeedInput]:
        stmt = select(FeedInputORM)
        if category is not None:
            stmt = stmt.where(FeedInputORM.category == category.value)
        if search:
            stmt = stmt.where(FeedInputORM.name.ilike(f"%{search.strip()}%"))
        res = await self.session.execute(stmt.order_by(FeedInputORM.name))
        return [self._to_domain(x) for x in res.scalars().all()]

    async def update(self, item: FeedInput) -> FeedInput:
        orm = await self.session.get(FeedInputORM, item.id)
        if orm is None:
            raise NotFound("Feed input not found", details={"feed_input_id": str(item.id)})
        orm.name = item.name
        orm.category = item.category.value
        orm.unit = item.unit.value
        orm.price_per_unit = item.price_per_unit
        orm.current_stock = item.current_stock
        orm.minimum_stock = item.minimum_stock
        orm.supplier_id = item.supplier_id
        orm.description = item.description
        orm.updated_at = datetime.now(timezone.utc)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise InfrastructureError("Failed to update feed input") from exc
        return self._to_domain(orm)

    async def delete(self, item_id: UUID) -> bool:
        orm = await self.session.get(FeedInputORM, item_id)
        if orm is None:
            return False
        await self.session.delete(orm)
        await self.session.flush()
        return True


class StockMovementsSQLAlchemyRepository(StockMovementsRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: StockMovementORM) -> StockMovement:
        return StockMovement(
            id=orm.id,
            feed_input_id=orm.feed_input_id,
            type=MovementType(orm.type),
            quantity=orm.quantity,
            reason=orm.reason,
            responsible=orm.responsible,
            unit_cost=orm.unit_cost,
            batch_id=orm.batch_id,
            invoice_number=orm.invoice_number,
            notes=orm.notes,
            created_at=orm.created_at,
        )

    async def add(self, movement: StockMovement) -> StockMovement:
        orm = StockMovementORM(
            id=movement.id,
            feed_input_id=movement.feed_input_id,
            type=movement.type.value,
            quantity=movement.quantity,
            reason=movement.reason,
            responsible=movement.responsible,
            unit_cost=movement.unit_cost,
            batch_id=movement.batch_id,
            invoice_number=movement.invoice_number,
            notes=movement.notes,
            created_at=movement.created_at,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def list_for_input(self, feed_input_id: UUID) -> list[StockMovement]:
        res = await self.session.execute(
            select(StockMovementORM)
            .where(StockMovementORM.feed_input_id == feed_input_id)
            .order_by(StockMovementORM.created_at.desc())
        )
        return [self._to_domain(x) for x in res.scalars().all()]
