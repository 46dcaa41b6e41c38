from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from granjafacil.application.use_cases.inventory import (
    create_feed_input,
    delete_feed_input,
    list_feed_inputs,
    list_movements,
    record_movement,
    update_feed_input,
)
from granjafacil.domain.value_objects.inventory import FeedInputCategory
from granjafacil.infrastructure.db.session import SQLAlchemyUnitOfWork
from granjafacil.interfaces.http.deps import get_uow
from granjafacil.interfaces.http.schemas.inventory import (
    FeedInputCreate,
    FeedInputResponse,
    FeedInputUpdate,
    MovementCreate,
    MovementResponse,
    MovementResult,
)

router = APIRouter(prefix="/feed-inputs", tags=["inventory"])


@router.get("/", response_model=list[FeedInputResponse])
async def list_all(
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    category: FeedInputCategory | None = Query(None),
    search: str | None = Query(None),
    low_stock: bool = Query(False),
):
    items = await list_feed_inputs.execute(
        uow, category=category, search=search, low_stock_only=low_stock
    )
    return [FeedInputResponse.model_validate(i) for i in items]


@router.post("/", response_model=FeedInputResponse, status_code=status.HTTP_201_CREATED)
async def create(payload: FeedInputCreate, *, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    created = await create_feed_input.execute(
        uow, create_feed_input.CreateFeedInputInput(**payload.model_dump())
    )
    return FeedInputResponse.model_validate(created)


@router.put("/{item_id}", response_model=FeedInputResponse)
async def update(
    item_id: UUID, payload: FeedInputUpdate, *, uow: SQLAlchemyUnitOfWork = Depends(get_uow)
):
    updated = await update_feed_input.execute(uow, item_id, payload.model_dump(exclude_unset=True))
    return FeedInputResponse.model_validate(updated)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete(item_id: UUID, *, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    await delete_feed_input.execute(uow, item_id)
    return None


@router.get("/{item_id}/movements", response_model=list[MovementResponse])
async def movements(item_id: UUID, *, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    items = await list_movements.execute(uow, item_id)
    return [MovementResponse.model_validate(m) for m in items]


@router.post(
    "/{item_id}/movements", response_model=MovementResult, status_code=status.HTTP_201_CREATED
)
async def add_movement(
    item_id: UUID, payload: MovementCreate, *, uow: SQLAlchemyUnitOfWork = Depends(get_uow)
):
    result = await record_movement.execute(
        uow, item_id, record_movement.RecordMovementInput(**payload.model_dump())
    )
    return MovementResult(
        movement=MovementResponse.model_validate(result.movement),
        feed_input=FeedInputResponse.model_validate(result.feed_input),
    )
