from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, status

from granjafacil.application.use_cases.houses import (
    create_house,
    delete_house,
    get_house,
    list_houses,
    update_house,
)
from granjafacil.infrastructure.db.session import SQLAlchemyUnitOfWork
from granjafacil.interfaces.http.deps import get_uow
from granjafacil.interfaces.http.schemas.houses import HouseCreate, HouseResponse, HouseUpdate

router = APIRouter(prefix="/houses", tags=["houses"])


@router.get("/", response_model=list[HouseResponse])
async def list_all(*, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    houses = await list_houses.execute(uow)
    return [HouseResponse.model_validate(h) for h in houses]


@router.post("/", response_model=HouseResponse, status_code=status.HTTP_201_CREATED)
async def create(payload: HouseCreate, *, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    data = payload.model_dump(exclude={"responsibles"})
    created = await create_house.execute(
        uow,
        create_house.CreateHouseInput(
            **data, responsibles=[r.to_domain() for r in payload.responsibles]
        ),
    )
    return HouseResponse.model_validate(created)


@router.get("/{house_id}", response_model=HouseResponse)
async def get_one(house_id: UUID, *, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    house = await get_house.execute(uow, house_id)
    return HouseResponse.model_validate(house)


@router.put("/{house_id}", response_model=HouseResponse)
async def update(
    house_id: UUID, payload: HouseUpdate, *, uow: SQLAlchemyUnitOfWork = Depends(get_uow)
):
    data = payload.model_dump(exclude_unset=True, exclude={"responsibles"})
    if payload.responsibles is not None:
        data["responsibles"] = [r.to_domain() for r in payload.responsibles]
    updated = await update_house.execute(uow, house_id, data)
    return HouseResponse.model_validate(updated)


@router.delete("/{house_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete(house_id: UUID, *, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    await delete_house.execute(uow, house_id)
    return None
