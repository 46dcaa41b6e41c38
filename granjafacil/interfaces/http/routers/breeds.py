from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from granjafacil.application.use_cases.breeds import (
    create_breed,
    deactivate_breed,
    get_breed,
    list_breeds,
    update_breed,
)
from granjafacil.domain.models.breed import PhaseParameters
from granjafacil.infrastructure.db.session import SQLAlchemyUnitOfWork
from granjafacil.interfaces.http.deps import get_uow
from granjafacil.interfaces.http.schemas.breeds import (
    BreedCreate,
    BreedResponse,
    BreedUpdate,
    PhaseSchema,
)

router = APIRouter(prefix="/breeds", tags=["breeds"])


def _phases(items: list[PhaseSchema]) -> list[PhaseParameters]:
    return [PhaseParameters(**p.model_dump()) for p in items]


@router.get("/", response_model=list[BreedResponse])
async def list_all(
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    active: bool | None = Query(True),
):
    breeds = await list_breeds.execute(uow, active=active)
    return [BreedResponse.model_validate(b) for b in breeds]


@router.get("/{breed_id}", response_model=BreedResponse)
async def get_one(breed_id: str, *, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    breed = await get_breed.execute(uow, breed_id)
    return BreedResponse.model_validate(breed)


@router.post("/", response_model=BreedResponse, status_code=status.HTTP_201_CREATED)
async def create(payload: BreedCreate, *, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    created = await create_breed.execute(
        uow,
        create_breed.CreateBreedInput(
            name=payload.name,
            phases=_phases(payload.phases),
            growth_curve=payload.growth_curve,
        ),
    )
    return BreedResponse.model_validate(created)


@router.put("/{breed_id}", response_model=BreedResponse)
async def update(
    breed_id: str, payload: BreedUpdate, *, uow: SQLAlchemyUnitOfWork = Depends(get_uow)
):
    updated = await update_breed.execute(
        uow,
        breed_id,
        update_breed.UpdateBreedInput(
            name=payload.name,
            phases=_phases(payload.phases) if payload.phases is not None else None,
            growth_curve=payload.growth_curve,
            active=payload.active,
        ),
    )
    return BreedResponse.model_validate(updated)


@router.delete("/{breed_id}", status_code=status.HTTP_204_NO_CONTENT)
async def deactivate(breed_id: str, *, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    await deactivate_breed.execute(uow, breed_id)
    return None
