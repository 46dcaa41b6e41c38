from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from granjafacil.application.use_cases.formulas import (
    create_formula,
    delete_formula,
    estimate_phase_cost,
    get_formula,
    list_formulas,
)
from granjafacil.infrastructure.db.session import SQLAlchemyUnitOfWork
from granjafacil.interfaces.http.deps import get_uow
from granjafacil.interfaces.http.schemas.formulas import (
    FormulaCreate,
    FormulaResponse,
    PhaseCostResponse,
)

router = APIRouter(prefix="/feed-formulas", tags=["formulas"])


@router.get("/", response_model=list[FormulaResponse])
async def list_all(
    *, uow: SQLAlchemyUnitOfWork = Depends(get_uow), active: bool | None = Query(None)
):
    items = await list_formulas.execute(uow, active=active)
    return [FormulaResponse.model_validate(f) for f in items]


@router.post("/", response_model=FormulaResponse, status_code=status.HTTP_201_CREATED)
async def create(payload: FormulaCreate, *, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    created = await create_formula.execute(
        uow,
        create_formula.CreateFormulaInput(
            name=payload.name,
            type=payload.type,
            ingredients=[
                create_formula.IngredientInput(feed_input_id=i.feed_input_id, percent=i.percent)
                for i in payload.ingredients
            ],
            notes=payload.notes,
        ),
    )
    return FormulaResponse.model_validate(created)


@router.get("/{formula_id}", response_model=FormulaResponse)
async def get_one(formula_id: UUID, *, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    formula = await get_formula.execute(uow, formula_id)
    return FormulaResponse.model_validate(formula)


@router.delete("/{formula_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete(formula_id: UUID, *, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    await delete_formula.execute(uow, formula_id)
    return None


@router.get("/{formula_id}/cost-estimate", response_model=PhaseCostResponse)
async def cost_estimate(
    formula_id: UUID,
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    batch_id: UUID = Query(...),
    phase: str = Query(...),
):
    estimate = await estimate_phase_cost.execute(uow, formula_id, batch_id, phase)
    return PhaseCostResponse.model_validate(estimate)
