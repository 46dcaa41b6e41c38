from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from granjafacil.application.use_cases.suppliers import (
    create_supplier,
    delete_supplier,
    list_suppliers,
    update_supplier,
)
from granjafacil.infrastructure.db.session import SQLAlchemyUnitOfWork
from granjafacil.interfaces.http.deps import get_uow
from granjafacil.interfaces.http.schemas.suppliers import (
    SupplierCreate,
    SupplierResponse,
    SupplierUpdate,
)

router = APIRouter(prefix="/suppliers", tags=["suppliers"])


@router.get("/", response_model=list[SupplierResponse])
async def list_all(
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    search: str | None = Query(None),
    active: bool | None = Query(None),
):
    items = await list_suppliers.execute(uow, search=search, active=active)
    return [SupplierResponse.model_validate(s) for s in items]


@router.post("/", response_model=SupplierResponse, status_code=status.HTTP_201_CREATED)
async def create(payload: SupplierCreate, *, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    created = await create_supplier.execute(
        uow, create_supplier.CreateSupplierInput(**payload.model_dump())
    )
    return SupplierResponse.model_validate(created)


@router.put("/{supplier_id}", response_model=SupplierResponse)
async def update(
    supplier_id: UUID, payload: SupplierUpdate, *, uow: SQLAlchemyUnitOfWork = Depends(get_uow)
):
    updated = await update_supplier.execute(
        uow, supplier_id, payload.model_dump(exclude_unset=True)
    )
    return SupplierResponse.model_validate(updated)


@router.delete("/{supplier_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete(supplier_id: UUID, *, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    await delete_supplier.execute(uow, supplier_id)
    return None
