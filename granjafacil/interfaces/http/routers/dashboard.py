from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends

from granjafacil.application.use_cases.dashboard import overview
from granjafacil.infrastructure.db.session import SQLAlchemyUnitOfWork
from granjafacil.interfaces.http.deps import get_today, get_uow
from granjafacil.interfaces.http.schemas.dashboard import DashboardResponse

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/", response_model=DashboardResponse)
async def get_overview(
    *, uow: SQLAlchemyUnitOfWork = Depends(get_uow), today: date = Depends(get_today)
):
    result = await overview.execute(uow, today=today)
    return DashboardResponse.model_validate(result)
