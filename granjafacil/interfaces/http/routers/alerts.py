from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from granjafacil.application.use_cases.alerts import acknowledge_alert, list_alerts
from granjafacil.infrastructure.db.session import SQLAlchemyUnitOfWork
from granjafacil.interfaces.http.deps import get_uow
from granjafacil.interfaces.http.schemas.alerts import AlertResponse

router = APIRouter(prefix="/alerts", tags=["alerts"])


@router.get("/", response_model=list[AlertResponse])
async def list_all(
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    batch_id: UUID | None = Query(None),
    only_active: bool = Query(False),
):
    alerts = await list_alerts.execute(uow, batch_id=batch_id, only_active=only_active)
    return [AlertResponse.model_validate(a) for a in alerts]


@router.post("/{alert_id}/acknowledge", response_model=AlertResponse)
async def acknowledge(alert_id: str, *, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    alert = await acknowledge_alert.execute(uow, alert_id)
    return AlertResponse.model_validate(alert)
