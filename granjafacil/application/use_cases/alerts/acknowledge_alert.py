from __future__ import annotations

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.domain.errors import NotFound
from granjafacil.domain.models.alert import Alert


async def execute(uow: UnitOfWork, alert_id: str) -> Alert:
    alert = await uow.alerts.set_acknowledged(alert_id, True)
    if alert is None:
        raise NotFound("Alert not found", details={"alert_id": alert_id})
    await uow.commit()
    return alert
