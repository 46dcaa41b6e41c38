from __future__ import annotations

from uuid import UUID

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.domain.models.alert import Alert
from granjafacil.domain.services.alerts import sort_for_display


async def execute(
    uow: UnitOfWork, *, batch_id: UUID | None = None, only_active: bool = False
) -> list[Alert]:
    """Stored alerts as of the last calendar build."""
    if batch_id is None:
        alerts = await uow.alerts.list_all(only_active=only_active)
    else:
        alerts = await uow.alerts.list_for_batch(batch_id, only_active=only_active)
    return sort_for_display(alerts)
