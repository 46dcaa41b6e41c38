from __future__ import annotations

from typing import Protocol
from uuid import UUID

from granjafacil.domain.models.alert import Alert


class AlertsRepository(Protocol):
    async def replace_for_batch(self, batch_id: UUID, alerts: list[Alert]) -> None:
        """Drop every stored alert of the batch and store `alerts` instead."""
        ...

    async def list_for_batch(
        self, batch_id: UUID, *, only_active: bool = False
    ) -> list[Alert]: ...
    async def list_all(self, *, only_active: bool = False) -> list[Alert]: ...
    async def get(self, alert_id: str) -> Alert | None: ...
    async def set_acknowledged(self, alert_id: str, acknowledged: bool) -> Alert | None: ...
