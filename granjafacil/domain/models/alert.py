from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from uuid import UUID

from granjafacil.domain.value_objects.alert import AlertKind, AlertPriority


@dataclass(slots=True, frozen=True)
class Alert:
    id: str
    batch_id: UUID
    event_id: str
    kind: AlertKind
    priority: AlertPriority
    title: str
    description: str
    created_at: datetime
    acknowledged: bool = False

    def acknowledge(self) -> Alert:
        return replace(self, acknowledged=True)
