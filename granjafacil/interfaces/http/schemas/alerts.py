from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from granjafacil.domain.value_objects.alert import AlertKind, AlertPriority


class AlertResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: str
    batch_id: UUID
    event_id: str
    kind: AlertKind
    priority: AlertPriority
    title: str
    description: str
    created_at: datetime
    acknowledged: bool
