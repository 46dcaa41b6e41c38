from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict


class DashboardResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    batches: int
    total_birds: int
    eggs_today: int
    laying_rate_today: Decimal
    low_stock_inputs: int
    active_alerts: int
    critical_alerts: int
