from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.domain.value_objects.alert import AlertPriority


@dataclass(slots=True)
class DashboardOverview:
    batches: int
    total_birds: int
    eggs_today: int
    laying_rate_today: Decimal
    low_stock_inputs: int
    active_alerts: int
    critical_alerts: int


async def execute(uow: UnitOfWork, *, today: date) -> DashboardOverview:
    """Farm-wide figures. Alerts are those stored by the last calendar builds."""
    batches = await uow.batches.list()
    total_birds = sum(b.bird_count for b in batches)

    productions = await uow.egg_productions.list(date_from=today, date_to=today)
    eggs_today = sum(p.eggs_collected for p in productions)
    birds_laying = sum(p.bird_count for p in productions)
    rate = Decimal("0.00")
    if birds_laying:
        rate = (Decimal(eggs_today) * 100 / birds_laying).quantize(
            Decimal("0.01"), rounding=ROUND_HALF_UP
        )

    inputs = await uow.feed_inputs.list()
    alerts = await uow.alerts.list_all(only_active=True)
    return DashboardOverview(
        batches=len(batches),
        total_birds=total_birds,
        eggs_today=eggs_today,
        laying_rate_today=rate,
        low_stock_inputs=sum(1 for i in inputs if i.is_low_stock),
        active_alerts=len(alerts),
        critical_alerts=sum(1 for a in alerts if a.priority is AlertPriority.CRITICAL),
    )
