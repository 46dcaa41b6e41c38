from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from granjafacil.domain.errors import ValidationError
from granjafacil.domain.models.egg_production import EggProduction

_CENTS = Decimal("0.01")


def laying_rate(eggs_collected: int, bird_count: int) -> Decimal:
    """Percentage of birds that laid, two decimals."""
    if bird_count <= 0:
        raise ValidationError("Bird count must be positive", details={"bird_count": bird_count})
    if eggs_collected < 0:
        raise ValidationError(
            "Eggs collected cannot be negative", details={"eggs_collected": eggs_collected}
        )
    rate = Decimal(eggs_collected) * 100 / Decimal(bird_count)
    return rate.quantize(_CENTS, rounding=ROUND_HALF_UP)


@dataclass(slots=True, frozen=True)
class ProductionTarget:
    daily: int
    monthly: int
    laying_pct: int


def production_target(bird_count: int, laying_pct: int) -> ProductionTarget:
    daily = bird_count * laying_pct // 100
    return ProductionTarget(daily=daily, monthly=daily * 30, laying_pct=laying_pct)


@dataclass(slots=True, frozen=True)
class ProductionSummary:
    days_recorded: int
    total_eggs: int
    average_laying_rate: Decimal
    average_daily_eggs: Decimal
    target: ProductionTarget
    target_attainment_pct: Decimal


def summarize_production(
    records: Sequence[EggProduction], target: ProductionTarget
) -> ProductionSummary:
    days = len(records)
    total = sum(r.eggs_collected for r in records)
    if days:
        avg_rate = (sum((r.laying_rate for r in records), Decimal("0")) / days).quantize(
            _CENTS, rounding=ROUND_HALF_UP
        )
        avg_daily = (Decimal(total) / days).quantize(_CENTS, rounding=ROUND_HALF_UP)
    else:
        avg_rate = Decimal("0.00")
        avg_daily = Decimal("0.00")
    attainment = Decimal("0.00")
    if target.daily > 0 and days:
        attainment = (avg_daily * 100 / target.daily).quantize(_CENTS, rounding=ROUND_HALF_UP)
    return ProductionSummary(
        days_recorded=days,
        total_eggs=total,
        average_laying_rate=avg_rate,
        average_daily_eggs=avg_daily,
        target=target,
        target_attainment_pct=attainment,
    )
