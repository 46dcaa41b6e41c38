from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.application.use_cases.houses._validation import refresh_house
from granjafacil.domain.models.house import House, Responsible
from granjafacil.domain.services.housing import DEFAULT_DENSITY

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreateHouseInput:
    name: str
    width_m: Decimal
    length_m: Decimal
    height_m: Decimal
    density: Decimal = DEFAULT_DENSITY
    responsibles: list[Responsible] = field(default_factory=list)
    manual_capacity: int | None = None
    capacity_override: bool = False
    notes: str | None = None


async def execute(uow: UnitOfWork, payload: CreateHouseInput) -> House:
    house = House.create(
        payload.name,
        payload.width_m,
        payload.length_m,
        payload.height_m,
        payload.density,
        Decimal("0.00"),
        0,
        payload.responsibles,
        manual_capacity=payload.manual_capacity,
        capacity_override=payload.capacity_override,
        notes=payload.notes,
    )
    refresh_house(house)
    created = await uow.houses.add(house)
    await uow.commit()
    logger.info(
        "Registered house %s (%s m², capacity %s)",
        created.id,
        created.area_m2,
        created.effective_capacity,
    )
    return created
