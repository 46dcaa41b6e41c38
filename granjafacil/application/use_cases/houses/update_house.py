from __future__ import annotations

from uuid import UUID

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.application.use_cases.houses import get_house
from granjafacil.application.use_cases.houses._validation import refresh_house
from granjafacil.domain.models.house import House

_NON_NULLABLE = (
    "name",
    "width_m",
    "length_m",
    "height_m",
    "density",
    "responsibles",
    "capacity_override",
)


async def execute(uow: UnitOfWork, house_id: UUID, data: dict) -> House:
    """Apply a partial update; area and capacity are always recomputed."""
    house = await get_house.execute(uow, house_id)
    for key in _NON_NULLABLE:
        if data.get(key) is not None:
            setattr(house, key, data[key])
    for key in ("manual_capacity", "notes"):
        if key in data:
            setattr(house, key, data[key])
    refresh_house(house)
    updated = await uow.houses.update(house)
    await uow.commit()
    return updated
