from __future__ import annotations

from granjafacil.domain.models.house import House, Responsible
from granjafacil.domain.services.housing import (
    compute_area,
    compute_capacity,
    sanitize_text,
    validate_house,
)


def clean_responsibles(people: list[Responsible]) -> list[Responsible]:
    return [Responsible(sanitize_text(p.name), sanitize_text(p.role)) for p in people]


def refresh_house(house: House) -> House:
    """Validate a house in place and recompute its area and capacity."""
    house.name = sanitize_text(house.name)
    house.notes = sanitize_text(house.notes) if house.notes else None
    house.responsibles = clean_responsibles(house.responsibles)
    validate_house(
        house.name,
        house.width_m,
        house.length_m,
        house.height_m,
        house.density,
        house.responsibles,
        manual_capacity=house.manual_capacity,
    )
    house.area_m2 = compute_area(house.width_m, house.length_m)
    house.max_capacity = compute_capacity(house.area_m2, house.density)
    return house
