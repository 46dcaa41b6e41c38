"""Stocking rules for free-range laying houses.

Density is in birds per square metre; 5 to 7 in half steps is the accepted
range for free-range hens.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from decimal import ROUND_FLOOR, ROUND_HALF_UP, Decimal

from granjafacil.domain.errors import ValidationError
from granjafacil.domain.models.house import Responsible

MIN_DENSITY = Decimal("5")
MAX_DENSITY = Decimal("7")
DENSITY_STEP = Decimal("0.5")
DEFAULT_DENSITY = Decimal("6")

MIN_DIMENSION = Decimal("0.1")
MAX_DIMENSION = Decimal("500")

_MARKUP = re.compile(r"[<>]")


def is_valid_dimension(value: Decimal) -> bool:
    return MIN_DIMENSION <= value <= MAX_DIMENSION


def is_valid_density(value: Decimal) -> bool:
    return MIN_DENSITY <= value <= MAX_DENSITY and value % DENSITY_STEP == 0


def compute_area(width_m: Decimal, length_m: Decimal) -> Decimal:
    """Floor area in m², two decimals. Out-of-range dimensions give zero."""
    if not is_valid_dimension(width_m) or not is_valid_dimension(length_m):
        return Decimal("0.00")
    return (width_m * length_m).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def compute_capacity(area_m2: Decimal, density: Decimal) -> int:
    if area_m2 <= 0 or not MIN_DENSITY <= density <= MAX_DENSITY:
        return 0
    return int((area_m2 * density).to_integral_value(rounding=ROUND_FLOOR))


def sanitize_text(text: str) -> str:
    return _MARKUP.sub("", text.strip())


def validate_house(
    name: str,
    width_m: Decimal,
    length_m: Decimal,
    height_m: Decimal,
    density: Decimal,
    responsibles: Sequence[Responsible],
    *,
    manual_capacity: int | None = None,
) -> None:
    errors: list[str] = []
    if not name.strip():
        errors.append("House name is required")
    for label, value in (("Width", width_m), ("Length", length_m), ("Height", height_m)):
        if not is_valid_dimension(value):
            errors.append(f"{label} must be between {MIN_DIMENSION} and {MAX_DIMENSION} m")
    if not is_valid_density(density):
        errors.append(
            f"Density must be between {MIN_DENSITY} and {MAX_DENSITY} birds/m² "
            f"in steps of {DENSITY_STEP}"
        )
    if not responsibles:
        errors.append("Add at least one responsible person")
    for index, person in enumerate(responsibles, start=1):
        if not person.name.strip():
            errors.append(f"Name of responsible {index} is required")
        if not person.role.strip():
            errors.append(f"Role of responsible {index} is required")
    if manual_capacity is not None and manual_capacity < 1:
        errors.append("Manual capacity must be at least 1 bird")
    if errors:
        raise ValidationError("Invalid house", details={"errors": errors})
