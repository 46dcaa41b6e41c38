from __future__ import annotations

from granjafacil.domain.errors import ValidationError
from granjafacil.domain.models.breed import PhaseParameters


def validate_breed(name: str, phases: list[PhaseParameters], growth_curve: dict[int, int]) -> None:
    if not 3 <= len(name.strip()) <= 50:
        raise ValidationError("Breed name must have between 3 and 50 characters")
    if not phases:
        raise ValidationError("A breed needs at least one phase")
    for index, phase in enumerate(phases):
        details = {"phase": index, "name": phase.name}
        if not phase.name.strip():
            raise ValidationError("Phase name is required", details=details)
        if not 1 <= phase.duration_weeks <= 100:
            raise ValidationError("Phase duration must be between 1 and 100 weeks", details=details)
        weekly = phase.weekly_consumption_grams
        accumulated = phase.accumulated_consumption_grams
        if weekly is None and accumulated is None:
            raise ValidationError("Phase consumption is required", details=details)
        if weekly is not None and not 0 <= weekly <= 1000:
            raise ValidationError("Weekly consumption must be between 0 and 1000 g", details=details)
        if accumulated is not None and not 0 <= accumulated <= 1000:
            raise ValidationError(
                "Accumulated consumption must be between 0 and 1000 g", details=details
            )
    for week, grams in growth_curve.items():
        if week < 1 or grams <= 0:
            raise ValidationError(
                "Growth curve needs positive weeks and weights",
                details={"week": week, "grams": grams},
            )
