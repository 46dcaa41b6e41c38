"""Breed parameter presets for laying hens.

Phase figures come from the breeders' management guides. The recria phase is
expressed as grams accumulated over the whole phase; the others as grams per
bird per week.
"""

from __future__ import annotations

from granjafacil.domain.models.breed import BreedParameters, PhaseParameters
from granjafacil.domain.presets.weighings import NOVOGEN_TINTED_CURVE

RECRIA = "recria"
CRESCIMENTO = "crescimento"
PRODUCAO = "producao"


def _phases(
    recria_weeks: int,
    recria_accumulated: int,
    growth_weeks: int,
    growth_weekly: int,
    laying_weeks: int,
    laying_weekly: int,
) -> list[PhaseParameters]:
    return [
        PhaseParameters(RECRIA, recria_weeks, accumulated_consumption_grams=recria_accumulated),
        PhaseParameters(CRESCIMENTO, growth_weeks, weekly_consumption_grams=growth_weekly),
        PhaseParameters(PRODUCAO, laying_weeks, weekly_consumption_grams=laying_weekly),
    ]


def default_breeds() -> list[BreedParameters]:
    """Fresh copies of the system default breeds."""
    return [
        BreedParameters.create(
            "NOVOgen Tinted",
            _phases(18, 126, 4, 140, 54, 126),
            growth_curve=NOVOGEN_TINTED_CURVE,
            breed_id="novogen-tinted",
            is_system_default=True,
        ),
        BreedParameters.create(
            "Isa Brown",
            _phases(16, 115, 6, 135, 54, 120),
            breed_id="isa-brown",
            is_system_default=True,
        ),
        BreedParameters.create(
            "Lohmann Brown",
            _phases(17, 118, 5, 138, 54, 118),
            breed_id="lohmann-brown",
            is_system_default=True,
        ),
        BreedParameters.create(
            "Hisex White",
            _phases(18, 108, 4, 125, 54, 110),
            breed_id="hisex-white",
            is_system_default=True,
        ),
        BreedParameters.create(
            "Dekalb White",
            _phases(17, 112, 5, 128, 54, 112),
            breed_id="dekalb-white",
            is_system_default=True,
        ),
    ]
