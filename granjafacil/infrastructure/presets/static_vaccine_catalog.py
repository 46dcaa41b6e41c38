from __future__ import annotations

from collections.abc import Iterable

from granjafacil.domain.models.vaccine import VaccinePreset
from granjafacil.domain.ports.vaccine_catalog import VaccineCatalog
from granjafacil.domain.presets.vaccines import VACCINE_PRESETS


class StaticVaccineCatalog(VaccineCatalog):
    """Vaccination programme shipped with the application."""

    def __init__(self, presets: Iterable[VaccinePreset] = VACCINE_PRESETS) -> None:
        self._presets = tuple(presets)
        self._by_id = {p.id: p for p in self._presets}

    def list(self) -> list[VaccinePreset]:
        return list(self._presets)

    def get(self, vaccine_id: str) -> VaccinePreset | None:
        return self._by_id.get(vaccine_id)
