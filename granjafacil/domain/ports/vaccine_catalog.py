from __future__ import annotations

from abc import ABC, abstractmethod

from granjafacil.domain.models.vaccine import VaccinePreset


class VaccineCatalog(ABC):
    """Read-only source of the vaccination programme."""

    @abstractmethod
    def list(self) -> list[VaccinePreset]: ...

    @abstractmethod
    def get(self, vaccine_id: str) -> VaccinePreset | None: ...
