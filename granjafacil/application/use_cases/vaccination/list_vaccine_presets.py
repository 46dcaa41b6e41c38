from __future__ import annotations

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.domain.models.vaccine import VaccinePreset


async def execute(uow: UnitOfWork) -> list[VaccinePreset]:
    return sorted(uow.vaccines.list(), key=lambda v: (v.age_in_days, v.name))
