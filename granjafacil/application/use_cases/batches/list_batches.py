from __future__ import annotations

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.domain.models.batch import Batch


async def execute(uow: UnitOfWork) -> list[Batch]:
    return await uow.batches.list()
