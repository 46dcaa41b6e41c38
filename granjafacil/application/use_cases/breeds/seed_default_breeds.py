from __future__ import annotations

import logging

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.domain.presets.breeds import default_breeds

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork) -> int:
    """Store the system default breeds that are not stored yet."""
    added = 0
    for breed in default_breeds():
        if await uow.breeds.get(breed.id) is not None:
            continue
        await uow.breeds.add(breed)
        added += 1
    if added:
        await uow.commit()
        logger.info("Seeded %s default breeds", added)
    return added
