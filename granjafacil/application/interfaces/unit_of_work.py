from __future__ import annotations

from typing import Protocol

from granjafacil.application.interfaces.repositories.alerts import AlertsRepository
from granjafacil.application.interfaces.repositories.batches import BatchesRepository
from granjafacil.application.interfaces.repositories.egg_productions import (
    EggProductionsRepository,
)
from granjafacil.application.interfaces.repositories.feed_formulas import FeedFormulasRepository
from granjafacil.application.interfaces.repositories.feed_inputs import (
    FeedInputsRepository,
    StockMovementsRepository,
)
from granjafacil.application.interfaces.repositories.houses import HousesRepository
from granjafacil.application.interfaces.repositories.suppliers import SuppliersRepository
from granjafacil.application.interfaces.repositories.vaccination_records import (
    VaccinationRecordsRepository,
)
from granjafacil.application.interfaces.repositories.weighing_records import (
    WeighingRecordsRepository,
)
from granjafacil.domain.ports.breeds_repo import BreedsRepo
from granjafacil.domain.ports.vaccine_catalog import VaccineCatalog


class UnitOfWork(Protocol):
    batches: BatchesRepository
    breeds: BreedsRepo
    vaccines: VaccineCatalog
    vaccination_records: VaccinationRecordsRepository
    weighing_records: WeighingRecordsRepository
    alerts: AlertsRepository
    suppliers: SuppliersRepository
    feed_inputs: FeedInputsRepository
    stock_movements: StockMovementsRepository
    feed_formulas: FeedFormulasRepository
    egg_productions: EggProductionsRepository
    houses: HousesRepository

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...
