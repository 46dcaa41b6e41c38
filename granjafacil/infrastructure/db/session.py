from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.domain.ports.vaccine_catalog import VaccineCatalog
from granjafacil.infrastructure.presets.static_vaccine_catalog import StaticVaccineCatalog

_REPOSITORIES = (
    "batches",
    "breeds",
    "vaccination_records",
    "weighing_records",
    "alerts",
    "suppliers",
    "feed_inputs",
    "stock_movements",
    "feed_formulas",
    "egg_productions",
    "houses",
)


def create_engine(database_url: str) -> AsyncEngine:
    return create_async_engine(database_url, echo=False, future=True)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


class SQLAlchemyUnitOfWork(UnitOfWork):
    def __init__(
        self,
        session_factory: Callable[[], AsyncSession],
        vaccines: VaccineCatalog | None = None,
    ) -> None:
        self._session_factory = session_factory
        self.session: AsyncSession | None = None
        self.vaccines = vaccines or StaticVaccineCatalog()
        self._reset_repositories()

    def _reset_repositories(self) -> None:
        for name in _REPOSITORIES:
            setattr(self, name, None)

    async def __aenter__(self) -> UnitOfWork:
        self.session = self._session_factory()
        from granjafacil.infrastructure.repos.alerts_sqlalchemy import AlertsSQLAlchemyRepository
        from granjafacil.infrastructure.repos.batches_sqlalchemy import (
            BatchesSQLAlchemyRepository,
        )
        from granjafacil.infrastructure.repos.breeds_sqlalchemy import BreedsSQLAlchemyRepository
        from granjafacil.infrastructure.repos.egg_productions_sqlalchemy import (
            EggProductionsSQLAlchemyRepository,
        )
        from granjafacil.infrastructure.repos.feed_formulas_sqlalchemy import (
            FeedFormulasSQLAlchemyRepository,
        )
        from granjafacil.infrastructure.repos.feed_inputs_sqlalchemy import (
            FeedInputsSQLAlchemyRepository,
            StockMovementsSQLAlchemyRepository,
        )
        from granjafacil.infrastructure.repos.houses_sqlalchemy import HousesSQLAlchemyRepository
        from granjafacil.infrastructure.repos.suppliers_sqlalchemy import (
            SuppliersSQLAlchemyRepository,
        )
        from granjafacil.infrastructure.repos.vaccination_records_sqlalchemy import (
            VaccinationRecordsSQLAlchemyRepository,
        )
        from granjafacil.infrastructure.repos.weighing_records_sqlalchemy import (
            WeighingRecordsSQLAlchemyRepository,
        )

        self.batches = BatchesSQLAlchemyRepository(self.session)
        self.breeds = BreedsSQLAlchemyRepository(self.session)
        self.vaccination_records = VaccinationRecordsSQLAlchemyRepository(self.session)
        self.weighing_records = WeighingRecordsSQLAlchemyRepository(self.session)
        self.alerts = AlertsSQLAlchemyRepository(self.session)
        self.suppliers = SuppliersSQLAlchemyRepository(self.session)
        self.feed_inputs = FeedInputsSQLAlchemyRepository(self.session)
        self.stock_movements = StockMovementsSQLAlchemyRepository(self.session)
        self.feed_formulas = FeedFormulasSQLAlchemyRepository(self.session)
        self.egg_productions = EggProductionsSQLAlchemyRepository(self.session)
        self.houses = HousesSQLAlchemyRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if not self.session:
            return
        try:
            if exc:
                await self.session.rollback()
        finally:
            await self.session.close()
            self.session = None
            self._reset_repositories()

    async def commit(self) -> None:
        if not self.session:
            return
        await self.session.commit()

    async def rollback(self) -> None:
        if not self.session:
            return
        await self.session.rollback()
