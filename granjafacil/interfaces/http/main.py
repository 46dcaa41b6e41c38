from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from granjafacil.application.use_cases.breeds import seed_default_breeds
from granjafacil.config.settings import Settings, get_settings
from granjafacil.domain.ports.vaccine_catalog import VaccineCatalog
from granjafacil.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_session_factory,
)
from granjafacil.infrastructure.presets.static_vaccine_catalog import StaticVaccineCatalog
from granjafacil.interfaces.http.deps import get_app_settings
from granjafacil.interfaces.http.routers import (
    alerts,
    batches,
    breeds,
    calendar,
    dashboard,
    formulas,
    houses,
    inventory,
    production,
    reports,
    suppliers,
    vaccinations,
    weighings,
)
from granjafacil.interfaces.middleware.error_handler import register_error_handlers
from granjafacil.utils.datetime_tz import Clock, utc_now

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    if settings.seed_presets_on_startup:
        uow = SQLAlchemyUnitOfWork(app.state.session_factory, vaccines=app.state.vaccine_catalog)
        async with uow:
            await seed_default_breeds.execute(uow)
    try:
        yield
    finally:
        engine = getattr(app.state, "engine", None)
        if engine is not None:
            await engine.dispose()


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.INFO)
    root = logging.getLogger()
    # Avoid adding duplicate handlers on reload
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(level)
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access", "httpx"):
        logging.getLogger(name).setLevel(level)
    # SQL echo only when explicitly debugging
    logging.getLogger("sqlalchemy.engine").setLevel(max(level, logging.WARNING))


def create_app(
    *,
    settings: Settings | None = None,
    clock: Clock | None = None,
    vaccine_catalog: VaccineCatalog | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    _configure_logging(settings.log_level)
    app = FastAPI(
        title="GranjaFacil Backend",
        version="0.1.0",
        description="Batch calendar, vaccination and production API for laying-hen farms",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.clock = clock or utc_now
    app.state.vaccine_catalog = vaccine_catalog or StaticVaccineCatalog()
    app.state.engine = create_engine(settings.database_url)
    app.state.session_factory = create_session_factory(app.state.engine)
    register_error_handlers(app)

    api = APIRouter(prefix="/api/v1")
    api.include_router(breeds.router)
    api.include_router(houses.router)
    api.include_router(batches.router)
    api.include_router(calendar.router)
    api.include_router(vaccinations.router)
    api.include_router(weighings.router)
    api.include_router(alerts.router)
    api.include_router(suppliers.router)
    api.include_router(inventory.router)
    api.include_router(formulas.router)
    api.include_router(production.router)
    api.include_router(dashboard.router)
    api.include_router(reports.router)

    @api.get("/health", tags=["health"])
    async def health(_: Settings = Depends(get_app_settings)) -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(api)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    logger.info("GranjaFacil API configured (environment=%s)", settings.environment)
    return app


app = create_app()
