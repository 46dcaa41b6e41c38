from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator
from datetime import datetime, timezone
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///default.db")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from granjafacil.application.use_cases.breeds import seed_default_breeds
from granjafacil.config.settings import Settings
from granjafacil.infrastructure.db.base import Base
from granjafacil.infrastructure.db.orm import (  # noqa: F401
    alert,
    batch,
    breed,
    egg_production,
    feed_formula,
    feed_input,
    house,
    supplier,
    vaccination_record,
    weighing_record,
)
from granjafacil.infrastructure.db.session import SQLAlchemyUnitOfWork
from granjafacil.interfaces.http.main import create_app

# Noon in Sao Paulo, so the local day matches the UTC day.
FIXED_NOW = datetime(2024, 3, 1, 15, 0, tzinfo=timezone.utc)


@pytest.fixture()
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "log_level": "INFO",
            "environment": "test",
            "seed_presets_on_startup": False,
        }
    )


@pytest.fixture()
def app(test_settings: Settings, fixed_now: datetime):
    return create_app(settings=test_settings, clock=lambda: fixed_now)


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        engine = app.state.engine
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        uow = SQLAlchemyUnitOfWork(app.state.session_factory)
        async with uow:
            await seed_default_breeds.execute(uow)
        yield client
        await engine.dispose()


@pytest.fixture()
async def batch_id(client: AsyncClient) -> str:
    """A NOVOgen Tinted batch of 1000 birds entered on 2024-01-01."""
    resp = await client.post(
        "/api/v1/batches/",
        json={
            "name": "Lote Janeiro",
            "bird_count": 1000,
            "birth_date": "2024-01-01",
            "entry_date": "2024-01-01",
            "breed_id": "novogen-tinted",
        },
    )
    assert resp.status_code == 201, resp.text
    return resp.json()["id"]
