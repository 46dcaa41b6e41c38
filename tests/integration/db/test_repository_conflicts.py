from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from uuid import UUID

import pytest

from granjafacil.domain.errors import ConflictError
from granjafacil.domain.models.alert import Alert
from granjafacil.domain.value_objects.alert import AlertKind, AlertPriority
from granjafacil.infrastructure.db.session import SQLAlchemyUnitOfWork
from tests.factories import make_batch, make_weighing


def _alert(batch_id: UUID, alert_id: str) -> Alert:
    return Alert(
        id=alert_id,
        batch_id=batch_id,
        event_id="vaccine-x",
        kind=AlertKind.VACCINE_LATE,
        priority=AlertPriority.HIGH,
        title="Vacina atrasada",
        description="Newcastle",
        created_at=datetime(2024, 3, 1, tzinfo=timezone.utc),
    )


@pytest.mark.asyncio
async def test_weighing_insert_clash_is_a_conflict(app, batch_id):
    batch = make_batch(batch_id=UUID(batch_id))
    first = make_weighing(batch, 1, 70)
    uow = SQLAlchemyUnitOfWork(app.state.session_factory)
    async with uow:
        await uow.weighing_records.add_many([first])
        await uow.commit()

    # same primary key for a week not yet stored
    clash = replace(make_weighing(batch, 2, 130), id=first.id)
    with pytest.raises(ConflictError) as excinfo:
        async with SQLAlchemyUnitOfWork(app.state.session_factory) as uow:
            await uow.weighing_records.add_many([clash])
    assert excinfo.value.status_code == 409
    assert excinfo.value.details == {"batch_ids": [batch_id]}

    async with SQLAlchemyUnitOfWork(app.state.session_factory) as uow:
        stored = await uow.weighing_records.list_for_batch(batch.id)
    assert [r.week for r in stored] == [1]


@pytest.mark.asyncio
async def test_alert_replace_clash_is_a_conflict(app, client, batch_id):
    resp = await client.post(
        "/api/v1/batches/",
        json={
            "name": "Lote Fevereiro",
            "bird_count": 500,
            "birth_date": "2024-02-01",
            "entry_date": "2024-02-01",
            "breed_id": "novogen-tinted",
        },
    )
    other_batch = UUID(resp.json()["id"])
    async with SQLAlchemyUnitOfWork(app.state.session_factory) as uow:
        await uow.alerts.replace_for_batch(other_batch, [_alert(other_batch, "alert-1")])
        await uow.commit()

    target = UUID(batch_id)
    with pytest.raises(ConflictError) as excinfo:
        async with SQLAlchemyUnitOfWork(app.state.session_factory) as uow:
            await uow.alerts.replace_for_batch(target, [_alert(target, "alert-1")])
    assert excinfo.value.details == {"batch_id": batch_id}
