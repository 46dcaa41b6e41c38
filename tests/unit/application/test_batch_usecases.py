from __future__ import annotations

from datetime import date, timedelta
from types import SimpleNamespace
from uuid import uuid4

import pytest

from granjafacil.application.use_cases.batches import register_batch
from granjafacil.application.use_cases.breeds import deactivate_breed, seed_default_breeds
from granjafacil.application.use_cases.vaccination import apply_vaccine
from granjafacil.application.use_cases.weighing import record_weight
from granjafacil.domain.errors import ConfigurationError, NotFound, ValidationError
from granjafacil.domain.value_objects.deviation import DeviationSeverity
from granjafacil.domain.value_objects.weighing_status import WeighingStatus
from granjafacil.infrastructure.presets.static_vaccine_catalog import StaticVaccineCatalog
from tests.factories import make_batch, make_breed, make_house, make_vaccine

TODAY = date(2024, 1, 10)


class StubBatches:
    def __init__(self, *batches) -> None:
        self.items = {b.id: b for b in batches}

    async def add(self, batch):
        self.items[batch.id] = batch
        return batch

    async def get(self, batch_id):
        return self.items.get(batch_id)


class StubBreeds:
    def __init__(self, *breeds) -> None:
        self.items = {b.id: b for b in breeds}
        self.updated = []

    async def add(self, breed):
        self.items[breed.id] = breed
        return breed

    async def get(self, breed_id):
        return self.items.get(breed_id)

    async def update(self, breed):
        self.updated.append(breed)
        return breed


class StubHouses:
    def __init__(self, *houses) -> None:
        self.items = {h.id: h for h in houses}

    async def get(self, house_id):
        return self.items.get(house_id)


class StubVaccinations:
    def __init__(self) -> None:
        self.items = []

    async def add(self, record):
        self.items.append(record)
        return record


class StubWeighings:
    def __init__(self) -> None:
        self.items = []

    async def list_for_batch(self, batch_id):
        return [r for r in self.items if r.batch_id == batch_id]

    async def add_many(self, records):
        self.items.extend(records)
        return records

    async def get_for_week(self, batch_id, week):
        return next(
            (r for r in self.items if r.batch_id == batch_id and r.week == week), None
        )

    async def update(self, record):
        return record


def make_uow(*, batches=(), breeds=(), houses=()):
    async def commit():
        return None

    async def rollback():
        return None

    return SimpleNamespace(
        batches=StubBatches(*batches),
        breeds=StubBreeds(*breeds),
        houses=StubHouses(*houses),
        vaccines=StaticVaccineCatalog([make_vaccine(age=7)]),
        vaccination_records=StubVaccinations(),
        weighing_records=StubWeighings(),
        commit=commit,
        rollback=rollback,
    )


def _batch_input(**overrides) -> register_batch.RegisterBatchInput:
    values = {
        "name": "Lote 01",
        "bird_count": 1000,
        "birth_date": date(2024, 1, 1),
        "entry_date": date(2024, 1, 1),
        "breed_id": "test-breed",
    }
    values.update(overrides)
    return register_batch.RegisterBatchInput(**values)


@pytest.mark.asyncio
async def test_register_batch_stores_batch():
    uow = make_uow(breeds=[make_breed()])

    batch = await register_batch.execute(uow, _batch_input(name="  Lote 01  "), today=TODAY)

    assert batch.name == "Lote 01"
    assert uow.batches.items[batch.id] is batch


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides",
    [
        {"name": "Lo"},
        {"bird_count": 0},
        {"bird_count": 100_001},
        {"birth_date": date(2024, 1, 2)},
        {"entry_date": TODAY + timedelta(days=1)},
    ],
)
async def test_register_batch_validation(overrides):
    uow = make_uow(breeds=[make_breed()])
    with pytest.raises(ValidationError):
        await register_batch.execute(uow, _batch_input(**overrides), today=TODAY)
    assert uow.batches.items == {}


@pytest.mark.asyncio
async def test_register_batch_requires_configured_breed():
    inactive = make_breed()
    inactive.active = False
    with pytest.raises(ConfigurationError):
        await register_batch.execute(make_uow(), _batch_input(), today=TODAY)
    with pytest.raises(ConfigurationError):
        await register_batch.execute(make_uow(breeds=[inactive]), _batch_input(), today=TODAY)


@pytest.mark.asyncio
async def test_register_batch_in_house_within_capacity():
    house = make_house()
    uow = make_uow(breeds=[make_breed()], houses=[house])

    batch = await register_batch.execute(
        uow, _batch_input(bird_count=600, house_id=house.id), today=TODAY
    )

    assert batch.house_id == house.id


@pytest.mark.asyncio
async def test_register_batch_refuses_unknown_or_overfull_house():
    house = make_house()
    uow = make_uow(breeds=[make_breed()], houses=[house])

    with pytest.raises(NotFound):
        await register_batch.execute(uow, _batch_input(house_id=uuid4()), today=TODAY)
    with pytest.raises(ValidationError) as excinfo:
        await register_batch.execute(
            uow, _batch_input(bird_count=601, house_id=house.id), today=TODAY
        )
    assert excinfo.value.details["capacity"] == 600
    assert uow.batches.items == {}

    house.capacity_override = True
    house.manual_capacity = 700
    batch = await register_batch.execute(
        uow, _batch_input(bird_count=650, house_id=house.id), today=TODAY
    )
    assert batch.bird_count == 650


@pytest.mark.asyncio
async def test_apply_vaccine_computes_age_and_booster():
    batch = make_batch(entry=date(2024, 1, 1))
    uow = make_uow(batches=[batch])
    payload = apply_vaccine.ApplyVaccineInput(
        vaccine_id="newcastle-7d",
        application_date=date(2024, 1, 10),
        birds_vaccinated=1000,
        responsible="Maria",
    )

    record = await apply_vaccine.execute(uow, batch.id, payload, today=TODAY)

    assert record.age_at_application == 9
    assert record.next_application_date == date(2024, 1, 24)
    assert uow.vaccination_records.items == [record]


@pytest.mark.asyncio
async def test_apply_vaccine_rejects_unknown_vaccine_and_bad_counts():
    batch = make_batch(entry=date(2024, 1, 1), birds=100)
    uow = make_uow(batches=[batch])
    base = {
        "vaccine_id": "newcastle-7d",
        "application_date": date(2024, 1, 8),
        "birds_vaccinated": 100,
        "responsible": "Maria",
    }

    with pytest.raises(ConfigurationError):
        await apply_vaccine.execute(
            uow, batch.id, apply_vaccine.ApplyVaccineInput(**{**base, "vaccine_id": "x"}),
            today=TODAY,
        )
    with pytest.raises(ValidationError):
        await apply_vaccine.execute(
            uow, batch.id, apply_vaccine.ApplyVaccineInput(**{**base, "birds_vaccinated": 101}),
            today=TODAY,
        )
    with pytest.raises(ValidationError):
        await apply_vaccine.execute(
            uow,
            batch.id,
            apply_vaccine.ApplyVaccineInput(**{**base, "application_date": date(2023, 12, 31)}),
            today=TODAY,
        )


@pytest.mark.asyncio
async def test_record_weight_marks_done_and_reports_deviation():
    batch = make_batch(entry=date(2024, 1, 1))
    uow = make_uow(batches=[batch], breeds=[make_breed(curve={1: 500})])

    result = await record_weight.execute(
        uow, batch.id, 1, record_weight.RecordWeightInput(actual_weight_grams=560), today=TODAY
    )

    assert result.record.status is WeighingStatus.DONE
    assert result.record.performed_date == TODAY
    assert result.deviation.severity is DeviationSeverity.ATTENTION


@pytest.mark.asyncio
async def test_record_weight_for_unscheduled_week_is_not_found():
    batch = make_batch(entry=date(2024, 1, 1))
    uow = make_uow(batches=[batch], breeds=[make_breed(curve={1: 70})])

    with pytest.raises(NotFound):
        await record_weight.execute(
            uow, batch.id, 23, record_weight.RecordWeightInput(actual_weight_grams=1800),
            today=TODAY,
        )


@pytest.mark.asyncio
async def test_seed_default_breeds_is_idempotent():
    uow = make_uow()

    assert await seed_default_breeds.execute(uow) == 5
    assert await seed_default_breeds.execute(uow) == 0


@pytest.mark.asyncio
async def test_system_breeds_cannot_be_deactivated():
    uow = make_uow()
    await seed_default_breeds.execute(uow)

    with pytest.raises(ValidationError):
        await deactivate_breed.execute(uow, "novogen-tinted")

    custom = make_breed("custom-1")
    await uow.breeds.add(custom)
    await deactivate_breed.execute(uow, "custom-1")
    assert uow.breeds.updated[-1].active is False
