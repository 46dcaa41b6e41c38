from __future__ import annotations

from decimal import Decimal
from uuid import uuid4


async def _house(client, **overrides) -> dict:
    payload = {
        "name": "Galpão Norte",
        "width_m": "10",
        "length_m": "12.5",
        "height_m": "3",
        "density": "6",
        "responsibles": [{"name": "Maria", "role": "Tratadora"}],
    }
    payload.update(overrides)
    resp = await client.post("/api/v1/houses/", json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()


async def _batch_in(client, house_id, bird_count: int):
    return await client.post(
        "/api/v1/batches/",
        json={
            "name": "Lote Fevereiro",
            "bird_count": bird_count,
            "birth_date": "2024-02-01",
            "entry_date": "2024-02-01",
            "breed_id": "novogen-tinted",
            "house_id": house_id,
        },
    )


async def test_house_crud_computes_area_and_capacity(client):
    house = await _house(client)
    assert Decimal(house["area_m2"]) == Decimal("125.00")
    assert house["max_capacity"] == 750
    assert house["effective_capacity"] == 750
    assert house["responsibles"] == [{"name": "Maria", "role": "Tratadora"}]

    updated = await client.put(
        f"/api/v1/houses/{house['id']}", json={"density": "7", "notes": "<Ventilação> nova"}
    )
    assert updated.status_code == 200, updated.text
    body = updated.json()
    assert body["max_capacity"] == 875
    assert body["notes"] == "Ventilação nova"
    assert body["name"] == "Galpão Norte"

    listed = (await client.get("/api/v1/houses/")).json()
    assert [h["id"] for h in listed] == [house["id"]]

    assert (await client.delete(f"/api/v1/houses/{house['id']}")).status_code == 204
    assert (await client.get(f"/api/v1/houses/{house['id']}")).status_code == 404


async def test_house_validation_errors(client):
    resp = await client.post(
        "/api/v1/houses/",
        json={
            "name": "Galpão Sul",
            "width_m": "600",
            "length_m": "10",
            "height_m": "3",
            "density": "6.3",
            "responsibles": [],
        },
    )
    assert resp.status_code == 422
    body = resp.json()
    assert body["code"] == "validation_error"
    assert len(body["details"]["errors"]) == 3

    await _house(client)
    duplicate = await client.post(
        "/api/v1/houses/",
        json={
            "name": "Galpão Norte",
            "width_m": "5",
            "length_m": "5",
            "height_m": "3",
            "responsibles": [{"name": "João", "role": "Gerente"}],
        },
    )
    assert duplicate.status_code == 409


async def test_batch_registration_checks_house(client):
    house = await _house(client)

    unknown = await _batch_in(client, str(uuid4()), 100)
    assert unknown.status_code == 404

    overfull = await _batch_in(client, house["id"], 751)
    assert overfull.status_code == 422
    assert overfull.json()["details"]["capacity"] == 750

    resp = await _batch_in(client, house["id"], 750)
    assert resp.status_code == 201, resp.text
    assert resp.json()["house_id"] == house["id"]

    busy = await client.delete(f"/api/v1/houses/{house['id']}")
    assert busy.status_code == 409


async def test_feed_consumption_report(client, batch_id):
    house = await _house(client)
    resp = await _batch_in(client, house["id"], 750)
    assert resp.status_code == 201, resp.text

    report = (await client.get("/api/v1/reports/feed-consumption")).json()

    rows = {r["batch_name"]: r for r in report["rows"]}
    janeiro = rows["Lote Janeiro"]
    assert [(p["phase"], p["feed_kg"]) for p in janeiro["phases"]] == [
        ("recria", 126),
        ("crescimento", 560),
        ("producao", 6804),
    ]
    assert janeiro["total_kg"] == 7490
    assert janeiro["weeks"] == 76
    fevereiro = rows["Lote Fevereiro"]
    assert fevereiro["phases"][0]["feed_kg"] == 95
    assert fevereiro["total_kg"] == 5618
    assert Decimal(fevereiro["kg_per_bird"]) == Decimal("7.491")

    totals = report["totals"]
    assert totals["batches"] == 2
    assert totals["birds"] == 1750
    assert totals["feed_kg"] == 13108
    assert Decimal(totals["kg_per_bird"]) == Decimal("7.490")

    single = (
        await client.get("/api/v1/reports/feed-consumption", params={"batch_id": batch_id})
    ).json()
    assert [r["batch_id"] for r in single["rows"]] == [batch_id]
    assert single["totals"]["feed_kg"] == 7490


async def test_feed_consumption_export_csv(client, batch_id):
    resp = await client.get("/api/v1/reports/feed-consumption/export")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/csv")
    assert "relatorio-consumo-2024-03-01.csv" in resp.headers["content-disposition"]

    lines = resp.text.strip().split("\n")
    assert lines == [
        "Lote,Raça,Número de Aves,Data Entrada,Consumo Recria (kg),"
        "Consumo Crescimento (kg),Consumo Produção (kg),Consumo Total (kg),"
        "Consumo por Ave (kg)",
        "Lote Janeiro,NOVOgen Tinted,1000,01/01/2024,126.00,560.00,6804.00,7490.00,7.490",
    ]


async def test_feed_consumption_of_unknown_batch_is_404(client):
    resp = await client.get(
        "/api/v1/reports/feed-consumption", params={"batch_id": str(uuid4())}
    )
    assert resp.status_code == 404
