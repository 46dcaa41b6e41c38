from __future__ import annotations

from decimal import Decimal


async def _feed_input(client, name: str, price: str, *, unit: str = "kg", category="feed"):
    resp = await client.post(
        "/api/v1/feed-inputs/",
        json={"name": name, "category": category, "unit": unit, "price_per_unit": price},
    )
    assert resp.status_code == 201, resp.text
    return resp.json()["id"]


async def test_formula_cost_and_phase_estimate(client, batch_id):
    corn = await _feed_input(client, "Milho", "1.20")
    soy = await _feed_input(client, "Farelo de soja", "2.50")
    limestone = await _feed_input(client, "Calcário", "0.004", unit="g")

    resp = await client.post(
        "/api/v1/feed-formulas/",
        json={
            "name": "Postura Fase 1",
            "type": "laying",
            "ingredients": [
                {"feed_input_id": corn, "percent": "60"},
                {"feed_input_id": soy, "percent": "30"},
                {"feed_input_id": limestone, "percent": "10"},
            ],
        },
    )
    assert resp.status_code == 201, resp.text
    formula = resp.json()
    assert Decimal(formula["cost_per_kg"]) == Decimal("1.87")
    assert [i["name"] for i in formula["ingredients"]] == ["Milho", "Farelo de soja", "Calcário"]

    listed = (await client.get("/api/v1/feed-formulas/")).json()
    assert [f["id"] for f in listed] == [formula["id"]]

    estimate = await client.get(
        f"/api/v1/feed-formulas/{formula['id']}/cost-estimate",
        params={"batch_id": batch_id, "phase": "crescimento"},
    )
    assert estimate.status_code == 200, estimate.text
    body = estimate.json()
    assert body["weeks"] == 4
    assert body["feed_kg"] == 560
    assert Decimal(body["total_cost"]) == Decimal("1047.20")

    unknown_phase = await client.get(
        f"/api/v1/feed-formulas/{formula['id']}/cost-estimate",
        params={"batch_id": batch_id, "phase": "engorda"},
    )
    assert unknown_phase.status_code == 422

    deleted = await client.delete(f"/api/v1/feed-formulas/{formula['id']}")
    assert deleted.status_code == 204
    assert (await client.get(f"/api/v1/feed-formulas/{formula['id']}")).status_code == 404


async def test_formula_percentages_must_sum_to_100(client):
    corn = await _feed_input(client, "Milho", "1.20")
    soy = await _feed_input(client, "Farelo de soja", "2.50")

    resp = await client.post(
        "/api/v1/feed-formulas/",
        json={
            "name": "Incompleta",
            "type": "initial",
            "ingredients": [
                {"feed_input_id": corn, "percent": "60"},
                {"feed_input_id": soy, "percent": "30"},
            ],
        },
    )
    assert resp.status_code == 422
    assert resp.json()["code"] == "validation_error"


async def test_egg_production_flow(client, batch_id):
    created = await client.post(
        "/api/v1/egg-production/",
        json={"batch_id": batch_id, "date": "2024-02-28", "eggs_collected": 800},
    )
    assert created.status_code == 201, created.text
    record = created.json()
    assert Decimal(record["laying_rate"]) == Decimal("80.00")
    assert record["bird_count"] == 1000

    await client.post(
        "/api/v1/egg-production/",
        json={"batch_id": batch_id, "date": "2024-02-29", "eggs_collected": 900},
    )

    duplicate = await client.post(
        "/api/v1/egg-production/",
        json={"batch_id": batch_id, "date": "2024-02-28", "eggs_collected": 10},
    )
    assert duplicate.status_code == 409

    future = await client.post(
        "/api/v1/egg-production/",
        json={"batch_id": batch_id, "date": "2024-03-02", "eggs_collected": 10},
    )
    assert future.status_code == 422

    updated = await client.put(
        f"/api/v1/egg-production/{record['id']}", json={"eggs_collected": 850}
    )
    assert updated.status_code == 200
    assert Decimal(updated.json()["laying_rate"]) == Decimal("85.00")

    targets = (
        await client.get("/api/v1/egg-production/targets", params={"batch_id": batch_id})
    ).json()
    assert targets == {"daily": 850, "monthly": 25500, "laying_pct": 85}

    summary = (
        await client.get("/api/v1/egg-production/summary", params={"batch_id": batch_id})
    ).json()
    assert summary["days_recorded"] == 2
    assert summary["total_eggs"] == 1750
    assert Decimal(summary["average_laying_rate"]) == Decimal("87.50")
    assert Decimal(summary["target_attainment_pct"]) == Decimal("102.94")

    listed = (
        await client.get(
            "/api/v1/egg-production/",
            params={"batch_id": batch_id, "date_from": "2024-02-29"},
        )
    ).json()
    assert [r["date"] for r in listed] == ["2024-02-29"]

    deleted = await client.delete(f"/api/v1/egg-production/{record['id']}")
    assert deleted.status_code == 204


async def test_dashboard_overview(client, batch_id):
    await client.post(
        "/api/v1/egg-production/",
        json={"batch_id": batch_id, "date": "2024-03-01", "eggs_collected": 870},
    )
    await client.post(
        "/api/v1/feed-inputs/",
        json={"name": "Premix", "category": "supplement", "unit": "kg", "price_per_unit": "9",
              "current_stock": "1", "minimum_stock": "5"},
    )
    await client.get(f"/api/v1/batches/{batch_id}/calendar")

    resp = await client.get("/api/v1/dashboard/")
    assert resp.status_code == 200
    body = resp.json()
    assert body["batches"] == 1
    assert body["total_birds"] == 1000
    assert body["eggs_today"] == 870
    assert Decimal(body["laying_rate_today"]) == Decimal("87.00")
    assert body["low_stock_inputs"] == 1
    assert body["active_alerts"] == 18
    assert body["critical_alerts"] == 0


async def test_health(client):
    resp = await client.get("/api/v1/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}
