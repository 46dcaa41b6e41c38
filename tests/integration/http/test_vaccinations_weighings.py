from __future__ import annotations


async def test_vaccine_presets_are_sorted_by_age(client):
    resp = await client.get("/api/v1/vaccines")
    assert resp.status_code == 200
    ages = [v["age_in_days"] for v in resp.json()]
    assert ages == sorted(ages)
    assert len(ages) == 15


async def test_vaccine_applied_within_tolerance_is_not_late(client, batch_id):
    resp = await client.post(
        f"/api/v1/batches/{batch_id}/vaccinations",
        json={
            "vaccine_id": "newcastle-7d",
            "application_date": "2024-01-10",
            "birds_vaccinated": 1000,
            "responsible": "Maria",
        },
    )
    assert resp.status_code == 201, resp.text
    record = resp.json()
    assert record["age_at_application"] == 9
    assert record["next_application_date"] == "2024-01-24"

    records = (await client.get(f"/api/v1/batches/{batch_id}/vaccinations")).json()
    assert [r["id"] for r in records] == [record["id"]]

    calendar = (await client.get(f"/api/v1/batches/{batch_id}/calendar")).json()
    newcastle = next(e for e in calendar["events"] if e["id"].endswith("newcastle-7d"))
    assert newcastle["status"] == "applied"
    assert not any(a["event_id"] == newcastle["id"] for a in calendar["alerts"])


async def test_vaccination_validation(client, batch_id):
    base = {
        "vaccine_id": "newcastle-7d",
        "application_date": "2024-01-10",
        "birds_vaccinated": 1000,
        "responsible": "Maria",
    }
    unknown = await client.post(
        f"/api/v1/batches/{batch_id}/vaccinations", json={**base, "vaccine_id": "nope"}
    )
    assert unknown.status_code == 422
    assert unknown.json()["code"] == "configuration_error"

    too_many = await client.post(
        f"/api/v1/batches/{batch_id}/vaccinations", json={**base, "birds_vaccinated": 1001}
    )
    assert too_many.status_code == 422

    future = await client.post(
        f"/api/v1/batches/{batch_id}/vaccinations", json={**base, "application_date": "2024-03-02"}
    )
    assert future.status_code == 422


async def test_weight_recording_and_deviation(client, batch_id):
    resp = await client.put(
        f"/api/v1/batches/{batch_id}/weighings/2",
        json={"actual_weight_grams": 134.4, "sample_size": 50, "responsible": "João"},
    )
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["record"]["status"] == "done"
    assert body["record"]["ideal_weight_grams"] == 120
    assert body["record"]["performed_date"] == "2024-03-01"
    assert body["deviation"]["percent"] == 12.0
    assert body["deviation"]["severity"] == "attention"

    invalid = await client.put(
        f"/api/v1/batches/{batch_id}/weighings/3", json={"actual_weight_grams": 0}
    )
    assert invalid.status_code == 422

    unscheduled = await client.put(
        f"/api/v1/batches/{batch_id}/weighings/23", json={"actual_weight_grams": 1800}
    )
    assert unscheduled.status_code == 404


async def test_weight_alerts_and_acknowledgement(client, batch_id):
    await client.put(f"/api/v1/batches/{batch_id}/weighings/1", json={"actual_weight_grams": 49})
    await client.put(f"/api/v1/batches/{batch_id}/weighings/2", json={"actual_weight_grams": 134.4})

    calendar = (await client.get(f"/api/v1/batches/{batch_id}/calendar")).json()
    weight_alerts = [a for a in calendar["alerts"] if a["kind"] == "weight_out_of_range"]
    assert {a["title"]: a["priority"] for a in weight_alerts} == {
        "Peso fora do ideal - Semana 1": "critical",
        "Peso fora do ideal - Semana 2": "high",
    }
    assert calendar["alerts"][0]["priority"] == "critical"
    assert calendar["summary"]["critical_alerts"] == 1
    assert calendar["summary"]["latest_deviation"]["severity"] == "attention"
    weighing_events = {
        e["data"]["week"]: e["status"] for e in calendar["events"] if e["kind"] == "weighing"
    }
    assert weighing_events[1] == "done"
    assert weighing_events[3] == "late"

    critical = next(a for a in weight_alerts if a["priority"] == "critical")
    ack = await client.post(f"/api/v1/alerts/{critical['id']}/acknowledge")
    assert ack.status_code == 200
    assert ack.json()["acknowledged"] is True

    active = (
        await client.get("/api/v1/alerts/", params={"batch_id": batch_id, "only_active": True})
    ).json()
    assert critical["id"] not in {a["id"] for a in active}
    assert len(active) == len(calendar["alerts"]) - 1

    # Rebuilding the calendar regenerates the alert set from scratch.
    rebuilt = (await client.get(f"/api/v1/batches/{batch_id}/calendar")).json()
    again = next(a for a in rebuilt["alerts"] if a["id"] == critical["id"])
    assert again["acknowledged"] is False


async def test_acknowledge_unknown_alert_is_404(client):
    resp = await client.post("/api/v1/alerts/alert-missing/acknowledge")
    assert resp.status_code == 404
