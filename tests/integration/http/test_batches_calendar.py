from __future__ import annotations

from uuid import uuid4


async def test_register_and_fetch_batch(client, batch_id):
    listed = await client.get("/api/v1/batches/")
    assert [b["id"] for b in listed.json()] == [batch_id]

    fetched = await client.get(f"/api/v1/batches/{batch_id}")
    assert fetched.status_code == 200
    assert fetched.json()["entry_date"] == "2024-01-01"

    missing = await client.get(f"/api/v1/batches/{uuid4()}")
    assert missing.status_code == 404


async def test_batch_validation(client):
    base = {
        "name": "Lote Futuro",
        "bird_count": 500,
        "birth_date": "2024-01-01",
        "entry_date": "2024-03-02",
        "breed_id": "novogen-tinted",
    }
    future = await client.post("/api/v1/batches/", json=base)
    assert future.status_code == 422
    assert future.json()["code"] == "validation_error"

    unknown_breed = await client.post(
        "/api/v1/batches/", json={**base, "entry_date": "2024-01-01", "breed_id": "nope"}
    )
    assert unknown_breed.status_code == 422
    assert unknown_breed.json()["code"] == "configuration_error"

    too_many = await client.post(
        "/api/v1/batches/", json={**base, "entry_date": "2024-01-01", "bird_count": 100_001}
    )
    assert too_many.status_code == 422
    assert too_many.json()["code"] == "validation_error"
    assert too_many.json()["details"]["errors"][0]["loc"] == ["body", "bird_count"]


async def test_calendar_for_batch(client, batch_id):
    resp = await client.get(f"/api/v1/batches/{batch_id}/calendar")
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["error"] is None

    events = body["events"]
    phases = [e for e in events if e["kind"] == "phase"]
    vaccines = [e for e in events if e["kind"] == "vaccine"]
    weighings = [e for e in events if e["kind"] == "weighing"]
    assert len(phases) == 76
    assert len(vaccines) == 15
    assert len(weighings) == 35

    first = phases[0]
    assert first["expected_date"] == "2024-01-01"
    assert first["expected_end_date"] == "2024-01-07"
    assert first["data"]["total_consumption_kg"] == 7
    assert first["status"] == "done"

    newcastle = next(e for e in vaccines if e["id"].endswith("newcastle-7d"))
    assert newcastle["expected_date"] == "2024-01-08"
    assert newcastle["status"] == "late"

    late_vaccines = [e for e in vaccines if e["status"] == "late"]
    late_weighings = [e for e in weighings if e["status"] == "late"]
    assert len(late_vaccines) == 10
    assert len(late_weighings) == 8
    assert len(body["alerts"]) == 18
    assert body["alerts"][0]["priority"] == "high"
    assert body["alerts"][-1]["priority"] == "medium"

    summary = body["summary"]
    assert summary["current_phase"] == "recria"
    assert summary["late"] == 18
    assert summary["active_alerts"] == 18
    assert [p["name"] for p in body["phases"]] == ["recria", "crescimento", "producao"]


async def test_calendar_is_idempotent(client, batch_id):
    first = (await client.get(f"/api/v1/batches/{batch_id}/calendar")).json()
    second = (await client.get(f"/api/v1/batches/{batch_id}/calendar")).json()

    assert [(e["id"], e["status"]) for e in first["events"]] == [
        (e["id"], e["status"]) for e in second["events"]
    ]
    weighings = (await client.get(f"/api/v1/batches/{batch_id}/weighings")).json()
    assert len(weighings) == 35
    assert len({w["week"] for w in weighings}) == 35


async def test_calendar_filters(client, batch_id):
    resp = await client.get(
        f"/api/v1/batches/{batch_id}/calendar",
        params={"kind": "vaccine", "status": "late", "date_from": "2024-01-08"},
    )
    assert resp.status_code == 200
    events = resp.json()["events"]
    assert events
    assert all(e["kind"] == "vaccine" and e["status"] == "late" for e in events)
    assert all(e["expected_date"] >= "2024-01-08" for e in events)
    assert len(events) == 9
    assert resp.json()["summary"]["total_events"] == 126


async def test_calendar_export_csv(client, batch_id):
    resp = await client.get(f"/api/v1/batches/{batch_id}/calendar/export")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/csv")
    assert "calendario-Lote-Janeiro-2024-03-01.csv" in resp.headers["content-disposition"]

    lines = resp.text.strip().split("\n")
    assert lines[0] == "Data,Tipo,Título,Descrição,Status,Lote"
    assert len(lines) == 1 + 126
    assert lines[1].startswith("01/01/2024,")
    assert any(",Vacina,Newcastle (La Sota)," in line and ",Atrasado," in line for line in lines)


async def test_calendar_of_unknown_batch_is_404(client):
    resp = await client.get(f"/api/v1/batches/{uuid4()}/calendar")
    assert resp.status_code == 404
