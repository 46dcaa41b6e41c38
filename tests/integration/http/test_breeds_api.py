from __future__ import annotations


async def test_default_breeds_are_listed(client):
    resp = await client.get("/api/v1/breeds/")
    assert resp.status_code == 200
    ids = {b["id"] for b in resp.json()}
    assert ids == {"novogen-tinted", "isa-brown", "lohmann-brown", "hisex-white", "dekalb-white"}

    novogen = (await client.get("/api/v1/breeds/novogen-tinted")).json()
    assert novogen["total_weeks"] == 76
    assert novogen["phases"][0]["consumption_per_bird_week"] == 7
    assert novogen["growth_curve"]["22"] == 1780


async def test_custom_breed_lifecycle(client):
    payload = {
        "name": "Caipira Pesadão",
        "phases": [
            {"name": "recria", "duration_weeks": 10, "weekly_consumption_grams": 300},
            {"name": "producao", "duration_weeks": 40, "weekly_consumption_grams": 800},
        ],
        "growth_curve": {"1": 80, "10": 1500},
    }
    created = await client.post("/api/v1/breeds/", json=payload)
    assert created.status_code == 201, created.text
    breed = created.json()
    assert breed["is_system_default"] is False
    assert breed["total_weeks"] == 50

    duplicate = await client.post("/api/v1/breeds/", json=payload)
    assert duplicate.status_code == 409

    updated = await client.put(f"/api/v1/breeds/{breed['id']}", json={"name": "Caipira"})
    assert updated.status_code == 200
    assert updated.json()["name"] == "Caipira"
    assert updated.json()["total_weeks"] == 50

    removed = await client.delete(f"/api/v1/breeds/{breed['id']}")
    assert removed.status_code == 204
    active_ids = {b["id"] for b in (await client.get("/api/v1/breeds/")).json()}
    assert breed["id"] not in active_ids


async def test_system_breed_cannot_be_removed(client):
    resp = await client.delete("/api/v1/breeds/isa-brown")
    assert resp.status_code == 422
    assert resp.json()["code"] == "validation_error"


async def test_unknown_breed_is_404(client):
    resp = await client.get("/api/v1/breeds/does-not-exist")
    assert resp.status_code == 404
    assert resp.json()["code"] == "not_found"
