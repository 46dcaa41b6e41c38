from __future__ import annotations

from decimal import Decimal
from uuid import uuid4


async def _supplier(client, **overrides) -> dict:
    payload = {
        "name": "Agro Ração Ltda",
        "contact": "Carlos",
        "cnpj": "12.345.678/0001-90",
        "email": "vendas@agroracao.com.br",
    }
    payload.update(overrides)
    resp = await client.post("/api/v1/suppliers/", json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()


async def _feed_input(client, **overrides) -> dict:
    payload = {
        "name": "Milho moído",
        "category": "feed",
        "unit": "kg",
        "price_per_unit": "1.20",
        "current_stock": "100",
        "minimum_stock": "20",
    }
    payload.update(overrides)
    resp = await client.post("/api/v1/feed-inputs/", json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()


async def test_supplier_crud(client):
    supplier = await _supplier(client)
    assert supplier["cnpj"] == "12345678000190"
    assert supplier["active"] is True

    found = (await client.get("/api/v1/suppliers/", params={"search": "agro"})).json()
    assert [s["id"] for s in found] == [supplier["id"]]

    updated = await client.put(
        f"/api/v1/suppliers/{supplier['id']}", json={"active": False, "phone": "11 99999-0000"}
    )
    assert updated.status_code == 200
    assert updated.json()["active"] is False
    assert updated.json()["name"] == "Agro Ração Ltda"
    active = (await client.get("/api/v1/suppliers/", params={"active": True})).json()
    assert active == []

    deleted = await client.delete(f"/api/v1/suppliers/{supplier['id']}")
    assert deleted.status_code == 204
    again = await client.delete(f"/api/v1/suppliers/{supplier['id']}")
    assert again.status_code == 404


async def test_supplier_validation(client):
    bad_cnpj = await client.post(
        "/api/v1/suppliers/", json={"name": "Fornecedor", "contact": "Ana", "cnpj": "123"}
    )
    assert bad_cnpj.status_code == 422
    bad_email = await client.post(
        "/api/v1/suppliers/", json={"name": "Fornecedor", "contact": "Ana", "email": "x"}
    )
    assert bad_email.status_code == 422


async def test_feed_input_crud_and_low_stock(client):
    supplier = await _supplier(client)
    corn = await _feed_input(client, supplier_id=supplier["id"])
    await _feed_input(client, name="Calcário", current_stock="5", minimum_stock="10")

    assert Decimal(corn["stock_value"]) == Decimal("120")
    assert corn["is_low_stock"] is False

    low = (await client.get("/api/v1/feed-inputs/", params={"low_stock": True})).json()
    assert [i["name"] for i in low] == ["Calcário"]

    updated = await client.put(
        f"/api/v1/feed-inputs/{corn['id']}", json={"price_per_unit": "1.50", "name": None}
    )
    assert updated.status_code == 200
    assert Decimal(updated.json()["price_per_unit"]) == Decimal("1.50")
    assert updated.json()["name"] == "Milho moído"

    missing_supplier = await client.post(
        "/api/v1/feed-inputs/",
        json={"name": "Soja", "category": "feed", "unit": "kg", "price_per_unit": "2",
              "supplier_id": str(uuid4())},
    )
    assert missing_supplier.status_code == 404

    deleted = await client.delete(f"/api/v1/feed-inputs/{corn['id']}")
    assert deleted.status_code == 204


async def test_stock_movements(client, batch_id):
    corn = await _feed_input(client)
    url = f"/api/v1/feed-inputs/{corn['id']}/movements"

    inbound = await client.post(
        url,
        json={"type": "in", "quantity": "50", "unit_cost": "1.35", "reason": "Compra",
              "responsible": "João", "invoice_number": "NF-123"},
    )
    assert inbound.status_code == 201, inbound.text
    assert Decimal(inbound.json()["feed_input"]["current_stock"]) == Decimal("150")
    assert Decimal(inbound.json()["feed_input"]["price_per_unit"]) == Decimal("1.35")

    outbound = await client.post(
        url,
        json={"type": "out", "quantity": "135", "reason": "Consumo", "responsible": "João",
              "batch_id": batch_id},
    )
    assert outbound.status_code == 201
    item = outbound.json()["feed_input"]
    assert Decimal(item["current_stock"]) == Decimal("15")
    assert item["is_low_stock"] is True

    too_much = await client.post(
        url, json={"type": "out", "quantity": "16", "reason": "Consumo", "responsible": "João"}
    )
    assert too_much.status_code == 422
    assert too_much.json()["code"] == "validation_error"

    history = (await client.get(url)).json()
    assert len(history) == 2
    assert {m["type"] for m in history} == {"in", "out"}
