"""Test manager, property and block endpoints."""
import pytest
from sqlalchemy import text
from tests.conftest import create_payment, create_property, create_tenant, create_unit


@pytest.mark.asyncio
async def test_seeded_managers_listed(client):
    resp = await client.get("/api/managers")
    assert resp.status_code == 200
    names = [m["name"] for m in resp.json()]
    assert names == ["Alice Johnson", "Bob Smith", "Carol White"]


@pytest.mark.asyncio
async def test_manager_crud(client):
    resp = await client.post("/api/managers", json={
        "name": "Dana Green", "email": "dana@example.com", "phone": "555-0101", "hire_date": "2025-01-02",
    })
    assert resp.status_code == 201
    manager_id = resp.json()["manager_id"]

    resp = await client.put(f"/api/managers/{manager_id}", json={"phone": "555-0199"})
    assert resp.status_code == 200
    assert resp.json()["phone"] == "555-0199"
    assert resp.json()["name"] == "Dana Green"

    resp = await client.delete(f"/api/managers/{manager_id}")
    assert resp.status_code == 204

    resp = await client.get(f"/api/managers/{manager_id}")
    assert resp.status_code == 404
    assert resp.json()["detail"] == f"Manager with ID {manager_id} not found"


@pytest.mark.asyncio
async def test_manager_with_property_cannot_be_deleted(client):
    await create_property(client)
    resp = await client.delete("/api/managers/1")
    assert resp.status_code == 409


@pytest.mark.asyncio
async def test_create_property_defaults_and_manager_name(client):
    prop = await create_property(client)
    assert prop["status"] == "active"
    assert prop["manager_id"] == 1
    assert prop["manager_name"] == "Alice Johnson"
    assert prop["created_at"] is not None


@pytest.mark.asyncio
async def test_create_property_requires_manager(client):
    resp = await client.post("/api/properties", json={
        "name": "Nowhere", "address": "1 Lost Rd", "total_units": 1, "property_type": "Single", "manager_id": 99,
    })
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Manager with ID 99 not found"


@pytest.mark.asyncio
async def test_list_properties_filters(client):
    await create_property(client)
    await create_property(
        client, name="Green Valley Apartments", address="45 Green Valley Rd", property_type="1bedroom", manager_id=2,
    )
    await create_property(
        client, name="City View Condos", address="9 Skyline Ave", property_type="3bedroom", status="maintenance",
    )

    resp = await client.get("/api/properties")
    assert [p["name"] for p in resp.json()] == ["City View Condos", "Green Valley Apartments", "Sunset Lofts"]

    resp = await client.get("/api/properties", params={"status": "maintenance"})
    assert [p["name"] for p in resp.json()] == ["City View Condos"]

    resp = await client.get("/api/properties", params={"property_type": "1bedroom"})
    assert [p["name"] for p in resp.json()] == ["Green Valley Apartments"]

    resp = await client.get("/api/properties", params={"search": "SKYLINE"})
    assert [p["name"] for p in resp.json()] == ["City View Condos"]

    resp = await client.get("/api/properties/types")
    assert resp.json() == ["1bedroom", "2bedroom", "3bedroom"]


@pytest.mark.asyncio
async def test_update_property(client):
    prop = await create_property(client)

    resp = await client.put(f"/api/properties/{prop['property_id']}", json={"status": "maintenance", "manager_id": 3})
    assert resp.status_code == 200
    assert resp.json()["status"] == "maintenance"
    assert resp.json()["manager_name"] == "Carol White"

    resp = await client.put(f"/api/properties/{prop['property_id']}", json={})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "No fields to update"

    resp = await client.put(f"/api/properties/{prop['property_id']}", json={"manager_id": 42})
    assert resp.status_code == 404


@pytest.mark.asyncio
@pytest.mark.parametrize("field", ["name", "address", "total_units", "manager_id"])
async def test_update_property_rejects_null_required_field(client, field):
    prop = await create_property(client)

    resp = await client.put(f"/api/properties/{prop['property_id']}", json={field: None})
    assert resp.status_code == 422

    resp = await client.get(f"/api/properties/{prop['property_id']}")
    assert resp.json()[field] == prop[field]


@pytest.mark.asyncio
async def test_update_property_stamps_updated_at(client, db):
    prop = await create_property(client)
    db.execute(
        text("UPDATE properties SET updated_at = '2000-01-01 00:00:00' WHERE property_id = :id"),
        {"id": prop["property_id"]},
    )
    db.commit()

    resp = await client.get(f"/api/properties/{prop['property_id']}")
    before = resp.json()["updated_at"]
    assert before.startswith("2000-01-01")

    resp = await client.put(f"/api/properties/{prop['property_id']}", json={"status": "maintenance"})
    assert resp.status_code == 200
    after = resp.json()["updated_at"]
    assert after > before
    assert resp.json()["created_at"] == prop["created_at"]


@pytest.mark.asyncio
async def test_delete_property(client):
    prop = await create_property(client)
    resp = await client.delete(f"/api/properties/{prop['property_id']}")
    assert resp.status_code == 204
    resp = await client.get(f"/api/properties/{prop['property_id']}")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_property_with_units_cannot_be_deleted(client):
    prop = await create_property(client)
    await create_unit(client, prop["property_id"])
    resp = await client.delete(f"/api/properties/{prop['property_id']}")
    assert resp.status_code == 409


@pytest.mark.asyncio
async def test_blocks_carry_property_name(client):
    prop = await create_property(client)
    other = await create_property(client, name="Green Valley Apartments", address="45 Green Valley Rd")

    resp = await client.post("/api/blocks", json={"block_name": "Block A", "property_id": prop["property_id"], "floor_count": 4})
    assert resp.status_code == 201
    block = resp.json()
    assert block["property_name"] == "Sunset Lofts"

    await client.post("/api/blocks", json={"block_name": "Block B", "property_id": other["property_id"]})

    resp = await client.get("/api/blocks")
    assert [(b["block_name"], b["property_name"]) for b in resp.json()] == [
        ("Block B", "Green Valley Apartments"),
        ("Block A", "Sunset Lofts"),
    ]

    resp = await client.get("/api/blocks", params={"property_id": prop["property_id"]})
    assert [b["block_name"] for b in resp.json()] == ["Block A"]

    resp = await client.put(f"/api/blocks/{block['block_id']}", json={"notes": "Lift serviced"})
    assert resp.json()["notes"] == "Lift serviced"

    resp = await client.delete(f"/api/blocks/{block['block_id']}")
    assert resp.status_code == 204


@pytest.mark.asyncio
async def test_block_requires_property(client):
    resp = await client.post("/api/blocks", json={"block_name": "Block Z", "property_id": 77})
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Property with ID 77 not found"


@pytest.mark.asyncio
async def test_property_details(client):
    prop = await create_property(client)
    other = await create_property(client, name="Elsewhere", address="2 Far Rd")
    unit = await create_unit(client, prop["property_id"])
    await create_unit(client, other["property_id"], unit_number="EL-1")
    tenant = await create_tenant(client, unit_id=unit["unit_id"])
    await create_tenant(client, full_name="Nobody Here")
    await client.post("/api/blocks", json={"block_name": "Block A", "property_id": prop["property_id"]})
    await create_payment(
        client,
        tenant_id=str(tenant["tenant_id"]),
        unit_id=str(unit["unit_id"]),
        property_id=str(prop["property_id"]),
    )
    await create_payment(client, property_id=str(other["property_id"]))

    resp = await client.get(f"/api/properties/{prop['property_id']}/details")
    assert resp.status_code == 200
    data = resp.json()

    assert data["property"]["name"] == "Sunset Lofts"
    assert data["property"]["manager_name"] == "Alice Johnson"
    assert [u["unit_number"] for u in data["units"]] == ["SL-201"]
    assert [b["block_name"] for b in data["blocks"]] == ["Block A"]
    assert data["blocks"][0]["property_name"] == "Sunset Lofts"
    assert [t["full_name"] for t in data["tenants"]] == ["Alice Johnson"]
    assert len(data["payments"]) == 1
    assert data["payments"][0]["tenant_name"] == "Alice Johnson"
    assert data["payments"][0]["unit_number"] == "SL-201"


@pytest.mark.asyncio
async def test_property_details_not_found(client):
    resp = await client.get("/api/properties/123/details")
    assert resp.status_code == 404
