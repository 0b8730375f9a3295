"""Test payment endpoints."""
import uuid

import pytest
from tests.conftest import create_payment


@pytest.mark.asyncio
async def test_create_payment_generates_id_and_month(client):
    payment = await create_payment(client, due_date="2024-05-15", payment_date="2024-05-20")
    assert uuid.UUID(payment["payment_id"])
    assert payment["payment_month"] == "2024-05"
    assert payment["amount_paid"] == 1800.0
    assert payment["payment_status"] == "Paid"


@pytest.mark.asyncio
async def test_create_payment_keeps_given_id_and_month(client):
    payment = await create_payment(client, payment_id="P001", payment_month="2024-07")
    assert payment["payment_id"] == "P001"
    assert payment["payment_month"] == "2024-07"

    resp = await client.get("/api/payments/P001")
    assert resp.status_code == 200


@pytest.mark.asyncio
async def test_payment_defaults(client):
    resp = await client.post("/api/payments", json={
        "tenant_id": "1",
        "unit_id": "1",
        "property_id": "1",
        "amount_paid": 50,
        "payment_date": "2024-06-01",
        "due_date": "2024-06-01",
    })
    assert resp.status_code == 201
    data = resp.json()
    assert data["payment_status"] == "Pending"
    assert data["payment_method"] == "Bank Transfer"
    assert data["payment_category"] == "Rent"


@pytest.mark.asyncio
@pytest.mark.parametrize("field,value", [
    ("payment_status", "Refunded"),
    ("payment_method", "Barter"),
    ("payment_category", "Fine"),
    ("payment_month", "2024-13"),
    ("amount_paid", 0),
])
async def test_invalid_payment_values_rejected(client, field, value):
    body = {
        "tenant_id": "1",
        "unit_id": "1",
        "property_id": "1",
        "amount_paid": 100,
        "payment_date": "2024-06-01",
        "due_date": "2024-06-01",
    }
    body[field] = value
    resp = await client.post("/api/payments", json=body)
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_duplicate_receipt_number_is_a_conflict(client):
    await create_payment(client, receipt_number="RCP-0001")
    resp = await client.post("/api/payments", json={
        "tenant_id": "2",
        "unit_id": "2",
        "property_id": "1",
        "amount_paid": 10,
        "payment_date": "2024-06-02",
        "due_date": "2024-06-02",
        "receipt_number": "RCP-0001",
    })
    assert resp.status_code == 409


@pytest.mark.asyncio
async def test_list_payments_filters_and_order(client):
    await create_payment(client, payment_id="P001", payment_date="2024-06-01", due_date="2024-06-01")
    await create_payment(
        client, payment_id="P002", tenant_id="4", unit_id="4",
        payment_date="2024-06-03", due_date="2024-06-01",
    )
    await create_payment(
        client, payment_id="P004", tenant_id="2", unit_id="7", property_id="2",
        payment_date="2024-05-20", due_date="2024-05-15", payment_status="Overdue",
    )

    resp = await client.get("/api/payments")
    assert [p["payment_id"] for p in resp.json()] == ["P002", "P001", "P004"]

    resp = await client.get("/api/payments", params={"payment_month": "2024-06"})
    assert [p["payment_id"] for p in resp.json()] == ["P002", "P001"]

    resp = await client.get("/api/payments", params={"tenant_id": "4"})
    assert [p["payment_id"] for p in resp.json()] == ["P002"]

    resp = await client.get("/api/payments", params={"unit_id": "7"})
    assert [p["payment_id"] for p in resp.json()] == ["P004"]

    resp = await client.get("/api/payments", params={"property_id": "1"})
    assert {p["payment_id"] for p in resp.json()} == {"P001", "P002"}

    resp = await client.get("/api/payments", params={"payment_status": "Overdue"})
    assert [p["payment_id"] for p in resp.json()] == ["P004"]

    resp = await client.get("/api/payments", params={"payment_month": "June"})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_update_payment_rederives_month(client):
    payment = await create_payment(client, payment_id="P001")

    resp = await client.put("/api/payments/P001", json={"due_date": "2024-08-01"})
    assert resp.status_code == 200
    assert resp.json()["payment_month"] == "2024-08"

    resp = await client.put("/api/payments/P001", json={"due_date": "2024-09-01", "payment_month": "2024-10"})
    assert resp.json()["payment_month"] == "2024-10"

    resp = await client.put("/api/payments/P001", json={"payment_status": "Overdue"})
    assert resp.json()["payment_status"] == "Overdue"
    assert resp.json()["payment_month"] == "2024-10"
    assert resp.json()["created_at"] == payment["created_at"]


@pytest.mark.asyncio
async def test_update_and_delete_missing_payment(client):
    resp = await client.put("/api/payments/nope", json={"remarks": "x"})
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Payment with ID nope not found"

    await create_payment(client, payment_id="P001")
    resp = await client.put("/api/payments/P001", json={})
    assert resp.status_code == 400

    resp = await client.delete("/api/payments/P001")
    assert resp.status_code == 204
    resp = await client.delete("/api/payments/P001")
    assert resp.status_code == 404


@pytest.mark.asyncio
@pytest.mark.parametrize("field", ["amount_paid", "due_date", "payment_status", "payment_month"])
async def test_update_payment_rejects_null_required_field(client, field):
    payment = await create_payment(client, payment_id="P001")

    resp = await client.put("/api/payments/P001", json={field: None})
    assert resp.status_code == 422

    resp = await client.get("/api/payments/P001")
    assert resp.json()[field] == payment[field]
