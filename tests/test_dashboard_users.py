"""Test task, recent activity and user endpoints."""
import pytest


@pytest.mark.asyncio
async def test_tasks(client):
    resp = await client.post("/api/tasks", json={
        "task_name": "Lease renewal - Unit 5A", "due_date": "Tomorrow", "priority": "high",
    })
    assert resp.status_code == 201
    task = resp.json()

    resp = await client.post("/api/tasks", json={
        "task_name": "Lease renewal - Unit 5A", "due_date": "Dec 20", "priority": "low",
    })
    assert resp.status_code == 409
    assert resp.json()["detail"] == "Task 'Lease renewal - Unit 5A' already exists"

    resp = await client.get("/api/tasks")
    assert [t["task_name"] for t in resp.json()] == ["Lease renewal - Unit 5A"]

    resp = await client.delete(f"/api/tasks/{task['task_id']}")
    assert resp.status_code == 204
    resp = await client.delete(f"/api/tasks/{task['task_id']}")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_recent_activities_newest_first(client):
    for message in ("Rent payment received", "Maintenance request submitted"):
        resp = await client.post("/api/recent-activities", json={
            "activity_type": "payment", "message": message, "time": "just now",
        })
        assert resp.status_code == 201

    resp = await client.get("/api/recent-activities")
    assert [a["message"] for a in resp.json()] == ["Maintenance request submitted", "Rent payment received"]

    activity_id = resp.json()[0]["recent_activity_id"]
    resp = await client.delete(f"/api/recent-activities/{activity_id}")
    assert resp.status_code == 204


@pytest.mark.asyncio
async def test_users(client):
    resp = await client.post("/api/users", json={"name": "Ada", "email": "ada@example.com"})
    assert resp.status_code == 201
    user = resp.json()

    resp = await client.post("/api/users", json={"name": "Ada Again", "email": "ada@example.com"})
    assert resp.status_code == 409

    resp = await client.get(f"/api/users/{user['user_id']}")
    assert resp.json() == user

    resp = await client.get("/api/users")
    assert resp.json() == [user]

    resp = await client.delete(f"/api/users/{user['user_id']}")
    assert resp.status_code == 204
    resp = await client.get(f"/api/users/{user['user_id']}")
    assert resp.status_code == 404
