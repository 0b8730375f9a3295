"""Test the dashboard command handlers and the invoke dispatch."""
import pytest

from services import command_service
from services.command_service import CommandArgumentError, UnknownCommandError


def test_greet():
    assert command_service.greet("Ada") == "Hello, Ada!"
    assert command_service.greet("") == "Hello, !"


def test_stats_cards():
    cards = command_service.get_stats_cards()
    assert [card["title"] for card in cards] == [
        "Total Properties",
        "Active Tenants",
        "Monthly Revenue",
        "Pending Issues",
    ]
    assert cards[0]["value"] == "24"
    assert cards[2]["value"] == "$42,350"
    assert {"title", "value", "change", "icon", "color"} == set(cards[0])


def test_recent_activities_and_tasks():
    activities = command_service.get_recent_activities()
    assert [a["type"] for a in activities] == ["payment", "maintenance", "lease", "inspection"]

    tasks = command_service.get_upcoming_tasks()
    assert len(tasks) == 4
    assert tasks[0] == {"task": "Lease renewal - Unit 5A", "due": "Tomorrow", "priority": "high"}


def test_mock_units_carry_optional_tenant_info():
    units = command_service.get_mock_units()
    assert [u["id"] for u in units] == ["U001", "U002", "U003", "U004", "U005"]
    assert units[0]["tenant_info"]["name"] == "Alice Johnson"
    assert units[1]["tenant_info"] is None


def test_property_types():
    types = command_service.get_property_types()
    assert types[0] == "Single"
    assert types[1] == "1bedroom"
    assert types[-1] == "10bedroom"
    assert len(types) == 11


def test_expense_categories_and_blocks():
    assert command_service.get_expense_categories() == [
        "Maintenance",
        "Utilities",
        "Security",
        "Cleaning",
        "Renovation",
        "Insurance",
        "Legal",
    ]
    assert command_service.get_building_blocks() == ["Block A", "Block B", "Block C"]
    assert len(command_service.get_all_expenses()) == 5


def test_handlers_return_fresh_copies():
    units = command_service.get_mock_units()
    units[0]["tenant_info"]["name"] = "Changed"
    units.clear()
    assert command_service.get_mock_units()[0]["tenant_info"]["name"] == "Alice Johnson"

    types = command_service.get_property_types()
    types.append("Castle")
    assert "Castle" not in command_service.get_property_types()


def test_list_commands_is_sorted_and_complete():
    names = command_service.list_commands()
    assert names == sorted(names)
    assert len(names) == 12
    assert "greet" in names
    assert "get_building_blocks" in names


def test_invoke_dispatches_by_name():
    assert command_service.invoke("greet", {"name": "Ada"}) == "Hello, Ada!"
    assert command_service.invoke("get_building_blocks") == ["Block A", "Block B", "Block C"]


def test_invoke_unknown_command():
    with pytest.raises(UnknownCommandError) as excinfo:
        command_service.invoke("get_everything")
    assert str(excinfo.value) == "Unknown command: get_everything"
    assert excinfo.value.name == "get_everything"


def test_invoke_bad_arguments():
    with pytest.raises(CommandArgumentError):
        command_service.invoke("greet")
    with pytest.raises(CommandArgumentError):
        command_service.invoke("get_stats_cards", {"limit": 2})


def test_invoke_rejects_wrongly_typed_argument():
    with pytest.raises(CommandArgumentError) as excinfo:
        command_service.invoke("greet", {"name": 123})
    assert "Invalid arguments for greet" in str(excinfo.value)


@pytest.mark.asyncio
async def test_list_commands_endpoint(client):
    resp = await client.get("/api/commands")
    assert resp.status_code == 200
    assert resp.json() == command_service.list_commands()


@pytest.mark.asyncio
async def test_greet_endpoint(client):
    resp = await client.get("/api/commands/greet", params={"name": "Ada"})
    assert resp.status_code == 200
    assert resp.json() == "Hello, Ada!"


@pytest.mark.asyncio
@pytest.mark.parametrize("name", [
    "get_stats_cards",
    "get_recent_activities",
    "get_upcoming_tasks",
    "get_mock_units",
    "get_mock_tenants",
    "get_property_types",
    "get_all_properties",
    "get_all_payments",
    "get_expense_categories",
    "get_all_expenses",
    "get_building_blocks",
])
async def test_typed_command_routes_match_handlers(client, name):
    resp = await client.get(f"/api/commands/{name}")
    assert resp.status_code == 200
    assert resp.json() == getattr(command_service, name)()


@pytest.mark.asyncio
async def test_invoke_endpoint(client):
    resp = await client.post("/api/invoke/greet", json={"name": "Ada"})
    assert resp.status_code == 200
    assert resp.json() == {"command": "greet", "result": "Hello, Ada!"}

    resp = await client.post("/api/invoke/get_property_types")
    assert resp.status_code == 200
    assert resp.json()["result"][0] == "Single"


@pytest.mark.asyncio
async def test_invoke_endpoint_errors(client):
    resp = await client.post("/api/invoke/get_everything")
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Unknown command: get_everything"}

    resp = await client.post("/api/invoke/greet", json={})
    assert resp.status_code == 400

    resp = await client.post("/api/invoke/greet", json={"name": 123})
    assert resp.status_code == 400
    assert resp.json()["detail"].startswith("Invalid arguments for greet")
