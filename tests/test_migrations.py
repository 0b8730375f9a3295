"""Test the alembic revision chain against a real SQLite file."""
import pytest
from sqlalchemy import inspect, text
from sqlalchemy.exc import IntegrityError

from services.migration_service import (
    current_revision,
    downgrade_migrations,
    list_migrations,
    run_migrations,
)

HEAD = "20250610_000016"
EXPECTED_TABLES = {
    "users",
    "payments",
    "tenants",
    "units",
    "leases",
    "properties",
    "blocks",
    "expenses",
    "recent_activities",
    "tasks",
    "managers",
    "complaints",
}


def _column_types(engine, table):
    with engine.connect() as conn:
        rows = conn.execute(text(f"PRAGMA table_info({table})")).mappings().all()
    return {row["name"]: row["type"] for row in rows}


def test_fresh_database_has_no_revision(engine):
    assert current_revision(engine) is None


def test_upgrade_to_head_creates_every_table(engine):
    assert run_migrations(engine) == HEAD
    tables = set(inspect(engine).get_table_names())
    assert EXPECTED_TABLES <= tables
    assert "alembic_version" in tables


def test_upgrade_is_idempotent(migrated_engine):
    assert run_migrations(migrated_engine) == HEAD
    with migrated_engine.connect() as conn:
        count = conn.execute(text("SELECT COUNT(*) FROM managers")).scalar()
    # seed revision did not run twice
    assert count == 3


def test_managers_are_seeded(migrated_engine):
    with migrated_engine.connect() as conn:
        names = conn.execute(text("SELECT name FROM managers ORDER BY manager_id")).scalars().all()
    assert names == ["Alice Johnson", "Bob Smith", "Carol White"]


def test_list_migrations_reports_order_and_applied(engine):
    run_migrations(engine, "20250610_000012")
    migrations = list_migrations(engine)

    assert [m["version"] for m in migrations] == list(range(1, 17))
    assert migrations[0]["revision"] == "20250610_000001"
    assert migrations[-1]["revision"] == HEAD
    assert migrations[0]["description"] == "Create users table"
    assert [m["applied"] for m in migrations] == [True] * 12 + [False] * 4


def test_payment_month_is_backfilled_from_due_date(engine):
    run_migrations(engine, "20250610_000012")
    with engine.begin() as conn:
        conn.execute(text(
            "INSERT INTO payments (payment_id, tenant_id, unit_id, property_id, amount_paid, "
            "payment_date, due_date, payment_status, payment_method, payment_category) "
            "VALUES ('p-1', '1', '1', '1', 1500, '2024-05-20', '2024-05-15', 'Overdue', 'Cash', 'Utilities')"
        ))

    run_migrations(engine)

    with engine.connect() as conn:
        month = conn.execute(
            text("SELECT payment_month FROM payments WHERE payment_id = 'p-1'")
        ).scalar()
    assert month == "2024-05"


def test_payment_indexes_exist(migrated_engine):
    index_names = {index["name"] for index in inspect(migrated_engine).get_indexes("payments")}
    assert {"idx_payment_month", "idx_tenant_id", "idx_unit_id"} <= index_names


def test_room_counts_become_real_and_keep_values(engine):
    run_migrations(engine, "20250610_000015")
    assert _column_types(engine, "units")["bedroom_count"] == "INTEGER"

    with engine.begin() as conn:
        conn.execute(text(
            "INSERT INTO properties (name, address, total_units, property_type, manager_id) "
            "VALUES ('Sunset Lofts', '123 Sunset Blvd', 24, '2bedroom', 1)"
        ))
        conn.execute(text(
            "INSERT INTO units (unit_number, property_id, unit_status, unit_type, bedroom_count, bathroom_count) "
            "VALUES ('SL-201', 1, 'occupied', '2BR/2BA', 2, 1)"
        ))

    run_migrations(engine)

    types = _column_types(engine, "units")
    assert types["bedroom_count"] == "REAL"
    assert types["bathroom_count"] == "REAL"
    assert "old_bedroom_count" not in types

    with engine.connect() as conn:
        row = conn.execute(text("SELECT bedroom_count, bathroom_count FROM units")).one()
    assert row == (2.0, 1.0)

    with engine.begin() as conn:
        conn.execute(text("UPDATE units SET bathroom_count = 1.5"))
        assert conn.execute(text("SELECT bathroom_count FROM units")).scalar() == 1.5


def test_payment_status_check_constraint(migrated_engine):
    with pytest.raises(IntegrityError):
        with migrated_engine.begin() as conn:
            conn.execute(text(
                "INSERT INTO payments (payment_id, tenant_id, unit_id, property_id, amount_paid, "
                "payment_date, due_date, payment_status, payment_method, payment_category, payment_month) "
                "VALUES ('p-2', '1', '1', '1', 10, '2024-06-01', '2024-06-01', 'Refunded', 'Cash', 'Rent', '2024-06')"
            ))


def test_complaint_status_check_constraint(migrated_engine):
    with pytest.raises(IntegrityError):
        with migrated_engine.begin() as conn:
            conn.execute(text(
                "INSERT INTO complaints (unit_id, description, status) VALUES (1, 'Leak', 'Closed')"
            ))


def test_task_name_is_unique(migrated_engine):
    insert = text("INSERT INTO tasks (task_name, due_date, priority) VALUES ('Inspect roof', 'Dec 20', 'high')")
    with migrated_engine.begin() as conn:
        conn.execute(insert)
    with pytest.raises(IntegrityError):
        with migrated_engine.begin() as conn:
            conn.execute(insert)


def test_downgrade_to_base_removes_tables(migrated_engine):
    assert downgrade_migrations(migrated_engine) is None
    tables = set(inspect(migrated_engine).get_table_names())
    assert not (EXPECTED_TABLES & tables)


def test_downgrade_one_step_restores_integer_room_counts(migrated_engine):
    assert downgrade_migrations(migrated_engine, "20250610_000015") == "20250610_000015"
    assert _column_types(migrated_engine, "units")["bedroom_count"] == "INTEGER"

    with migrated_engine.connect() as conn:
        rows = conn.execute(text("PRAGMA table_info(units)")).mappings().all()
    notnull = {row["name"]: row["notnull"] for row in rows}
    assert notnull["bedroom_count"] == 0
    assert notnull["bathroom_count"] == 0
