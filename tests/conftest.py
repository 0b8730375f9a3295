"""
Test fixtures for the PropertyDesk backend tests.

Every test gets its own SQLite file under tmp_path, migrated to head,
and the app's get_session dependency is pointed at it so tests never
touch the real database.
"""
import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.orm import sessionmaker

from database import create_db_engine, get_session
from main import app
from services.migration_service import run_migrations


@pytest.fixture
def engine(tmp_path):
    """Engine on a fresh, empty database file."""
    db_engine = create_db_engine(f"sqlite:///{tmp_path / 'propertydesk.db'}", echo=False)
    yield db_engine
    db_engine.dispose()


@pytest.fixture
def migrated_engine(engine):
    run_migrations(engine)
    return engine


@pytest.fixture
def session_factory(migrated_engine):
    return sessionmaker(
        bind=migrated_engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
async def client(session_factory):
    """Async test client for the FastAPI app, bound to the test database."""

    def _get_test_session():
        session = session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    app.dependency_overrides[get_session] = _get_test_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


# ── Record helpers ─────────────────────────────────────────────────────

async def create_property(client, **overrides):
    """Create a property managed by seeded manager 1."""
    body = {
        "name": "Sunset Lofts",
        "address": "123 Sunset Blvd",
        "total_units": 24,
        "property_type": "2bedroom",
        "manager_id": 1,
    }
    body.update(overrides)
    resp = await client.post("/api/properties", json=body)
    assert resp.status_code == 201, resp.text
    return resp.json()


async def create_unit(client, property_id, **overrides):
    body = {
        "unit_number": "SL-201",
        "property_id": property_id,
        "block_id": "A",
        "floor_number": 2,
        "unit_status": "occupied",
        "unit_type": "2BR/2BA",
        "bedroom_count": 2,
        "bathroom_count": 1.5,
        "monthly_rent": 1800.0,
    }
    body.update(overrides)
    resp = await client.post("/api/units", json=body)
    assert resp.status_code == 201, resp.text
    return resp.json()


async def create_tenant(client, **overrides):
    body = {
        "full_name": "Alice Johnson",
        "email": "alice@example.com",
        "lease_start_date": "2024-01-15",
        "lease_end_date": "2025-01-14",
        "rent_amount": 1800.0,
    }
    body.update(overrides)
    resp = await client.post("/api/tenants", json=body)
    assert resp.status_code == 201, resp.text
    return resp.json()


async def create_payment(client, **overrides):
    body = {
        "tenant_id": "1",
        "unit_id": "1",
        "property_id": "1",
        "amount_paid": 1800.0,
        "payment_date": "2024-06-01",
        "due_date": "2024-06-01",
        "payment_status": "Paid",
        "payment_method": "Bank Transfer",
        "payment_category": "Rent",
    }
    body.update(overrides)
    resp = await client.post("/api/payments", json=body)
    assert resp.status_code == 201, resp.text
    return resp.json()
