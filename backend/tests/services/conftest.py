"""Service test fixtures — async DB, wired services and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Services are wired with build_container, exactly as the lifespan does
    - db_manager module attribute patched so the readiness check sees the test DB

Design Decisions:
    - SQLite in-memory with StaticPool: every session shares the one connection that
      holds the schema
    - ASGITransport does not run the lifespan: the client fixture sets app.state.services
    - Payload fixtures return builders so each test states only the fields it cares about;
      amounts are Decimals, route tests swap them for JSON strings
"""

from decimal import Decimal

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.pool import StaticPool

import library_api.infrastructure.database as db_module
import library_api.models  # noqa: F401
from library_api.config import Settings
from library_api.db.base import Base
from library_api.infrastructure.database import DatabaseSessionManager
from library_api.main import app
from library_api.services.container import build_container


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager(
        "sqlite+aiosqlite:///:memory:", poolclass=StaticPool,
    )
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield manager
    await manager.dispose()


@pytest.fixture
def settings():
    return Settings(database_url="sqlite+aiosqlite:///:memory:")


@pytest.fixture
def services(db_manager, settings):
    return build_container(db_manager, settings)


@pytest.fixture
async def client(db_manager, services):
    """FastAPI test client bound to the in-memory database."""
    original_manager = db_module.db_manager
    db_module.db_manager = db_manager
    app.state.services = services

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    db_module.db_manager = original_manager


@pytest.fixture
def librarian_payload():
    def build(**overrides) -> dict:
        payload = {
            "name": "Ana Souza",
            "tax_id": "52998224725",
            "email": "ana.souza@biblioteca.com.br",
            "phone": "11987654321",
            "employee_code": "EMP-001",
            "registration_number": "1001",
            "salary": Decimal("3500.00"),
            "shift": "morning",
            "address": {"city": "Sao Paulo", "state": "SP"},
        }
        payload.update(overrides)
        return payload
    return build


@pytest.fixture
def reader_payload():
    def build(**overrides) -> dict:
        payload = {
            "name": "Diego Alves",
            "tax_id": "86288366757",
            "email": "diego.alves@leitores.com.br",
            "phone": "11912345678",
            "registration_number": "R-2001",
            "loyalty_tier": "GOLD",
            "credit_limit": Decimal("2500.00"),
            "address": {"street": "Avenida Paulista", "number": "1000"},
        }
        payload.update(overrides)
        return payload
    return build


@pytest.fixture
async def reader(services, reader_payload):
    """One persisted reader for loan tests."""
    return await services.readers.create(reader_payload())
