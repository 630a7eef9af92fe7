"""Test configuration and fixtures for the inventory service."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from inventory.bootstrap import bootstrap_schema
from inventory.config import Settings
from inventory.database import create_engine_from_settings
from inventory.main import create_app
from inventory.repository import ProductRepository

ADMIN_TOKEN = "test-security-key"


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'inventory.db'}",
        security_key=ADMIN_TOKEN,
        db_statement_timeout=5.0,
    )


@pytest.fixture
def admin_headers() -> dict:
    return {"admin-token": ADMIN_TOKEN}


@pytest.fixture(name="client")
def client_fixture(settings):
    """Create a test client against a bootstrapped database."""
    asyncio.run(bootstrap_schema(settings))
    with TestClient(create_app(settings)) as client:
        yield client


@pytest.fixture
def row_count(settings):
    """Count products through a fresh engine, outside the app's event loop."""

    async def _count() -> int:
        engine = create_engine_from_settings(settings)
        try:
            return await ProductRepository(engine).count()
        finally:
            await engine.dispose()

    return lambda: asyncio.run(_count())


@pytest.fixture
def widget() -> dict:
    return {"name": "Widget", "price": 9.99, "quantity": 5}
