"""Shared fixtures.

Every test runs against a throw-away SQLite file; the schema is dropped and
recreated before each test that asks for a client or session.
"""
from __future__ import annotations

import asyncio
import os
import tempfile
from pathlib import Path

import pytest
import pytest_asyncio

_DB_DIR = Path(tempfile.mkdtemp(prefix="products-api-tests-"))
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_DIR / 'test.sqlite'}"
os.environ["APP_ENV"] = "test"

from fastapi.testclient import TestClient  # noqa: E402

import products_api.domain  # noqa: E402,F401
from products_api.db.base import Base, async_session_factory, engine  # noqa: E402
from products_api.main import app  # noqa: E402


async def _reset_schema() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


@pytest.fixture()
def client():
    asyncio.run(_reset_schema())
    with TestClient(app) as test_client:
        yield test_client


@pytest_asyncio.fixture()
async def session():
    await _reset_schema()
    async with async_session_factory() as db_session:
        yield db_session


@pytest.fixture()
def make_product(client):
    """POST a product with sensible defaults; returns the created JSON."""

    def _make(**overrides) -> dict:
        payload = {
            "name": "Test Product",
            "description": "Test Description",
            "price": 99.99,
            "quantity": 10,
            "category": "Test Category",
            **overrides,
        }
        response = client.post("/api/products", json=payload)
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _make


@pytest.fixture()
def make_products(make_product):
    """Create *count* numbered products alternating Accessories/Electronics."""

    def _make(count: int) -> list[dict]:
        return [
            make_product(
                name=f"Test Product {i}",
                price=10 * i,
                quantity=i,
                category="Electronics" if i % 2 == 0 else "Accessories",
            )
            for i in range(1, count + 1)
        ]

    return _make
