# ==============================================================================
# CONFTEST - Pytest Fixtures and Configuration
# ==============================================================================
# Shared fixtures for all tests
# ==============================================================================

from __future__ import annotations

import os
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, AsyncIterator, Callable, Optional

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

# Keep the module-level app from touching the filesystem on import
os.environ.setdefault("LOG_TO_FILE", "false")

from catalog_api.core.settings import Settings  # noqa: E402
from catalog_api.main import create_app  # noqa: E402


# ==============================================================================
# SETTINGS FIXTURES
# ==============================================================================

@pytest.fixture
def make_settings(tmp_path) -> Callable[..., Settings]:
    """
    Build isolated settings: fresh SQLite file, no .env, no log file.

    Keyword arguments override any value.
    """
    def _make(**overrides: Any) -> Settings:
        values = {
            "ENVIRONMENT": "development",
            "DB_DRIVER": "sqlite",
            "DB_DSN": str(tmp_path / "test_catalog.db"),
            "LOG_TO_FILE": False,
            "LOG_LEVEL": "WARNING",
        }
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make


@pytest.fixture
def settings(make_settings) -> Settings:
    """Default development settings."""
    return make_settings()


# ==============================================================================
# HTTP CLIENT FIXTURES
# ==============================================================================

@pytest.fixture
def make_client(make_settings):
    """
    Start an application and yield an HTTP client bound to it.

    Usage:
        >>> async with make_client(ENVIRONMENT="production") as client:
        ...     await client.get("/health")
    """
    @asynccontextmanager
    async def _make(
        configure: Optional[Callable[[FastAPI], None]] = None,
        **overrides: Any,
    ) -> AsyncIterator[AsyncClient]:
        app = create_app(make_settings(**overrides))
        if configure is not None:
            configure(app)

        async with app.router.lifespan_context(app):
            transport = ASGITransport(app=app)
            async with AsyncClient(
                transport=transport,
                base_url="http://test",
                timeout=30.0,
            ) as async_client:
                yield async_client

    return _make


@pytest_asyncio.fixture
async def client(make_client) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for API testing (development settings)."""
    async with make_client() as async_client:
        yield async_client


# ==============================================================================
# PAYLOAD FIXTURES
# ==============================================================================

@pytest.fixture
def brand_data() -> dict:
    """Valid brand body."""
    return {
        "name": "Acme",
        "cover_image": "https://x.test/a.png",
    }


@pytest.fixture
def category_data() -> dict:
    """Valid category body."""
    return {
        "title": "Smartphones",
        "cover_image": "https://example.com/smartphones.jpg",
    }


@pytest_asyncio.fixture
async def brand(client: AsyncClient, brand_data: dict) -> dict:
    """A stored brand."""
    response = await client.post("/api/v1/brands", json=brand_data)
    assert response.status_code == 201, response.text
    return response.json()["data"]


@pytest_asyncio.fixture
async def category(client: AsyncClient, category_data: dict) -> dict:
    """A stored category."""
    response = await client.post("/api/v1/categories", json=category_data)
    assert response.status_code == 201, response.text
    return response.json()["data"]


@pytest.fixture
def product_data(brand: dict, category: dict) -> dict:
    """Valid product body referencing the stored brand and category."""
    return {
        "name": "iPhone 14",
        "description": "Latest Apple smartphone",
        "price": 999.99,
        "cover_image": "https://example.com/iphone14.jpg",
        "category_id": category["id"],
        "brand_id": brand["id"],
    }
