"""Shared fixtures and a pytest plugin that runs asyncio-marked tests."""

from __future__ import annotations

import asyncio
import inspect

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from src.data.postgres.connection import db_connection
from src.data.redis import cache_ops


@pytest.hookimpl
def pytest_configure(config: pytest.Config) -> None:  # pragma: no cover - pytest hook
    config.addinivalue_line(
        "markers",
        "asyncio: mark test to run inside an event loop",
    )


@pytest.hookimpl(tryfirst=True)
def pytest_pyfunc_call(pyfuncitem: pytest.Function) -> bool | None:  # pragma: no cover - pytest hook
    if "asyncio" not in pyfuncitem.keywords:
        return None

    test_function = pyfuncitem.obj
    if not inspect.iscoroutinefunction(test_function):
        return None

    # Autouse fixtures are in funcargs too; pass only what the test asks for
    kwargs = {name: pyfuncitem.funcargs[name] for name in pyfuncitem._fixtureinfo.argnames}

    loop = asyncio.new_event_loop()
    try:
        loop.run_until_complete(test_function(**kwargs))
    finally:
        loop.close()
    return True


class FakeCache:
    """In-memory stand-in for the Redis key/value calls."""

    def __init__(self) -> None:
        self.store: dict = {}

    async def get(self, key):
        return self.store.get(key)

    async def set(self, key, value, ttl=None):
        self.store[key] = value
        return True

    async def delete(self, key):
        return self.store.pop(key, None) is not None


@pytest.fixture(autouse=True)
def fake_cache(monkeypatch) -> FakeCache:
    cache = FakeCache()
    monkeypatch.setattr(cache_ops, "get_cached_value", cache.get)
    monkeypatch.setattr(cache_ops, "set_cached_value", cache.set)
    monkeypatch.setattr(cache_ops, "delete_cached_value", cache.delete)
    return cache


@pytest.fixture
def sqlite_db(monkeypatch):
    """Point the shared connection at a private in-memory SQLite database."""
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    monkeypatch.setattr(db_connection, "engine", engine)
    monkeypatch.setattr(db_connection, "AsyncSessionLocal", session_factory)
    return db_connection


@pytest.fixture
def client(sqlite_db):
    from fastapi.testclient import TestClient

    from src.catalog_api.catalog_app import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers(client) -> dict:
    from src.config import BOOTSTRAP_ADMIN_USERNAME, BOOTSTRAP_ADMIN_PASSWORD

    response = client.post(
        "/api/v1/auth/login",
        json={"username": BOOTSTRAP_ADMIN_USERNAME, "password": BOOTSTRAP_ADMIN_PASSWORD},
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}
