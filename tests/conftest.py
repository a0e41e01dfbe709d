import asyncio
from typing import Dict, Optional

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from src.cacheprobe.app import create_app
from src.cacheprobe.core.dependencies import Container
from src.cacheprobe.infrastructure.connections.base import AsyncCacheConnection

REDIS_ENV = (
    "REDIS_HOST",
    "REDIS_PORT",
    "REDIS_DB",
    "REDIS_TLS",
    "REDIS_PASSWORD",
    "REDIS_CONNECT_TIMEOUT",
    "REDIS_COMMAND_TIMEOUT",
    "REDIS_SOCKET_KEEPALIVE",
    "REDIS_RETRY_ON_TIMEOUT",
    "REDIS_MAX_RETRIES",
)


class FakeCacheConnection(AsyncCacheConnection):
    """Dict-backed stand-in for a Redis server."""

    def __init__(self, fail: Optional[Exception] = None, fail_on: Optional[Dict[str, Exception]] = None):
        super().__init__({"host": "fake-redis", "port": 6379})
        self.store: Dict[str, str] = {}
        self.fail = fail
        # Per-command failures raised after the connection is open
        self.fail_on = fail_on or {}
        self.open_count = 0

    async def _open(self):
        await asyncio.sleep(0)
        if self.fail is not None:
            raise self.fail
        self.open_count += 1
        return self.store

    async def _close_client(self, client) -> None:
        pass

    def _maybe_fail(self, command: str) -> None:
        if command in self.fail_on:
            raise self.fail_on[command]

    async def ping(self) -> str:
        await self.ensure_connected()
        self._maybe_fail("ping")
        return "PONG"

    async def get(self, key: str) -> Optional[str]:
        store = await self.ensure_connected()
        self._maybe_fail("get")
        return store.get(key)

    async def set(self, key: str, value: str) -> None:
        store = await self.ensure_connected()
        self._maybe_fail("set")
        store[key] = value


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in REDIS_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("REDIS_HOST", "cache.internal")
    monkeypatch.setenv("REDIS_PORT", "6379")


@pytest.fixture
def fake_cache():
    return FakeCacheConnection()


def _client_for(connection: AsyncCacheConnection):
    container = Container()
    container.redis.override(providers.Object(connection))
    return TestClient(create_app(container))


@pytest.fixture
def client(fake_cache):
    with _client_for(fake_cache) as c:
        yield c


@pytest.fixture
def make_client():
    """Build a client around an arbitrary connection (lifespan not entered)."""
    return _client_for
