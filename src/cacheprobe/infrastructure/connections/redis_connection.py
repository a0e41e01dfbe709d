# src/cacheprobe/infrastructure/connections/redis_connection.py
"""Async Redis connection using redis.asyncio (wrapped via AsyncCacheConnection)."""

import socket
from typing import Awaitable, Callable, Optional, TypeVar

import redis.asyncio as aioredis
from redis.asyncio.retry import Retry
from redis.backoff import ExponentialBackoff
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import TimeoutError as RedisTimeoutError

from src.cacheprobe.utils.logger import logger
from .base import AsyncCacheConnection

T = TypeVar("T")


class RedisConnection(AsyncCacheConnection):
    def _build_retry(self) -> Retry:
        supported_errors = [RedisConnectionError]
        if self.config.get("retry_on_timeout", True):
            supported_errors += [RedisTimeoutError, socket.timeout]
        return Retry(
            ExponentialBackoff(cap=1.0, base=0.1),
            self.config.get("max_retries", 1),
            supported_errors=tuple(supported_errors),
        )

    def _build_client(self) -> aioredis.Redis:
        return aioredis.Redis(
            host=self.config.get("host", "localhost"),
            port=self.config.get("port", 6379),
            db=self.config.get("db", 0),
            password=self.config.get("password") or None,
            ssl=self.config.get("tls", False),
            socket_connect_timeout=self.config.get("connect_timeout", 5.0),
            socket_timeout=self.config.get("command_timeout", 5.0),
            socket_keepalive=self.config.get("socket_keepalive", True),
            retry=self._build_retry(),
            decode_responses=True,
        )

    async def _open(self) -> aioredis.Redis:
        host = self.config.get("host", "localhost")
        port = self.config.get("port", 6379)
        logger.info(
            "Attempting Redis connection",
            host=host,
            port=port,
            tls=self.config.get("tls", False),
            has_password=bool(self.config.get("password")),
        )
        client = self._build_client()
        try:
            # redis-py connects on first command; PING forces it
            await client.ping()
        except Exception as e:
            logger.error("Redis connection error", host=host, port=port, error=str(e))
            await client.aclose()
            raise
        return client

    async def _close_client(self, client: aioredis.Redis) -> None:
        await client.aclose()

    async def _execute(self, op: Callable[[aioredis.Redis], Awaitable[T]]) -> T:
        client = await self.ensure_connected()
        try:
            return await op(client)
        except (RedisConnectionError, RedisTimeoutError) as e:
            # Drop only the handle this command ran on; it may already be replaced
            logger.warning("Redis client error, closing connection", error=str(e))
            await self.close(expected=client)
            raise

    async def ping(self) -> str:
        pong = await self._execute(lambda client: client.ping())
        # redis-py maps a PONG reply to True
        return "PONG" if pong is True else str(pong)

    async def get(self, key: str) -> Optional[str]:
        return await self._execute(lambda client: client.get(key))

    async def set(self, key: str, value: str) -> None:
        await self._execute(lambda client: client.set(key, value))
