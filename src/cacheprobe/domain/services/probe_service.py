# src/cacheprobe/domain/services/probe_service.py
"""ProbeService – runs diagnostic operations against the configured cache.
Every cache error is caught here and turned into a structured result, so
handlers only decide the HTTP status.
"""

from datetime import datetime, timezone
from typing import Union

from src.cacheprobe.api.models.responses import (
    GetResponse,
    HealthyResponse,
    OperationErrorResponse,
    RedisConfigInfo,
    ServiceInfo,
    SetResponse,
    UnhealthyResponse,
)
from src.cacheprobe.config.settings import RedisConfig
from src.cacheprobe.infrastructure.connections.base import AsyncCacheConnection
from src.cacheprobe.infrastructure.connections.errors import describe_error
from src.cacheprobe.utils.logger import logger

SERVICE_NAME = "Cache Probe Service"
SERVICE_VERSION = "1.0.0"
HEALTH_CHECK_KEY = "health_check"

ENDPOINTS = {
    "health": "/health",
    "info": "/",
    "set": "/set?key=<key>&value=<value>",
    "get": "/get?key=<key>",
}


def utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


class ProbeService:
    def __init__(self, connection: AsyncCacheConnection, redis_config: RedisConfig):
        self.connection = connection
        self.redis_config = redis_config
        self.logger = logger

    def info(self) -> ServiceInfo:
        """Static metadata; never touches the cache."""
        return ServiceInfo(
            service=SERVICE_NAME,
            version=SERVICE_VERSION,
            endpoints=dict(ENDPOINTS),
            redis_config=RedisConfigInfo(
                host=self.redis_config.host,
                port=self.redis_config.port,
                tls=self.redis_config.tls,
                auth_enabled=self.redis_config.auth_enabled,
            ),
            timestamp=utc_now(),
        )

    async def health(self) -> Union[HealthyResponse, UnhealthyResponse]:
        """Connect, PING, then write and read back the health check key.

        Any failure along the chain yields an unhealthy result.
        """
        host, port = self.redis_config.host, self.redis_config.port
        try:
            pong = await self.connection.ping()
            self.logger.info("Redis PING response", response=pong)

            await self.connection.set(HEALTH_CHECK_KEY, utc_now())
            test_value = await self.connection.get(HEALTH_CHECK_KEY)
        except Exception as e:
            self.logger.error("Health check failed", host=host, port=port, exc_info=True)
            return UnhealthyResponse(
                redis_host=host,
                redis_port=port,
                timestamp=utc_now(),
                **describe_error(e),
            )

        return HealthyResponse(
            redis_host=host,
            redis_port=port,
            timestamp=utc_now(),
            ping_response=pong,
            test_value=test_value,
        )

    async def set_value(self, key: str, value: str) -> Union[SetResponse, OperationErrorResponse]:
        try:
            await self.connection.set(key, value)
        except Exception as e:
            self.logger.error("Set operation failed", key=key, error=str(e))
            return OperationErrorResponse(operation="set", timestamp=utc_now(), **describe_error(e))
        return SetResponse(key=key, value=value, timestamp=utc_now())

    async def get_value(self, key: str) -> Union[GetResponse, OperationErrorResponse]:
        try:
            value = await self.connection.get(key)
        except Exception as e:
            self.logger.error("Get operation failed", key=key, error=str(e))
            return OperationErrorResponse(operation="get", timestamp=utc_now(), **describe_error(e))
        return GetResponse(key=key, value=value, found=value is not None, timestamp=utc_now())
