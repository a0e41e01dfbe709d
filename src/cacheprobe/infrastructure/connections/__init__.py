# src/cacheprobe/infrastructure/connections/__init__.py
"""Cache connections."""

from .base import AsyncCacheConnection
from .redis_connection import RedisConnection
from .errors import describe_error, error_code

__all__ = [
    "AsyncCacheConnection",
    "RedisConnection",
    "describe_error",
    "error_code",
]
