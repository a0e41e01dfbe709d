# src/cacheprobe/api/models/__init__.py
"""API response models."""

from .responses import (
    GetResponse,
    HealthyResponse,
    MissingParamsResponse,
    OperationErrorResponse,
    RedisConfigInfo,
    ServiceInfo,
    SetResponse,
    Troubleshooting,
    UnhealthyResponse,
)

__all__ = [
    "GetResponse",
    "HealthyResponse",
    "MissingParamsResponse",
    "OperationErrorResponse",
    "RedisConfigInfo",
    "ServiceInfo",
    "SetResponse",
    "Troubleshooting",
    "UnhealthyResponse",
]
