# src/cacheprobe/api/models/responses.py
"""API response models using Pydantic."""

from typing import Dict, Literal, Optional

from pydantic import BaseModel, Field


class RedisConfigInfo(BaseModel):
    """Redis target as configured through the environment (password never echoed)"""

    host: str
    port: int
    tls: bool
    auth_enabled: bool


class ServiceInfo(BaseModel):
    service: str
    version: str
    endpoints: Dict[str, str]
    redis_config: RedisConfigInfo
    timestamp: str


class Troubleshooting(BaseModel):
    """Static checklist returned with every failed health probe"""

    check_vpc_connector: str = "Verify App Runner VPC Connector subnets"
    check_security_groups: str = "Verify security group rules allow port 6379"
    check_nacls: str = "Check Network ACL rules on connector subnets"
    check_redis_endpoint: str = "Verify Redis endpoint is reachable from VPC"


class HealthyResponse(BaseModel):
    status: Literal["healthy"] = "healthy"
    redis: Literal["ok"] = "ok"
    redis_host: str
    redis_port: int
    timestamp: str
    ping_response: str
    test_value: Optional[str] = None


class UnhealthyResponse(BaseModel):
    status: Literal["unhealthy"] = "unhealthy"
    redis: Literal["error"] = "error"
    redis_host: str
    redis_port: int
    error: str
    error_code: Optional[str] = None
    error_type: str
    timestamp: str
    troubleshooting: Troubleshooting = Field(default_factory=Troubleshooting)


class SetResponse(BaseModel):
    success: Literal[True] = True
    operation: Literal["set"] = "set"
    key: str
    value: str
    timestamp: str


class GetResponse(BaseModel):
    success: Literal[True] = True
    operation: Literal["get"] = "get"
    key: str
    value: Optional[str] = None
    found: bool
    timestamp: str


class OperationErrorResponse(BaseModel):
    success: Literal[False] = False
    operation: str
    error: str
    error_code: Optional[str] = None
    error_type: str
    timestamp: str


class MissingParamsResponse(BaseModel):
    error: str = Field(..., examples=["Key query parameter is required"])
    example: str = Field(..., examples=["/get?key=mykey"])
