# src/cacheprobe/api/routes/probe.py
"""Cache probe API routes.

Provides GET endpoints that write and read single keys so connectivity can
be checked from a browser or curl:
- /set?key=<key>&value=<value>
- /get?key=<key>
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from src.cacheprobe.api.models.responses import (
    GetResponse,
    MissingParamsResponse,
    OperationErrorResponse,
    SetResponse,
)
from src.cacheprobe.core.dependencies import get_probe_service
from src.cacheprobe.domain.services.probe_service import ProbeService
from src.cacheprobe.utils.logger import logger

router = APIRouter(tags=["Probe"])


def _bad_request(error: str, example: str) -> JSONResponse:
    body = MissingParamsResponse(error=error, example=example)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


def _server_error(result: OperationErrorResponse) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=result.model_dump(mode="json"),
    )


@router.get(
    "/set",
    summary="Write a key",
    response_model=SetResponse,
    responses={
        400: {"model": MissingParamsResponse, "description": "key or value missing"},
        500: {"model": OperationErrorResponse, "description": "Redis operation failed"},
    },
)
async def set_key(
    key: Optional[str] = Query(None, description="Key to write"),
    value: Optional[str] = Query(None, description="Value to store"),
    service: ProbeService = Depends(get_probe_service),
):
    # Empty strings count as missing
    if not key or not value:
        return _bad_request(
            "Both key and value query parameters are required",
            "/set?key=mykey&value=myvalue",
        )

    result = await service.set_value(key, value)
    if isinstance(result, OperationErrorResponse):
        return _server_error(result)

    logger.info("API: set completed", key=key)
    return result


@router.get(
    "/get",
    summary="Read a key",
    response_model=GetResponse,
    responses={
        400: {"model": MissingParamsResponse, "description": "key missing"},
        500: {"model": OperationErrorResponse, "description": "Redis operation failed"},
    },
)
async def get_key(
    key: Optional[str] = Query(None, description="Key to read"),
    service: ProbeService = Depends(get_probe_service),
):
    if not key:
        return _bad_request("Key query parameter is required", "/get?key=mykey")

    result = await service.get_value(key)
    if isinstance(result, OperationErrorResponse):
        return _server_error(result)

    logger.info("API: get completed", key=key, found=result.found)
    return result
