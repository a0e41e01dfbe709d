# src/cacheprobe/core/health.py
"""Health check endpoint for the service.
Runs the full connect + PING + SET/GET chain against the cache and reports
troubleshooting hints when any step fails.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.cacheprobe.api.models.responses import HealthyResponse, UnhealthyResponse
from src.cacheprobe.core.dependencies import get_probe_service
from src.cacheprobe.domain.services.probe_service import ProbeService
from src.cacheprobe.utils.logger import logger

router = APIRouter()


@router.get(
    "/health",
    tags=["Health"],
    response_model=HealthyResponse,
    responses={500: {"model": UnhealthyResponse, "description": "Redis unreachable or misconfigured"}},
)
async def health_check(service: ProbeService = Depends(get_probe_service)):
    result = await service.health()
    logger.info("Health check executed", status=result.status)
    if isinstance(result, UnhealthyResponse):
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=result.model_dump(mode="json"),
        )
    return result
