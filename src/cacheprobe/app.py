# src/cacheprobe/app.py
"""
Main application entry point.

A small diagnostic service that checks whether a Redis-compatible endpoint
is reachable from where it runs:

- /        -> Service information and Redis configuration
- /health  -> Redis connectivity test (connect, PING, SET/GET round trip)
- /set     -> Write a key
- /get     -> Read a key
- /docs    -> OpenAPI documentation (Swagger UI)

The Redis connection is opened lazily by the first request that needs it
and closed by the lifespan on shutdown.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from src.cacheprobe.api.models.responses import ServiceInfo
from src.cacheprobe.api.routes import probe_router
from src.cacheprobe.core.dependencies import Container, get_probe_service
from src.cacheprobe.core.health import router as health_router
from src.cacheprobe.domain.services.probe_service import (
    ENDPOINTS,
    SERVICE_NAME,
    SERVICE_VERSION,
    ProbeService,
)
from src.cacheprobe.utils.logger import logger


def create_app(container: Optional[Container] = None):
    """Create the probe application

    Args:
        container: DI container to serve from; a fresh one when omitted

    Returns:
        FastAPI: Application instance
    """
    container = container or Container()
    settings = container.config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan - releases the Redis connection on every exit path."""
        logger.info("🚀 Starting application")
        try:
            yield
        finally:
            logger.info("🛑 Shutting down application")
            await container.redis().close()

    app = FastAPI(
        title=SERVICE_NAME,
        description="Redis connectivity probe for troubleshooting network paths to a managed cache.",
        version=SERVICE_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Health", "description": "Redis connectivity test"},
            {"name": "Probe", "description": "Single key reads and writes"},
            {"name": "Root", "description": "Service information"},
        ],
    )
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.cors_origins.split(",")],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info("Request", method=request.method, path=request.url.path)
        return await call_next(request)

    app.include_router(health_router, tags=["Health"])
    app.include_router(probe_router, tags=["Probe"])

    @app.get("/", tags=["Root"], response_model=ServiceInfo)
    async def root(service: ProbeService = Depends(get_probe_service)):
        """Get service information and the configured Redis target"""
        return service.info()

    redis_cfg = settings.redis
    logger.info("=" * 70)
    logger.info(f"🚀 {SERVICE_NAME} initialized")
    logger.info("=" * 70)
    logger.info(
        "📊 Redis configuration",
        host=redis_cfg.host,
        port=redis_cfg.port,
        tls=redis_cfg.tls,
        auth="Enabled" if redis_cfg.auth_enabled else "Disabled",
    )
    logger.info("🔍 Available endpoints", **ENDPOINTS)
    logger.info("⏳ Ready to troubleshoot! Visit /health to test Redis connectivity.")
    logger.info("=" * 70)

    return app


# Create the app instance
app = create_app()
