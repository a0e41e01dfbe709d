# src/cacheprobe/core/dependencies.py
"""Dependency injection container for the project.
Settings, the cache connection and the probe service are registered here.
`create_app()` keeps one container on `app.state`; handlers reach it through
the FastAPI dependencies below instead of a module-level client.
"""

from dependency_injector import containers, providers
from fastapi import Request

from src.cacheprobe.config.settings import get_settings
from src.cacheprobe.domain.services.probe_service import ProbeService
from src.cacheprobe.infrastructure.connections.redis_connection import RedisConnection


class Container(containers.DeclarativeContainer):
    config = providers.Singleton(get_settings)

    # Connections (opened lazily on first use)
    redis = providers.Singleton(
        RedisConnection,
        config=providers.Callable(lambda cfg: cfg.redis.model_dump(), config),
    )

    # Services
    probe_service = providers.Singleton(
        ProbeService,
        connection=redis,
        redis_config=providers.Callable(lambda cfg: cfg.redis, config),
    )


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_probe_service(request: Request) -> ProbeService:
    return get_container(request).probe_service()
