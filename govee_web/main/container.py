"""
Dependency container injection module - Main Layer

This module implements the dependency injection container that builds
the process-wide Redis client and Govee gateway once and shares them
across all requests.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from govee_web.application.use_cases.device_controller import DeviceController
from govee_web.application.use_cases.health_use_cases import GetHealthStatusUseCase
from govee_web.infrastructure.gateways.govee_gateway import GoveeGateway
from govee_web.infrastructure.repositories.redis_device_repository import (
    RedisDeviceRepository,
    create_redis_client,
)
from govee_web.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..presentation"])

    # Settings
    config = providers.Configuration()

    # Infrastructure
    redis_client = providers.Singleton(
        create_redis_client,
        redis_uri=config.cache.redis_uri,
        socket_timeout=config.cache.redis_socket_timeout_seconds,
    )

    govee_gateway = providers.Singleton(
        GoveeGateway,
        api_key=config.govee.api_key,
        base_url=config.govee.remote_api_url,
        timeout=config.govee.request_timeout_seconds,
    )

    device_repository = providers.Singleton(
        RedisDeviceRepository,
        redis_client=redis_client,
        govee_gateway=govee_gateway,
        ttl_seconds=config.cache.redis_ttl_seconds,
    )

    # Application
    device_controller = providers.Singleton(
        DeviceController,
        device_repository=device_repository,
        govee_gateway=govee_gateway,
    )

    get_health_status_use_case = providers.Factory(
        GetHealthStatusUseCase,
        device_controller=device_controller,
        version=config.app.version,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Lifecycle management for the shared clients.

    Nothing is connected eagerly; Redis and httpx open connections on first
    use. On shutdown both connection pools are released.
    """
    container = get_container()

    try:
        logger.info("container.resources.initialized")
        yield container

    finally:
        logger.info("container.redis.close")
        await container.redis_client().aclose()

        logger.info("container.govee.close")
        await container.govee_gateway().close()

        logger.info("container.resources.shutdown")
