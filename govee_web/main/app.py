"""
Main Application - Main Layer

This module builds the FastAPI application: it loads settings,
initializes the container, and includes the API routers. Use
``create_app`` as a uvicorn factory.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from govee_web.main.config import AppSettings, get_settings
from govee_web.main.container import app_lifespan, init_container
from govee_web.presentation.controllers import devices_router, system_router
from govee_web.presentation.middleware import RequestLoggingMiddleware
from govee_web.shared import configure_logging, get_logger, update_logging_from_settings

# Basic logging first so configuration loading is logged too
configure_logging()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan management.

    Delegates resource cleanup to the container's ``app_lifespan``.
    """
    logger.info("Application starting up")

    async with app_lifespan() as container:
        app.state.container = container
        yield

    logger.info("Application shutting down")


def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Preloaded settings; read from the environment when omitted

    Returns:
        FastAPI: The configured FastAPI application
    """
    settings = settings or get_settings()
    update_logging_from_settings(settings)

    init_container(settings)

    app = FastAPI(
        title=settings.app.title,
        description=settings.app.description,
        version=settings.app.version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(devices_router)
    app.include_router(system_router)

    return app
