"""
FastAPI application setup with dependency injection.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
from contextlib import asynccontextmanager

from app.config.loader import load_config_for_environment
from app.config.settings import Settings, get_settings
from app.core.dependencies import ServiceContainer
from app.core.error_handlers import setup_error_handlers
from app.core.logging import configure_logging
from app.middleware import RequestContextMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan management.
    Services are built in ``create_app``; a restarted app rebuilds them
    here after a previous shutdown released them.
    """
    settings = app.state.settings
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    container = app.state.service_container
    if not container.initialized:
        container.initialize_services(settings.map)
    try:
        yield
    finally:
        logger.info("Shutting down application")
        app.state.service_container.cleanup_services()
        logger.info("Application shutdown complete")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        settings: Settings to use, the global settings when omitted

    Returns:
        FastAPI: Configured application instance

    Raises:
        InvalidZoomTableError: If the configured zoom/radius table is inconsistent
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level.value, settings.log_format.value, settings.log_text_format)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan
    )
    app.state.settings = settings

    # The lookup table is built once per process and shared read-only
    service_container = ServiceContainer()
    service_container.initialize_services(settings.map)
    app.state.service_container = service_container

    app.add_middleware(
        CORSMiddleware,
        **settings.get_cors_config()
    )
    app.add_middleware(RequestContextMiddleware)

    setup_error_handlers(app)

    from app.api import map_router, category_router
    app.include_router(map_router)
    app.include_router(category_router)

    @app.get("/")
    async def root():
        """Root endpoint for basic health check."""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.app_version,
            "status": "running"
        }

    @app.get("/health")
    async def health_check():
        from app.core.error_handlers import error_handler

        container = app.state.service_container
        table_size = len(container.get_zoom_radius_mapper().table) if container.initialized else 0
        return {
            "status": "healthy" if container.initialized else "unhealthy",
            "environment": settings.environment.value,
            "zoom_table_entries": table_size,
            "errors": error_handler.get_error_statistics(),
        }

    return app


# Create application instance for the environment named by ENVIRONMENT
app = create_app(load_config_for_environment())
