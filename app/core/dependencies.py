"""
Dependency injection setup for FastAPI.
Provides dependency providers for the map services built at startup.
"""

from fastapi import Depends, Request, HTTPException
from typing import Optional
import logging

from app.config.settings import MapSettings
from app.services.map_data_service import MapDataService
from app.services.zoom_radius import ZoomRadiusMapper, create_zoom_radius_mapper


logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Holds the services shared by every request.

    Services are built once by ``initialize_services`` and only read after
    that, so request handlers can use them concurrently.
    """

    def __init__(self):
        self._zoom_radius_mapper: Optional[ZoomRadiusMapper] = None
        self._map_data_service: Optional[MapDataService] = None
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    def initialize_services(self, map_settings: MapSettings) -> None:
        """
        Build the zoom/radius mapper and the map data service.

        Raises:
            InvalidZoomTableError: If the configured zoom/radius table is inconsistent
        """
        if self._initialized:
            return

        logger.info("Initializing service container")
        self._zoom_radius_mapper = create_zoom_radius_mapper(map_settings.zoom_radius_table)
        self._map_data_service = MapDataService(self._zoom_radius_mapper, map_settings)
        self._initialized = True
        logger.info("Service container initialized")

    def cleanup_services(self) -> None:
        logger.info("Cleaning up service container")
        self._map_data_service = None
        self._zoom_radius_mapper = None
        self._initialized = False

    def get_zoom_radius_mapper(self) -> ZoomRadiusMapper:
        """Get zoom/radius mapper instance."""
        if not self._initialized or self._zoom_radius_mapper is None:
            raise RuntimeError("Service container not initialized")
        return self._zoom_radius_mapper

    def get_map_data_service(self) -> MapDataService:
        """Get map data service instance."""
        if not self._initialized or self._map_data_service is None:
            raise RuntimeError("Service container not initialized")
        return self._map_data_service


def get_service_container(request: Request) -> ServiceContainer:
    """
    Get the service container from application state.

    Raises:
        HTTPException: If service container is not available
    """
    if not hasattr(request.app.state, 'service_container'):
        logger.error("Service container not initialized")
        raise HTTPException(
            status_code=500,
            detail="Service container not available"
        )

    return request.app.state.service_container


def get_zoom_radius_mapper(
    container: ServiceContainer = Depends(get_service_container)
) -> ZoomRadiusMapper:
    try:
        return container.get_zoom_radius_mapper()
    except RuntimeError as e:
        logger.error(f"Zoom/radius mapper not available: {e}")
        raise HTTPException(
            status_code=500,
            detail="Zoom/radius mapper not available"
        )


def get_map_data_service(
    container: ServiceContainer = Depends(get_service_container)
) -> MapDataService:
    try:
        return container.get_map_data_service()
    except RuntimeError as e:
        logger.error(f"Map data service not available: {e}")
        raise HTTPException(
            status_code=500,
            detail="Map data service not available"
        )
