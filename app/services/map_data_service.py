"""Map view service: turns map state into POI search criteria."""
import logging
from typing import Optional

from app.config.settings import MapSettings
from app.core.exceptions import InvalidCoordinatesError
from app.core.validation import ValidationError, validate_latitude, validate_longitude
from app.schemas.map import MapDefaults, SearchCriteria
from app.services.zoom_radius import ZoomRadiusMapper

logger = logging.getLogger(__name__)


class MapDataService:
    def __init__(self, mapper: ZoomRadiusMapper, map_settings: MapSettings):
        self.mapper = mapper
        self.map_settings = map_settings

    def defaults(self) -> MapDefaults:
        return MapDefaults(
            latitude=self.map_settings.default_latitude,
            longitude=self.map_settings.default_longitude,
            zoom=self.map_settings.default_zoom,
            radius=self.map_settings.default_radius,
        )

    def default_criteria(self) -> SearchCriteria:
        """Criteria for the initial map view (default center and zoom)."""
        return self.search_criteria_for_view()

    def search_criteria_for_view(
        self,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
        zoom: Optional[float] = None,
    ) -> SearchCriteria:
        """
        Build the POI search criteria for the current map view.

        Args:
            latitude: Map center latitude, default center when omitted
            longitude: Map center longitude, default center when omitted
            zoom: Current zoom level, default zoom when omitted

        Returns:
            SearchCriteria whose radius follows the zoom bands

        Raises:
            InvalidCoordinatesError: If the center is out of range
        """
        lat = self.map_settings.default_latitude if latitude is None else latitude
        lon = self.map_settings.default_longitude if longitude is None else longitude
        effective_zoom = self.map_settings.default_zoom if zoom is None else zoom

        try:
            validate_latitude(lat)
            validate_longitude(lon)
        except ValidationError as e:
            raise InvalidCoordinatesError(str(e), details={"latitude": lat, "longitude": lon}) from e

        radius = self.mapper.radius_for_zoom(effective_zoom)
        logger.debug(
            f"Search criteria for zoom {effective_zoom}: radius {radius}m",
            extra={"latitude": lat, "longitude": lon, "zoom": effective_zoom, "radius": radius}
        )
        return SearchCriteria(latitude=lat, longitude=lon, radius=radius)

    def zoom_for_stored_radius(self, radius: Optional[float]) -> int:
        """Zoom level to restore for a previously stored search radius."""
        if radius is None:
            return self.map_settings.default_zoom
        return self.mapper.zoom_for_radius(radius)
