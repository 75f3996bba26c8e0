# Business logic services

from .zoom_radius import (
    ZoomRadiusEntry,
    ZoomRadiusTable,
    ZoomRadiusMapper,
    create_zoom_radius_mapper,
)
from .map_data_service import MapDataService
from .poi_categories import (
    POI_CATEGORIES,
    DEFAULT_POI_CATEGORY,
    is_valid_category,
    sanitize_category,
    icon_class_for,
)

__all__ = [
    "ZoomRadiusEntry",
    "ZoomRadiusTable",
    "ZoomRadiusMapper",
    "create_zoom_radius_mapper",
    "MapDataService",
    "POI_CATEGORIES",
    "DEFAULT_POI_CATEGORY",
    "is_valid_category",
    "sanitize_category",
    "icon_class_for",
]
