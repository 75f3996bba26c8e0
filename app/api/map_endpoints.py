"""Map endpoints: zoom/radius lookups and search criteria for a map view."""
from fastapi import APIRouter, Depends, Query
from typing import Optional

from app.core.dependencies import get_map_data_service, get_zoom_radius_mapper
from app.schemas.base import Envelope
from app.schemas.map import (
    MapDefaults,
    RadiusZoomRead,
    SearchCriteria,
    ZoomRadiusEntryRead,
    ZoomRadiusRead,
    ZoomTableResponse,
)
from app.services.map_data_service import MapDataService
from app.services.zoom_radius import ZoomRadiusMapper

router = APIRouter(prefix="/map", tags=["map"])


@router.get("/radius", response_model=Envelope[ZoomRadiusRead])
async def get_radius_for_zoom(
    zoom: float = Query(..., description="Map zoom level, may be fractional"),
    mapper: ZoomRadiusMapper = Depends(get_zoom_radius_mapper),
):
    """Search radius (meters) to query POIs with at the given zoom level."""
    radius = mapper.radius_for_zoom(zoom)
    return Envelope(status="ok", data=ZoomRadiusRead(zoom=zoom, radius=radius))


@router.get("/zoom", response_model=Envelope[RadiusZoomRead])
async def get_zoom_for_radius(
    radius: float = Query(..., description="Search radius in meters"),
    mapper: ZoomRadiusMapper = Depends(get_zoom_radius_mapper),
):
    """Zoom level whose tabulated radius is closest to the given radius."""
    zoom = mapper.zoom_for_radius(radius)
    return Envelope(status="ok", data=RadiusZoomRead(radius=radius, zoom=zoom))


@router.get("/zoom-table", response_model=Envelope[ZoomTableResponse])
async def get_zoom_table(mapper: ZoomRadiusMapper = Depends(get_zoom_radius_mapper)):
    entries = [ZoomRadiusEntryRead(zoom=e.zoom, radius=e.radius) for e in mapper.table]
    return Envelope(status="ok", data=ZoomTableResponse(entries=entries))


@router.get("/defaults", response_model=Envelope[MapDefaults])
async def get_map_defaults(service: MapDataService = Depends(get_map_data_service)):
    return Envelope(status="ok", data=service.defaults())


@router.get("/search-criteria", response_model=Envelope[SearchCriteria])
async def get_search_criteria(
    latitude: Optional[float] = Query(None),
    longitude: Optional[float] = Query(None),
    zoom: Optional[float] = Query(None),
    # Legacy parameter names used by the map frontends
    lat: Optional[float] = Query(None),
    lon: Optional[float] = Query(None),
    lng: Optional[float] = Query(None),
    service: MapDataService = Depends(get_map_data_service),
):
    """
    POI search criteria for the current map view.

    Missing center or zoom fall back to the configured map defaults.
    """
    final_lat = latitude if latitude is not None else lat
    final_lon = longitude if longitude is not None else (lon if lon is not None else lng)
    criteria = service.search_criteria_for_view(final_lat, final_lon, zoom)
    return Envelope(status="ok", data=criteria)
