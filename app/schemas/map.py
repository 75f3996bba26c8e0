from pydantic import BaseModel


class ZoomRadiusRead(BaseModel):
    zoom: float
    radius: int


class RadiusZoomRead(BaseModel):
    radius: float
    zoom: int


class ZoomRadiusEntryRead(BaseModel):
    zoom: int
    radius: int


class ZoomTableResponse(BaseModel):
    entries: list[ZoomRadiusEntryRead]


class MapDefaults(BaseModel):
    latitude: float
    longitude: float
    zoom: int
    radius: int


class SearchCriteria(BaseModel):
    latitude: float
    longitude: float
    radius: int
