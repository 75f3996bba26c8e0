import pytest
from fastapi.testclient import TestClient

from app.config.settings import DEFAULT_ZOOM_RADIUS_TABLE, MapSettings, Settings
from app.main import create_app
from app.services.map_data_service import MapDataService
from app.services.zoom_radius import ZoomRadiusMapper, ZoomRadiusTable


@pytest.fixture
def zoom_table():
    return ZoomRadiusTable.from_mapping(DEFAULT_ZOOM_RADIUS_TABLE)


@pytest.fixture
def mapper(zoom_table):
    return ZoomRadiusMapper(zoom_table)


@pytest.fixture
def map_settings():
    return MapSettings()


@pytest.fixture
def map_data_service(mapper, map_settings):
    return MapDataService(mapper, map_settings)


@pytest.fixture
def client():
    app = create_app(Settings())
    with TestClient(app) as test_client:
        yield test_client
