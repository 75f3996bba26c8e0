import pytest
from app.config.settings import MapSettings
from app.core.exceptions import ErrorCode, InvalidCoordinatesError
from app.services.map_data_service import MapDataService


def test_defaults(map_data_service):
    defaults = map_data_service.defaults()
    assert defaults.latitude == 51.0504
    assert defaults.longitude == 13.7373
    assert defaults.zoom == 13
    assert defaults.radius == 2000


def test_default_criteria_uses_default_zoom(map_data_service):
    criteria = map_data_service.default_criteria()
    assert criteria.latitude == 51.0504
    assert criteria.longitude == 13.7373
    assert criteria.radius == 3000


def test_criteria_radius_follows_zoom(map_data_service):
    criteria = map_data_service.search_criteria_for_view(48.137, 11.575, 10)
    assert (criteria.latitude, criteria.longitude, criteria.radius) == (48.137, 11.575, 20000)

    criteria = map_data_service.search_criteria_for_view(48.137, 11.575, 17)
    assert criteria.radius == 2000


def test_zero_coordinates_are_not_treated_as_missing(map_data_service):
    criteria = map_data_service.search_criteria_for_view(0.0, 0.0, 12)
    assert (criteria.latitude, criteria.longitude) == (0.0, 0.0)


@pytest.mark.parametrize("lat,lon", [(91, 0), (-90.5, 0), (0, 180.1), (0, -200)])
def test_out_of_range_center_rejected(map_data_service, lat, lon):
    with pytest.raises(InvalidCoordinatesError) as exc_info:
        map_data_service.search_criteria_for_view(lat, lon, 12)
    assert exc_info.value.status_code == 400
    assert exc_info.value.error_code == ErrorCode.INVALID_COORDINATES


def test_zoom_for_stored_radius(map_data_service):
    assert map_data_service.zoom_for_stored_radius(3000) == 13
    assert map_data_service.zoom_for_stored_radius(None) == 13


def test_stored_radius_is_not_validated(map_data_service):
    assert map_data_service.zoom_for_stored_radius(-500) == 15
    assert map_data_service.zoom_for_stored_radius(0) == 15
    assert map_data_service.zoom_for_stored_radius(float("-inf")) == 15


def test_custom_defaults(mapper):
    service = MapDataService(mapper, MapSettings(default_latitude=52.52, default_longitude=13.405, default_zoom=9))
    criteria = service.default_criteria()
    assert criteria.latitude == 52.52
    assert criteria.radius == 50000
    assert service.zoom_for_stored_radius(None) == 9
