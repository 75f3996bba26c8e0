"""
Edge case tests for coordinate validation.
"""
import pytest
from app.core.validation import validate_latitude, validate_longitude, ValidationError


class TestLatitudeValidation:

    def test_bounds_inclusive(self):
        assert validate_latitude(90.0) == 90.0
        assert validate_latitude(-90.0) == -90.0
        assert validate_latitude(0) == 0

    def test_out_of_range(self):
        with pytest.raises(ValidationError, match="out of range"):
            validate_latitude(90.0001)
        with pytest.raises(ValidationError, match="out of range"):
            validate_latitude(-91)


class TestLongitudeValidation:

    def test_bounds_inclusive(self):
        assert validate_longitude(180.0) == 180.0
        assert validate_longitude(-180.0) == -180.0

    def test_out_of_range(self):
        with pytest.raises(ValidationError, match="out of range"):
            validate_longitude(180.5)

    def test_nan_rejected(self):
        with pytest.raises(ValidationError):
            validate_longitude(float("nan"))
