"""
Input validation utilities for map requests
"""


class ValidationError(Exception):
    """Custom validation error"""
    pass


def validate_latitude(lat: float) -> float:
    """
    Validate latitude coordinate

    Args:
        lat: Latitude value

    Returns:
        Validated latitude

    Raises:
        ValidationError: If latitude is out of range
    """
    if not -90.0 <= lat <= 90.0:
        raise ValidationError(f"Latitude {lat} out of range (must be -90 to 90)")

    return lat


def validate_longitude(lon: float) -> float:
    """
    Validate longitude coordinate

    Args:
        lon: Longitude value

    Returns:
        Validated longitude

    Raises:
        ValidationError: If longitude is out of range
    """
    if not -180.0 <= lon <= 180.0:
        raise ValidationError(f"Longitude {lon} out of range (must be -180 to 180)")

    return lon

