"""
Core building blocks for the POI map service: exceptions, validation,
logging, error handling and dependency providers.
"""

from .exceptions import ErrorCode, PoiMapException, InvalidCoordinatesError, InvalidZoomTableError

__all__ = [
    "ErrorCode",
    "PoiMapException",
    "InvalidCoordinatesError",
    "InvalidZoomTableError",
]
