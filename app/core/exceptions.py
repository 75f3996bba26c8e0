"""
Custom exceptions for the POI map service.

The zoom/radius lookups never raise; these cover request input and
startup configuration only.
"""

from typing import Optional, Dict, Any
from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes for the application."""

    # Request input errors
    INVALID_COORDINATES = "INVALID_COORDINATES"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"

    # Configuration errors
    INVALID_ZOOM_TABLE = "INVALID_ZOOM_TABLE"

    # Generic errors
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class PoiMapException(Exception):
    """Base exception for the POI map service."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code


class InvalidCoordinatesError(PoiMapException):
    """Raised when a map center lies outside valid latitude/longitude ranges."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.INVALID_COORDINATES,
            details=details,
            status_code=400
        )


class InvalidZoomTableError(PoiMapException):
    """Raised at startup when the configured zoom/radius table is inconsistent."""

    def __init__(self, message: str, table: Optional[Dict[int, int]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.INVALID_ZOOM_TABLE,
            details={"table": table} if table is not None else None,
            status_code=500
        )
