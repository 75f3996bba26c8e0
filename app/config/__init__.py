"""
Configuration package for the POI Map Service.
"""

from .settings import (
    Settings,
    Environment,
    LogLevel,
    LogFormat,
    MapSettings,
    SecuritySettings,
    DEFAULT_ZOOM_RADIUS_TABLE,
    settings,
    get_settings,
    reload_settings,
)

__all__ = [
    "Settings",
    "Environment",
    "LogLevel",
    "LogFormat",
    "MapSettings",
    "SecuritySettings",
    "DEFAULT_ZOOM_RADIUS_TABLE",
    "settings",
    "get_settings",
    "reload_settings",
]
