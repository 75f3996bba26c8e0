"""
Configuration management system using Pydantic Settings.
Supports environment-based configuration for different deployment environments.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode
from typing import Annotated, Dict, Any, List
from enum import Enum


class Environment(str, Enum):
    """Supported deployment environments"""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class LogFormat(str, Enum):
    """Log output formats"""
    JSON = "json"
    TEXT = "text"


class LogLevel(str, Enum):
    """Supported log levels"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


DEFAULT_ZOOM_RADIUS_TABLE: Dict[int, int] = {
    9: 50000,
    10: 30000,
    11: 20000,
    12: 10000,
    13: 3000,
    14: 2000,
    15: 1000,
}


class MapSettings(BaseSettings):
    """Map view defaults and the zoom/radius lookup table"""

    # Dresden city center
    default_latitude: float = Field(default=51.0504, ge=-90.0, le=90.0)
    default_longitude: float = Field(default=13.7373, ge=-180.0, le=180.0)
    default_zoom: int = Field(default=13, ge=0, le=22)
    default_radius: int = Field(default=2000, ge=1, description="Search radius in meters")
    zoom_radius_table: Dict[int, int] = Field(
        default_factory=lambda: dict(DEFAULT_ZOOM_RADIUS_TABLE),
        description="Zoom level -> search radius (meters), JSON when set from env"
    )

    model_config = {
        "env_prefix": "MAP_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


class SecuritySettings(BaseSettings):
    """CORS configuration"""

    cors_origins: Annotated[List[str], NoDecode] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = Field(default=True)
    cors_allow_methods: List[str] = Field(
        default_factory=lambda: ["GET"]
    )
    cors_allow_headers: List[str] = Field(default_factory=lambda: ["*"])

    @field_validator('cors_origins', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from environment variable or list"""
        if isinstance(v, str):
            origin_list = v.split(",")
            return [origin.strip() for origin in origin_list if origin.strip()]
        return v or ["*"]

    model_config = {
        "env_prefix": "SECURITY_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


class Settings(BaseSettings):
    """Main application settings"""

    # Application Configuration
    app_name: str = Field(default="POI Map Service")
    app_version: str = Field(default="1.0.0")
    environment: Environment = Field(default=Environment.DEVELOPMENT)
    debug: bool = Field(default=False)

    # Server Configuration
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000, ge=1, le=65535)
    reload: bool = Field(default=False)
    workers: int = Field(default=1, ge=1, le=16)

    # Logging Configuration
    log_level: LogLevel = Field(default=LogLevel.INFO)
    log_format: LogFormat = Field(default=LogFormat.JSON)
    log_text_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="%-style format used when log_format is text"
    )

    # Nested Settings
    map: MapSettings = Field(default_factory=MapSettings)
    security: SecuritySettings = Field(default_factory=SecuritySettings)

    @field_validator('environment', mode='before')
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment setting"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    @field_validator('log_format', mode='before')
    @classmethod
    def validate_log_format(cls, v):
        if isinstance(v, str):
            return LogFormat(v.strip().lower())
        return v

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT

    def get_cors_config(self) -> Dict[str, Any]:
        """Get CORS configuration for FastAPI"""
        return {
            "allow_origins": self.security.cors_origins,
            "allow_credentials": self.security.cors_allow_credentials,
            "allow_methods": self.security.cors_allow_methods,
            "allow_headers": self.security.cors_allow_headers,
        }

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get application settings instance"""
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment and files"""
    global settings
    settings = Settings()
    return settings
