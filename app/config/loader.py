"""
Configuration loader utility for environment-specific settings.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional
from .settings import Settings, Environment, MapSettings, SecuritySettings

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Utility class for loading environment-specific configurations"""

    @staticmethod
    def load_environment_config(environment: Optional[str] = None) -> Settings:
        """
        Load configuration for the specified environment.

        Args:
            environment: Target environment (development, staging, production, testing)
                        If None, uses ENVIRONMENT env var or defaults to development

        Returns:
            Settings instance with environment-specific configuration
        """
        if environment is None:
            environment = os.getenv("ENVIRONMENT", "development")

        env = Environment(environment.lower())

        env_file_path = Path(f".env.{env.value}")

        if env_file_path.exists():
            # Nested settings are separate BaseSettings and read the file on their own
            env_file = str(env_file_path)
            return Settings(
                _env_file=env_file,
                environment=env,
                map=MapSettings(_env_file=env_file),
                security=SecuritySettings(_env_file=env_file),
            )

        logger.warning(
            f"Environment file {env_file_path} not found, using default settings"
        )
        return Settings(environment=env)

    @staticmethod
    def get_available_environments(directory: str = ".") -> list[str]:
        """Get list of available environment configurations"""
        env_files = []
        for env_file in Path(directory).glob(".env.*"):
            env_name = env_file.name.replace(".env.", "", 1)
            # skip generated samples
            if env_name.endswith(".sample"):
                continue
            env_files.append(env_name)
        return sorted(env_files)

    @staticmethod
    def validate_environment_config(environment: str) -> bool:
        """
        Validate that an environment configuration exists and is valid.

        Args:
            environment: Environment name to validate

        Returns:
            True if configuration is valid, False otherwise
        """
        try:
            env = Environment(environment.lower())
            if not Path(f".env.{env.value}").exists():
                return False

            settings = ConfigLoader.load_environment_config(environment)

            required_settings = [
                settings.app_name,
                settings.environment,
                settings.host,
                settings.port,
                settings.map.zoom_radius_table,
            ]
            return all(setting is not None for setting in required_settings)

        except ValueError as e:
            logger.warning(f"Invalid configuration for environment '{environment}': {e}")
            return False

    @staticmethod
    def create_sample_env_file(environment: str, output_path: Optional[str] = None) -> str:
        """
        Create a sample .env file for the specified environment.

        Args:
            environment: Target environment
            output_path: Optional custom output path

        Returns:
            Path to the created sample file
        """
        env = Environment(environment.lower())

        if output_path is None:
            output_path = f".env.{env.value}.sample"

        default_settings = Settings()
        table_json = json.dumps(
            {str(zoom): radius for zoom, radius in default_settings.map.zoom_radius_table.items()}
        )

        sample_content = f"""# Sample configuration for {env.value} environment
# Copy this file to .env.{env.value} and modify as needed

# Application Configuration
APP_NAME={default_settings.app_name}
APP_VERSION={default_settings.app_version}
ENVIRONMENT={env.value}
DEBUG={'true' if env == Environment.DEVELOPMENT else 'false'}

# Server Configuration
HOST={default_settings.host}
PORT={default_settings.port}
RELOAD={'true' if env == Environment.DEVELOPMENT else 'false'}
WORKERS={1 if env == Environment.DEVELOPMENT else 4}

# Logging Configuration
LOG_LEVEL={default_settings.log_level.value}
LOG_FORMAT={default_settings.log_format.value}

# Map Configuration
MAP_DEFAULT_LATITUDE={default_settings.map.default_latitude}
MAP_DEFAULT_LONGITUDE={default_settings.map.default_longitude}
MAP_DEFAULT_ZOOM={default_settings.map.default_zoom}
MAP_DEFAULT_RADIUS={default_settings.map.default_radius}
MAP_ZOOM_RADIUS_TABLE={table_json}

# Security Configuration
SECURITY_CORS_ORIGINS=*
"""

        with open(output_path, "w") as f:
            f.write(sample_content)

        return output_path


def load_config_for_environment(environment: Optional[str] = None) -> Settings:
    """Convenience function to load configuration for an environment"""
    return ConfigLoader.load_environment_config(environment)
