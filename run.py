#!/usr/bin/env python3
"""
Application startup script with environment configuration support.
"""

import os
import sys
import argparse

from app.config.loader import ConfigLoader, load_config_for_environment
from app.config.settings import Settings


def export_runtime_environment(settings: Settings) -> None:
    """
    Publish the selected environment and debug flag to os.environ.

    Reloader and worker processes import ``app.main:app`` afresh and only see
    the environment, not the parsed command line.
    """
    os.environ["ENVIRONMENT"] = settings.environment.value
    os.environ["DEBUG"] = "true" if settings.debug else "false"


def main():
    """Main startup function with environment configuration"""
    parser = argparse.ArgumentParser(description="POI Map Service")
    parser.add_argument(
        "--env",
        choices=["development", "staging", "production", "testing"],
        default=None,
        help="Environment to run (default: from ENVIRONMENT env var or development)"
    )
    parser.add_argument(
        "--host",
        default=None,
        help="Host to bind to (overrides config)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to bind to (overrides config)"
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of worker processes (overrides config)"
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload (overrides config)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode (overrides config)"
    )
    parser.add_argument(
        "--list-envs",
        action="store_true",
        help="List available environment configurations"
    )
    parser.add_argument(
        "--validate-env",
        help="Validate a specific environment configuration"
    )
    parser.add_argument(
        "--create-sample",
        help="Create a sample .env file for the specified environment"
    )

    args = parser.parse_args()

    # Handle utility commands
    if args.list_envs:
        envs = ConfigLoader.get_available_environments()
        print("Available environment configurations:")
        for env in envs:
            print(f"  - {env}")
        return

    if args.validate_env:
        is_valid = ConfigLoader.validate_environment_config(args.validate_env)
        if is_valid:
            print(f"✓ Environment '{args.validate_env}' configuration is valid")
        else:
            print(f"✗ Environment '{args.validate_env}' configuration is invalid or missing")
            sys.exit(1)
        return

    if args.create_sample:
        try:
            sample_file = ConfigLoader.create_sample_env_file(args.create_sample)
            print(f"✓ Sample configuration created: {sample_file}")
        except (ValueError, OSError) as e:
            print(f"✗ Failed to create sample configuration: {e}")
            sys.exit(1)
        return

    try:
        settings = load_config_for_environment(args.env)
        print(f"✓ Loaded configuration for environment: {settings.environment.value}")
    except ValueError as e:
        print(f"✗ Failed to load configuration: {e}")
        sys.exit(1)

    # Apply command line overrides
    if args.host:
        settings.host = args.host
    if args.port:
        settings.port = args.port
    if args.workers:
        settings.workers = args.workers
    if args.reload:
        settings.reload = True
    if args.debug:
        settings.debug = True

    print(f"🚀 Starting {settings.app_name} v{settings.app_version}")
    print(f"   Environment: {settings.environment.value}")
    print(f"   Host: {settings.host}")
    print(f"   Port: {settings.port}")
    print(f"   Workers: {settings.workers}")
    print(f"   Debug: {settings.debug}")
    print(f"   Reload: {settings.reload}")
    print(f"   Log Level: {settings.log_level.value}")
    print(f"   Default view: {settings.map.default_latitude}, {settings.map.default_longitude} @ zoom {settings.map.default_zoom}")

    import uvicorn

    export_runtime_environment(settings)

    if settings.reload or settings.workers > 1:
        # uvicorn needs an import string here; app.main loads the exported environment
        uvicorn.run(
            "app.main:app",
            host=settings.host,
            port=settings.port,
            reload=settings.reload,
            workers=settings.workers if not settings.reload else 1,
            log_level=settings.log_level.value.lower(),
            access_log=True,
        )
        return

    from app.main import create_app

    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.value.lower(),
        access_log=True,
    )


if __name__ == "__main__":
    main()
