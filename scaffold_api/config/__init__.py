"""Configuration: environment-driven settings and logging setup."""

from scaffold_api.config.settings import (
    AppConfig,
    DatabaseConfig,
    LoggingConfig,
    get_app_config,
    get_database_config,
    get_logging_config,
    load_app_config,
    load_database_config,
    load_logging_config,
)

__all__ = [
    "AppConfig",
    "DatabaseConfig",
    "LoggingConfig",
    "get_app_config",
    "get_database_config",
    "get_logging_config",
    "load_app_config",
    "load_database_config",
    "load_logging_config",
]
