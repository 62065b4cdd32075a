"""
Main entry point for the API server.

Usage:
    python -m scaffold_api

Or with uvicorn directly:
    uvicorn scaffold_api.fastapi_app:app --host 0.0.0.0 --port 4200 --reload
"""

import logging
import os

import uvicorn

from scaffold_api.config.logging_config import resolve_level, setup_logging
from scaffold_api.config.settings import AppConfig, get_app_config
from scaffold_api.domain.exceptions import ConfigurationError

logger = logging.getLogger("scaffold_api")


def validate_port(app_config: AppConfig) -> int:
    """Return the configured port, or raise ConfigurationError if it is unusable."""
    port = app_config.port
    if port is None or not 1 <= port <= 65535:
        raise ConfigurationError(
            f"Invalid PORT value {os.getenv('PORT')!r}: expected an integer in 1-65535"
        )
    return port


def main() -> None:
    app_config = get_app_config()
    setup_logging(app_config.log_level)
    port = validate_port(app_config)
    host = os.getenv("HOST", "0.0.0.0")
    debug = app_config.environment == "development"

    logger.info(f"Server running on http://{host}:{port}/{app_config.api_prefix}")
    logger.info(f"GraphQL endpoint at http://{host}:{port}/graphql")
    logger.info(f"Environment: {app_config.environment}")
    logger.info(f"Log level: {app_config.log_level}")

    uvicorn.run(
        "scaffold_api.fastapi_app:app",
        host=host,
        port=port,
        reload=debug,
        log_level=logging.getLevelName(resolve_level(app_config.log_level)).lower(),
    )


if __name__ == "__main__":
    main()
