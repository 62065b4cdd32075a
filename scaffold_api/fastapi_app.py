"""
FastAPI Application Factory.
Creates and configures the FastAPI application with all routers, middleware, and DI.

Routes:
- REST: /{api_prefix}/hello, /{api_prefix}/app
- GraphQL: /graphql
- Liveness: /, /health
"""

import logging
from contextlib import asynccontextmanager
from dataclasses import asdict
from typing import Optional

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError as FastAPIValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from scaffold_api import __app_name__, __version__
from scaffold_api.application.common.validation import violations_from_errors
from scaffold_api.config.logging_config import setup_logging
from scaffold_api.config.settings import get_app_config, get_logging_config
from scaffold_api.domain.exceptions import DomainError, RequestValidationError
from scaffold_api.infrastructure.database import Database
from scaffold_api.presentation.api import app_info_router, hello_router
from scaffold_api.presentation.graphql import create_graphql_router
from scaffold_api.presentation.middleware import CorrelationIdMiddleware
from scaffold_api.setup.ioc import create_container

logger = logging.getLogger(__name__)


def _validation_response(violations) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={
            "error": "Validation error",
            "details": [asdict(v) for v in violations],
        },
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager.

    - Startup: resolve the Database once so the connection opens before traffic
    - Shutdown: close the DI container (disconnects the Database)
    """
    container: AsyncContainer = app.state.dishka_container
    await container.get(Database)
    logger.info("Application started. DI container initialized.")
    yield
    await container.close()
    logger.info("Application shutdown. DI container closed.")


def create_fastapi_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        container: DI container to use; defaults to create_container().

    Returns:
        FastAPI application instance
    """
    app_config = get_app_config()
    setup_logging(app_config.log_level, get_logging_config().log_dir)

    app = FastAPI(
        title=__app_name__,
        description="API scaffold with REST and GraphQL endpoints",
        version=__version__,
        lifespan=lifespan,
    )

    # Setup Dishka BEFORE app starts (must add middleware before startup)
    setup_dishka(container or create_container(), app)

    # Correlation ID middleware (must be added before CORS)
    app.add_middleware(CorrelationIdMiddleware)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Request body failed DTO validation
    @app.exception_handler(FastAPIValidationError)
    async def request_validation_handler(request: Request, exc: FastAPIValidationError):
        violations = violations_from_errors(exc.errors())
        logger.debug(f"Validation error on {request.url.path}: {violations}")
        return _validation_response(violations)

    @app.exception_handler(RequestValidationError)
    async def domain_validation_handler(request: Request, exc: RequestValidationError):
        return _validation_response(exc.violations)

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        logger.info(f"[{exc.code}] {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message, "code": exc.code},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
        )

    # Fallback for errors raised outside CorrelationIdMiddleware, which handles the rest
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error: {type(exc).__name__}: {exc}", exc_info=exc)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"},
        )

    # Health check routes
    @app.get("/", tags=["health"])
    async def root():
        return {"message": f"{__app_name__} is running."}

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    # Register routers
    api_prefix = app_config.api_prefix.strip("/")
    api_prefix = f"/{api_prefix}" if api_prefix else ""
    app.include_router(hello_router, prefix=api_prefix)  # GET /hello, POST /hello/say
    app.include_router(app_info_router, prefix=api_prefix)  # GET /app, /app/health, /app/settings
    app.include_router(create_graphql_router(app_config), prefix="/graphql")

    return app


# Create the app instance
app = create_fastapi_app()
