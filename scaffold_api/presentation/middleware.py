"""HTTP middleware shared by REST and GraphQL routes."""

import logging
import time
from uuid import uuid4

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from scaffold_api.config.logging_config import correlation_id_var

X_CORRELATION_ID = "X-Correlation-ID"

logger = logging.getLogger(__name__)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """
    Reads X-Correlation-ID (or generates one) and echoes it on the response.

    Also writes one access log line per request. Unhandled errors are turned
    into a 500 here, while the correlation ID is still set, so the error log
    and the response both carry it.
    """

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get(X_CORRELATION_ID) or str(uuid4())

        # Set in contextvars (propagates to async tasks and logging)
        token = correlation_id_var.set(correlation_id)
        start = time.perf_counter()
        try:
            try:
                response = await call_next(request)
            except Exception as exc:
                logger.error(f"Unhandled error: {type(exc).__name__}: {exc}", exc_info=exc)
                response = JSONResponse(
                    status_code=500, content={"error": "Internal server error"}
                )
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.info(
                f"{request.method} {request.url.path} {response.status_code} "
                f"{elapsed_ms:.1f}ms",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "time_taken_ms": round(elapsed_ms, 1),
                },
            )
        finally:
            correlation_id_var.reset(token)

        response.headers[X_CORRELATION_ID] = correlation_id
        return response
