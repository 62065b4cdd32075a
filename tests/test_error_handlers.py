"""Tests for mapping errors to HTTP responses."""

import logging

from fastapi.testclient import TestClient

from scaffold_api.config.logging_config import CorrelationIdFilter
from scaffold_api.domain.exceptions import (
    DatabaseError,
    EntityNotFoundError,
    RequestValidationError,
    Violation,
)


def _add_failing_routes(app):
    @app.get("/boom/not-found")
    async def not_found():
        raise EntityNotFoundError("User not found")

    @app.get("/boom/database")
    async def database():
        raise DatabaseError("An unexpected error occurred while finding user")

    @app.get("/boom/validation")
    async def validation():
        raise RequestValidationError([Violation("email", "is_email", "Email must be a valid email address")])

    @app.get("/boom/unexpected")
    async def unexpected():
        raise RuntimeError("kaboom")


class TestErrorHandlers:
    def test_domain_errors_use_their_status(self, app):
        _add_failing_routes(app)
        with TestClient(app) as client:
            not_found = client.get("/boom/not-found")
            database = client.get("/boom/database")

        assert not_found.status_code == 404
        assert not_found.json() == {"error": "User not found", "code": "NOT_FOUND"}
        assert database.status_code == 500
        assert database.json()["code"] == "DATABASE_ERROR"

    def test_validation_error_lists_violations(self, app):
        _add_failing_routes(app)
        with TestClient(app) as client:
            response = client.get("/boom/validation")

        assert response.status_code == 400
        assert response.json()["details"] == [
            {"field": "email", "rule": "is_email", "message": "Email must be a valid email address"}
        ]

    def test_unexpected_errors_are_hidden(self, app):
        _add_failing_routes(app)
        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/boom/unexpected")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}

    def test_unexpected_errors_keep_correlation_id(self, app, caplog):
        _add_failing_routes(app)
        caplog.handler.addFilter(CorrelationIdFilter())
        with caplog.at_level(logging.INFO, logger="scaffold_api"):
            with TestClient(app) as client:
                response = client.get("/boom/unexpected", headers={"X-Correlation-ID": "cid-500"})

        assert response.status_code == 500
        assert response.headers["X-Correlation-ID"] == "cid-500"
        [record] = [r for r in caplog.records if r.getMessage().startswith("Unhandled error")]
        assert record.correlation_id == "cid-500"
