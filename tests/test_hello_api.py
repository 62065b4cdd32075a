"""
Tests for the REST endpoints.

Run with: pytest tests/test_hello_api.py -v
"""


class TestHelloRoutes:
    def test_get_hello(self, client):
        response = client.get("/v1/hello")

        assert response.status_code == 200
        assert response.json() == {"msg": "Hello, World!"}

    def test_say_hello(self, client):
        response = client.post("/v1/hello/say", json={"name": "Ada"})

        assert response.status_code == 200
        assert response.json() == {"msg": "Hello, Ada!"}

    def test_say_hello_rejects_empty_name(self, client):
        response = client.post("/v1/hello/say", json={"name": ""})

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Validation error"
        assert body["details"] == [
            {"field": "name", "rule": "not_empty", "message": "should not be empty"}
        ]

    def test_say_hello_rejects_missing_name(self, client):
        response = client.post("/v1/hello/say", json={})

        assert response.status_code == 400
        assert [(d["field"], d["rule"]) for d in response.json()["details"]] == [
            ("name", "missing")
        ]

    def test_unknown_route_is_404(self, client):
        response = client.get("/v1/nope")

        assert response.status_code == 404
        assert "error" in response.json()


class TestAppRoutes:
    def test_liveness(self, client):
        assert client.get("/health").json() == {"status": "healthy"}

    def test_app_info(self, client):
        response = client.get("/v1/app", headers={"X-Correlation-ID": "abc-123"})

        body = response.json()
        assert body["name"] == "scaffold-api"
        assert body["correlation_id"] == "abc-123"

    def test_settings(self, client):
        body = client.get("/v1/app/settings").json()

        assert body == {"name": "scaffold-api", "version": "1.0.0", "environment": "test"}

    def test_health_reports_database_status(self, client, prisma_client):
        body = client.get("/v1/app/health").json()
        assert body["status"] == "ok"
        assert body["database"]["status"] == "ok"

        prisma_client.healthy = False
        body = client.get("/v1/app/health").json()
        assert body["status"] == "ok"
        assert body["database"] == {"status": "error", "message": "connection refused"}
