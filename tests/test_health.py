"""
Tests for the health probes, CORS and the /metrics endpoint.
"""

from fastapi.testclient import TestClient

from message_board.main import app


class TestHealth:
    """Test liveness and readiness probes."""

    def test_live(self, client):
        response = client.get("/health/live")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_ready_with_store(self, client):
        response = client.get("/health/ready")

        assert response.status_code == 200
        assert response.json()["status"] == "ready"

    def test_not_ready_without_store(self, client):
        saved = app.state.store
        app.state.store = None
        try:
            response = client.get("/health/ready")
        finally:
            app.state.store = saved

        assert response.status_code == 503
        body = response.json()
        assert body["status"] == "not_ready"
        assert body["reason"] == "Message store not initialized"


class TestCors:
    """Browser clients on another origin may call the API."""

    def test_preflight_allowed(self, client):
        response = client.options(
            "/graphql",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "POST",
            },
        )

        assert response.status_code == 200
        assert "access-control-allow-origin" in response.headers


class TestMetrics:
    """Test the Prometheus exposition endpoint."""

    def test_metrics_exposed(self, client):
        client.post("/messages", json={"content": "counted"})
        client.post("/messages", json={"content": ""})

        response = client.get("/metrics")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        text = response.text
        assert "http_requests_total" in text
        assert 'message_operations_total{operation="addMessage",result="created"}' in text
        assert 'message_operations_total{operation="addMessage",result="validation_error"}' in text
        assert "messages_stored 1.0" in text

    def test_store_gauge_resets_on_restart(self):
        """A restarted app reports the size of its new, empty store."""
        with TestClient(app) as first:
            for content in ("one", "two", "three"):
                assert first.post("/messages", json={"content": content}).status_code == 201
            assert "messages_stored 3.0" in first.get("/metrics").text

        with TestClient(app) as second:
            assert second.get("/messages").json()["total"] == 0
            assert "messages_stored 0.0" in second.get("/metrics").text
