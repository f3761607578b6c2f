"""Tests for health check router."""


class TestHealthEndpoint:
    """Tests for GET /api/v1/health endpoint."""

    def test_health_ok(self, client, mock_db_session):
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["database"]["status"] == "healthy"
        mock_db_session.execute.assert_awaited_once()

    def test_health_degraded_on_db_failure(self, client, mock_db_session):
        """Test degraded status when database fails."""
        mock_db_session.execute.side_effect = Exception("Database connection failed")

        response = client.get("/api/v1/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "degraded"
        assert data["database"]["status"] == "unhealthy"
        assert "Database connection failed" not in data["database"]["message"]

    def test_health_needs_no_token(self, unauthenticated_client):
        assert unauthenticated_client.get("/api/v1/health").status_code == 200

    def test_response_carries_request_id(self, client):
        response = client.get("/api/v1/health", headers={"X-Request-ID": "req-123"})

        assert response.headers["X-Request-ID"] == "req-123"
