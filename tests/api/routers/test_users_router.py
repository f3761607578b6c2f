"""Tests for users router."""


class TestGetMe:
    """Tests for GET /api/v1/users/me endpoint."""

    def test_returns_session_profile(self, client, user_id):
        response = client.get("/api/v1/users/me")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == str(user_id)
        assert data["display_name"] == "Test Driver"
        assert data["company_name"] == "Acme Logistics"
        assert data["vehicle_info"] == {"model": "Hiace", "plate": "Shinagawa 400 A 1234", "year": 2020}

    def test_unauthenticated_returns_401(self, unauthenticated_client):
        response = unauthenticated_client.get("/api/v1/users/me")

        assert response.status_code == 401
