"""Tests for dashboard router."""

from datetime import date

BASE = "/api/v1/daily-reports/"


def _seed_march(client, worked_payload):
    client.post(BASE, json=worked_payload(date="2024-03-01"))
    client.post(
        BASE,
        json=worked_payload(
            date="2024-03-31", start_odometer=12085, end_odometer=12185, deliveries=80,
            highway_fee=None,
        ),
    )
    client.post(BASE, json={"date": "2024-03-10", "is_worked": False})
    client.post(BASE, json=worked_payload(date="2024-04-01"))


class TestMonthlyStats:
    """Tests for GET /api/v1/dashboard/monthly-stats endpoint."""

    def test_sums_worked_days_of_month(self, client, worked_payload):
        _seed_march(client, worked_payload)

        response = client.get("/api/v1/dashboard/monthly-stats", params={"year": 2024, "month": 3})

        assert response.status_code == 200
        assert response.json() == {
            "year": 2024,
            "month": 3,
            "working_days": 2,
            "total_distance": 185,
            "total_deliveries": 200,
            "total_highway_fee": 1500,
            "total_hours": 0.0,
        }

    def test_empty_month(self, client):
        response = client.get("/api/v1/dashboard/monthly-stats", params={"year": 2024, "month": 2})

        data = response.json()
        assert data["working_days"] == 0
        assert data["total_distance"] == 0

    def test_parameters_required_and_bounded(self, client):
        assert client.get("/api/v1/dashboard/monthly-stats").status_code == 422
        assert (
            client.get(
                "/api/v1/dashboard/monthly-stats", params={"year": 2024, "month": 13}
            ).status_code
            == 422
        )


class TestDashboard:
    """Tests for GET /api/v1/dashboard/ endpoint."""

    def test_dashboard_for_month(self, client, worked_payload):
        _seed_march(client, worked_payload)

        response = client.get("/api/v1/dashboard/", params={"year": 2024, "month": 3})

        assert response.status_code == 200
        data = response.json()
        assert data["monthly_stats"]["working_days"] == 2
        assert [r["date"] for r in data["recent_reports"]] == [
            "2024-04-01",
            "2024-03-31",
            "2024-03-10",
        ]
        assert data["last_odometer"] == 12085

    def test_defaults_to_current_month(self, client):
        today = date.today()

        response = client.get("/api/v1/dashboard/")

        assert response.status_code == 200
        stats = response.json()["monthly_stats"]
        assert (stats["year"], stats["month"]) == (today.year, today.month)
        assert response.json()["recent_reports"] == []
        assert response.json()["last_odometer"] is None

    def test_requires_authentication(self, unauthenticated_client):
        response = unauthenticated_client.get(
            "/api/v1/dashboard/", headers={"Authorization": "Bearer not-a-jwt"}
        )

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "INVALID_TOKEN"
