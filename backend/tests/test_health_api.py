"""
API Tests for health records and daily logs
"""
import uuid

from conftest import register


def add_record(client, headers, **values):
    payload = {"record_date": "2025-01-10", **values}
    response = client.post("/api/v1/health-records", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


class TestHealthRecords:
    def test_create(self, client, auth_headers):
        record = add_record(
            client, auth_headers,
            blood_pressure_systolic=135,
            blood_pressure_diastolic=85,
            heart_rate=72,
        )

        assert record["blood_pressure_systolic"] == 135
        assert record["blood_sugar"] is None

    def test_blank_fields_are_missing(self, client, auth_headers):
        record = add_record(client, auth_headers, heart_rate="", notes="")

        assert record["heart_rate"] is None
        assert record["notes"] is None

    def test_non_numeric_rejected(self, client, auth_headers):
        response = client.post(
            "/api/v1/health-records",
            json={"record_date": "2025-01-10", "heart_rate": "abc"},
            headers=auth_headers,
        )

        assert response.status_code == 422

    def test_list_newest_first(self, client, auth_headers):
        add_record(client, auth_headers, record_date="2025-01-01", heart_rate=60)
        add_record(client, auth_headers, record_date="2025-01-05", heart_rate=70)
        add_record(client, auth_headers, record_date="2025-01-05", heart_rate=80)

        response = client.get("/api/v1/health-records", headers=auth_headers)

        body = response.json()
        assert body["total"] == 3
        assert [r["heart_rate"] for r in body["records"]] == [80, 70, 60]

    def test_pagination(self, client, auth_headers):
        for day in range(1, 6):
            add_record(client, auth_headers, record_date=f"2025-01-0{day}")

        body = client.get("/api/v1/health-records?limit=2&offset=1", headers=auth_headers).json()

        assert body["total"] == 5
        assert [r["record_date"] for r in body["records"]] == ["2025-01-04", "2025-01-03"]

    def test_records_are_private(self, client, auth_headers):
        record = add_record(client, auth_headers, heart_rate=72)
        other = register(client, email="ravi@example.com", full_name="Ravi")

        assert client.get(f"/api/v1/health-records/{record['id']}", headers=other).status_code == 404
        assert client.get("/api/v1/health-records", headers=other).json()["total"] == 0
        assert client.get(f"/api/v1/health-records/{record['id']}", headers=auth_headers).status_code == 200

    def test_unknown_record(self, client, auth_headers):
        response = client.get(f"/api/v1/health-records/{uuid.uuid4()}", headers=auth_headers)

        assert response.status_code == 404

    def test_requires_auth(self, client):
        assert client.get("/api/v1/health-records").status_code in (401, 403)


class TestDailyLogs:
    def test_upsert_creates_then_replaces(self, client, auth_headers):
        first = client.put(
            "/api/v1/daily-logs",
            json={"log_date": "2025-01-13", "sleep_hours": 6.5, "stress_level": 7},
            headers=auth_headers,
        )
        assert first.status_code == 201

        second = client.put(
            "/api/v1/daily-logs",
            json={"log_date": "2025-01-13", "sleep_hours": 8},
            headers=auth_headers,
        )
        assert second.status_code == 200
        assert second.json()["id"] == first.json()["id"]
        assert second.json()["sleep_hours"] == 8
        assert second.json()["stress_level"] is None

        body = client.get("/api/v1/daily-logs", headers=auth_headers).json()
        assert body["total"] == 1

    def test_invalid_values(self, client, auth_headers):
        for payload in (
            {"log_date": "2025-01-13", "sleep_hours": "abc"},
            {"log_date": "2025-01-13", "sleep_hours": 25},
            {"log_date": "2025-01-13", "stress_level": 11},
            {"log_date": "2025-01-13", "exercise_minutes": -5},
        ):
            response = client.put("/api/v1/daily-logs", json=payload, headers=auth_headers)
            assert response.status_code == 422, payload

    def test_list_is_ascending_and_limited(self, client, auth_headers):
        for day in (3, 1, 5, 2, 4):
            client.put(
                "/api/v1/daily-logs",
                json={"log_date": f"2025-01-0{day}", "exercise_minutes": day * 10},
                headers=auth_headers,
            )

        body = client.get("/api/v1/daily-logs?limit=3", headers=auth_headers).json()

        assert body["total"] == 5
        assert [log["log_date"] for log in body["logs"]] == ["2025-01-03", "2025-01-04", "2025-01-05"]
