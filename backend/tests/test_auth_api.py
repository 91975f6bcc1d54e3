"""
API Tests for authentication and profile onboarding
"""
from conftest import TEST_PASSWORD, register


class TestAuth:
    def test_register_returns_tokens(self, client):
        response = client.post(
            "/api/v1/auth/register",
            json={"email": "ravi@example.com", "password": TEST_PASSWORD, "full_name": "Ravi"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["token_type"] == "bearer"
        assert body["access_token"] and body["refresh_token"]

    def test_duplicate_email(self, client):
        register(client)
        response = client.post(
            "/api/v1/auth/register",
            json={"email": "asha@example.com", "password": TEST_PASSWORD, "full_name": "Other"},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Email already registered"

    def test_short_password_rejected(self, client):
        response = client.post(
            "/api/v1/auth/register",
            json={"email": "ravi@example.com", "password": "short", "full_name": "Ravi"},
        )

        assert response.status_code == 422

    def test_login(self, client):
        register(client)
        response = client.post(
            "/api/v1/auth/login",
            json={"email": "asha@example.com", "password": TEST_PASSWORD},
        )

        assert response.status_code == 200
        assert "access_token" in response.json()

    def test_login_wrong_password(self, client):
        register(client)
        response = client.post(
            "/api/v1/auth/login",
            json={"email": "asha@example.com", "password": "WrongPass123!"},
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Incorrect email or password"

    def test_me(self, client, auth_headers):
        response = client.get("/api/v1/auth/me", headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["email"] == "asha@example.com"
        assert body["language"] == "en"
        assert "password_hash" not in body

    def test_refresh(self, client):
        tokens = client.post(
            "/api/v1/auth/register",
            json={"email": "ravi@example.com", "password": TEST_PASSWORD, "full_name": "Ravi"},
        ).json()

        response = client.post("/api/v1/auth/refresh", json={"refresh_token": tokens["refresh_token"]})

        assert response.status_code == 200

    def test_access_token_is_not_a_refresh_token(self, client):
        tokens = client.post(
            "/api/v1/auth/register",
            json={"email": "ravi@example.com", "password": TEST_PASSWORD, "full_name": "Ravi"},
        ).json()

        response = client.post("/api/v1/auth/refresh", json={"refresh_token": tokens["access_token"]})

        assert response.status_code == 401

    def test_protected_endpoint_rejects_bad_token(self, client):
        response = client.get("/api/v1/auth/me", headers={"Authorization": "Bearer not-a-token"})

        assert response.status_code == 401


class TestProfile:
    def test_missing_profile(self, client, auth_headers):
        response = client.get("/api/v1/profile", headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["detail"] == "Profile not found"

    def test_onboarding(self, client, auth_headers, profile_payload):
        response = client.post("/api/v1/profile", json=profile_payload, headers=auth_headers)

        assert response.status_code == 201
        body = response.json()
        assert body["medical_conditions"] == ["Asthma", "Diabetes"]
        assert body["bmi"] == 32.87

    def test_onboarding_twice_conflicts(self, client, with_profile, profile_payload):
        response = client.post("/api/v1/profile", json=profile_payload, headers=with_profile)

        assert response.status_code == 409

    def test_form_style_values(self, client, auth_headers):
        response = client.post(
            "/api/v1/profile",
            json={
                "full_name": "Asha Verma",
                "height_cm": "",
                "weight_kg": "",
                "medical_conditions": "Hypertension, , Diabetes",
            },
            headers=auth_headers,
        )

        assert response.status_code == 201
        body = response.json()
        assert body["height_cm"] is None
        assert body["bmi"] is None
        assert body["medical_conditions"] == ["Hypertension", "Diabetes"]

    def test_negative_weight_rejected(self, client, auth_headers):
        response = client.post(
            "/api/v1/profile",
            json={"full_name": "Asha Verma", "weight_kg": -3},
            headers=auth_headers,
        )

        assert response.status_code == 422

    def test_partial_update(self, client, with_profile):
        response = client.put(
            "/api/v1/profile",
            json={"weight_kg": 70, "full_name": None},
            headers=with_profile,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["weight_kg"] == 70
        assert body["full_name"] == "Asha Verma"
        assert body["medical_conditions"] == ["Asthma", "Diabetes"]
