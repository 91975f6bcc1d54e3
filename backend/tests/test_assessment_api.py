"""
API and service tests for risk assessments and disease impact insights
"""
import random
from datetime import date, timedelta
from unittest.mock import patch

import pytest

from healthguard.core.exceptions import InsufficientDataError, ProfileNotFoundError
from healthguard.models.disease_impact import DiseaseImpactAnalysis
from healthguard.models.risk_assessment import RiskAssessment
from healthguard.schemas.health import DailyHealthLogUpsert, HealthRecordCreate
from healthguard.schemas.profile import ProfileCreate
from healthguard.schemas.user import UserCreate
from healthguard.services import assessment_service, auth_service, health_service, profile_service


def log_days(client, headers, count, **values):
    for i in range(count):
        day = date(2025, 1, 1) + timedelta(days=i)
        response = client.put(
            "/api/v1/daily-logs",
            json={"log_date": day.isoformat(), **values},
            headers=headers,
        )
        assert response.status_code == 201, response.text


@pytest.fixture
def user(db):
    return auth_service.create_user(
        db,
        UserCreate(email="asha@example.com", password="SecurePass123!", full_name="Asha Verma"),
    )


@pytest.fixture
def profiled_user(db, user):
    profile_service.create_profile(
        db,
        user.id,
        ProfileCreate(
            full_name="Asha Verma",
            date_of_birth=date(1950, 1, 1),
            height_cm=170,
            weight_kg=95,
            medical_conditions=["Asthma", "Diabetes"],
        ),
    )
    return user


class TestRiskAssessmentApi:
    def test_requires_profile(self, client, auth_headers):
        response = client.post("/api/v1/risk-assessments", headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["detail"] == "Profile not found"
        assert client.get("/api/v1/risk-assessments", headers=auth_headers).json()["total"] == 0

    def test_generate(self, client, with_profile):
        response = client.post("/api/v1/risk-assessments", headers=with_profile)

        assert response.status_code == 201
        body = response.json()
        assert 0 <= body["cardiovascular_risk"] <= 100
        assert body["risk_factors"]["conditions"] == ["Asthma", "Diabetes"]
        assert body["recommendations"][-2:] == [
            "Stay hydrated and get at least 7-8 hours of sleep daily",
            "Consider stress management techniques such as meditation or yoga",
        ]

    def test_history_is_kept(self, client, with_profile):
        first = client.post("/api/v1/risk-assessments", headers=with_profile).json()
        second = client.post("/api/v1/risk-assessments", headers=with_profile).json()

        history = client.get("/api/v1/risk-assessments", headers=with_profile).json()
        assert history["total"] == 2
        assert [a["id"] for a in history["assessments"]] == [second["id"], first["id"]]

        latest = client.get("/api/v1/risk-assessments/latest", headers=with_profile).json()
        assert latest["id"] == second["id"]

    def test_latest_without_assessments(self, client, with_profile):
        response = client.get("/api/v1/risk-assessments/latest", headers=with_profile)

        assert response.status_code == 404


class TestGenerateRiskAssessment:
    def test_uses_recent_records(self, db, profiled_user):
        for day in range(1, 4):
            health_service.create_health_record(
                db,
                profiled_user.id,
                HealthRecordCreate(record_date=date(2025, 1, day), blood_pressure_systolic=150),
            )

        assessment = assessment_service.generate_risk_assessment(
            db, profiled_user.id, rng=random.Random(0), today=date(2025, 1, 13)
        )

        # 65 from the profile, 15 from the systolic average
        assert assessment.overall_risk_score == 80
        assert assessment.assessment_date == date(2025, 1, 13)

    def test_only_ten_records_are_considered(self, db, profiled_user):
        # One very old high reading, then ten normal ones
        health_service.create_health_record(
            db, profiled_user.id,
            HealthRecordCreate(record_date=date(2024, 1, 1), blood_pressure_systolic=250),
        )
        for day in range(1, 11):
            health_service.create_health_record(
                db, profiled_user.id,
                HealthRecordCreate(record_date=date(2025, 1, day), blood_pressure_systolic=120),
            )

        assessment = assessment_service.generate_risk_assessment(
            db, profiled_user.id, rng=random.Random(0), today=date(2025, 1, 13)
        )

        assert assessment.overall_risk_score == 65

    def test_missing_profile_writes_nothing(self, db, user):
        with pytest.raises(ProfileNotFoundError):
            assessment_service.generate_risk_assessment(db, user.id)

        assert db.query(RiskAssessment).count() == 0

    def test_failed_insert_is_rolled_back(self, db, profiled_user):
        with patch.object(db, "commit", side_effect=RuntimeError("disk full")):
            with pytest.raises(RuntimeError):
                assessment_service.generate_risk_assessment(db, profiled_user.id)

        assert db.query(RiskAssessment).count() == 0


class TestDiseaseInsightsApi:
    def test_requires_profile(self, client, auth_headers):
        response = client.post("/api/v1/insights/disease-impact", headers=auth_headers)

        assert response.status_code == 404

    def test_requires_three_logs(self, client, with_profile):
        log_days(client, with_profile, 2, sleep_hours=7)

        response = client.post("/api/v1/insights/disease-impact", headers=with_profile)

        assert response.status_code == 400
        assert "daily logs" in response.json()["detail"]
        assert client.get("/api/v1/insights/disease-impact", headers=with_profile).json()["total"] == 0

    def test_generate(self, client, with_profile):
        log_days(client, with_profile, 3, sleep_hours=5, exercise_minutes=0, stress_level=9)

        response = client.post("/api/v1/insights/disease-impact", headers=with_profile)

        assert response.status_code == 201
        analyses = response.json()["analyses"]
        assert [a["disease_name"] for a in analyses] == [
            "Cardiovascular Disease",
            "Type 2 Diabetes",
            "Hypertension",
        ]
        assert [a["current_risk_level"] for a in analyses] == [65, 65, 65]
        assert analyses[1]["contributing_factors"]["family_history"] == (
            "Family history significantly increases your risk"
        )
        assert len({a["analysis_date"] for a in analyses}) == 1

    def test_latest_returns_newest_generation(self, client, with_profile):
        log_days(client, with_profile, 3, sleep_hours=5, exercise_minutes=0, stress_level=9)
        client.post("/api/v1/insights/disease-impact", headers=with_profile)
        log_days_later = [
            {"log_date": f"2025-02-0{day}", "sleep_hours": 8, "exercise_minutes": 45, "stress_level": 3}
            for day in range(1, 8)
        ]
        for payload in log_days_later:
            client.put("/api/v1/daily-logs", json=payload, headers=with_profile)
        second = client.post("/api/v1/insights/disease-impact", headers=with_profile).json()

        latest = client.get("/api/v1/insights/disease-impact/latest", headers=with_profile).json()

        assert latest["total"] == 3
        assert [a["id"] for a in latest["analyses"]] == [a["id"] for a in second["analyses"]]
        assert {a["risk_trend"] for a in latest["analyses"]} == {"improving"}

        everything = client.get("/api/v1/insights/disease-impact", headers=with_profile).json()
        assert everything["total"] == 6


class TestGenerateDiseaseInsights:
    def test_insufficient_data(self, db, profiled_user):
        health_service.upsert_daily_log(
            db, profiled_user.id, DailyHealthLogUpsert(log_date=date(2025, 1, 1), sleep_hours=7)
        )

        with pytest.raises(InsufficientDataError):
            assessment_service.generate_disease_insights(db, profiled_user.id)

        assert db.query(DiseaseImpactAnalysis).count() == 0

    def test_rows_share_analysis_date(self, db, profiled_user):
        for day in range(1, 4):
            health_service.upsert_daily_log(
                db, profiled_user.id, DailyHealthLogUpsert(log_date=date(2025, 1, day), sleep_hours=7)
            )

        analyses = assessment_service.generate_disease_insights(db, profiled_user.id)

        assert len(analyses) == 3
        assert len({a.analysis_date for a in analyses}) == 1
        assert assessment_service.get_latest_disease_analyses(db, profiled_user.id) == analyses
