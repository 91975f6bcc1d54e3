"""
Shared test fixtures.

The API runs against an in-memory SQLite database: every test gets fresh
tables, and the app's get_db dependency is overridden to hand out sessions
bound to that database.
"""
import os

# Settings are read at import time
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-healthguard")
os.environ.setdefault("LOGS_DIR", "")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from healthguard.db.session import get_db
from healthguard.main import app
from healthguard.models import Base


TEST_PASSWORD = "SecurePass123!"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    """Session for service level tests and for inspecting API side effects."""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    # No context manager: startup (create_all on the real engine) is skipped
    yield TestClient(app)
    app.dependency_overrides.clear()


def register(client, email="asha@example.com", full_name="Asha Verma", language="en"):
    """Register an account and return its Authorization header."""
    response = client.post(
        "/api/v1/auth/register",
        json={
            "email": email,
            "password": TEST_PASSWORD,
            "full_name": full_name,
            "language": language,
        },
    )
    assert response.status_code == 201, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def auth_headers(client):
    return register(client)


@pytest.fixture
def profile_payload():
    return {
        "full_name": "Asha Verma",
        "date_of_birth": "1950-01-01",
        "gender": "female",
        "height_cm": 170,
        "weight_kg": 95,
        "medical_conditions": ["Asthma", "Diabetes"],
    }


@pytest.fixture
def with_profile(client, auth_headers, profile_payload):
    """Authenticated user who has completed onboarding."""
    response = client.post("/api/v1/profile", json=profile_payload, headers=auth_headers)
    assert response.status_code == 201, response.text
    return auth_headers
