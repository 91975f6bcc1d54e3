"""
API Tests for dashboard aggregates, health alerts, article search and UI translations
"""
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from healthguard.integrations.wikipedia import WikipediaClient, wikipedia_client


class TestDashboard:
    def test_new_account(self, client, auth_headers):
        body = client.get("/api/v1/dashboard", headers=auth_headers).json()

        assert body == {
            "welcome_name": "User",
            "has_profile": False,
            "health_records_count": 0,
            "reports_count": 0,
            "latest_record": None,
            "latest_risk_assessment": None,
        }

    def test_with_data(self, client, with_profile):
        client.post(
            "/api/v1/health-records",
            json={"record_date": "2025-01-01", "heart_rate": 60},
            headers=with_profile,
        )
        client.post(
            "/api/v1/health-records",
            json={"record_date": "2025-01-09", "heart_rate": 75},
            headers=with_profile,
        )
        assessment = client.post("/api/v1/risk-assessments", headers=with_profile).json()

        body = client.get("/api/v1/dashboard", headers=with_profile).json()

        assert body["welcome_name"] == "Asha Verma"
        assert body["has_profile"] is True
        assert body["health_records_count"] == 2
        assert body["latest_record"]["heart_rate"] == 75
        assert body["latest_risk_assessment"]["id"] == assessment["id"]

    def test_progress(self, client, with_profile):
        for day in range(1, 4):
            client.put(
                "/api/v1/daily-logs",
                json={"log_date": f"2025-01-0{day}", "sleep_hours": 7, "exercise_minutes": 30},
                headers=with_profile,
            )
        client.post("/api/v1/insights/disease-impact", headers=with_profile)

        body = client.get("/api/v1/dashboard/progress", headers=with_profile).json()

        assert [log["log_date"] for log in body["daily_logs"]] == ["2025-01-01", "2025-01-02", "2025-01-03"]
        assert body["latest_risk_assessment"] is None
        assert len(body["latest_analyses"]) == 3


class TestHealthAlerts:
    def test_states(self, client, auth_headers):
        states = client.get("/api/v1/alerts/states", headers=auth_headers).json()["states"]

        assert "Maharashtra" in states

    def test_state_alerts_use_camel_case_url(self, client, auth_headers):
        body = client.get("/api/v1/alerts/Kerala", headers=auth_headers).json()

        assert body["state"] == "Kerala"
        assert body["alerts"]
        assert "sourceUrl" in body["alerts"][0]

    def test_unknown_state_is_empty(self, client, auth_headers):
        body = client.get("/api/v1/alerts/Atlantis", headers=auth_headers).json()

        assert body["alerts"] == []


class TestArticleSearch:
    def test_search(self, client, auth_headers):
        pages = [
            {
                "id": 123,
                "key": "Diabetes",
                "title": "Diabetes",
                "excerpt": "a group of metabolic disorders",
                "description": "Group of endocrine diseases",
                "thumbnail": {"url": "//upload.wikimedia.org/diabetes.png"},
            },
            {"id": 456, "key": "Insulin", "title": "Insulin", "thumbnail": None},
        ]
        with patch.object(wikipedia_client, "search_articles", AsyncMock(return_value=pages)) as search:
            response = client.get("/api/v1/articles/search?q=diabetes", headers=auth_headers)

        search.assert_awaited_once_with("diabetes")
        assert response.status_code == 200
        articles = response.json()["articles"]
        assert articles[0]["url"] == "https://en.wikipedia.org/wiki/Diabetes"
        assert articles[0]["thumbnail_url"] == "https://upload.wikimedia.org/diabetes.png"
        assert articles[1]["thumbnail_url"] is None
        assert articles[1]["excerpt"] is None

    def test_unreachable_wikipedia_gives_empty_list(self, client, auth_headers):
        with patch.object(wikipedia_client, "search_articles", AsyncMock(return_value=[])):
            response = client.get("/api/v1/articles/search?q=asthma", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["articles"] == []

    def test_empty_query_rejected(self, client, auth_headers):
        assert client.get("/api/v1/articles/search?q=", headers=auth_headers).status_code == 422


class TestWikipediaClient:
    @pytest.fixture
    def mock_http(self):
        with patch("healthguard.integrations.wikipedia.httpx.AsyncClient") as client_cls:
            http = MagicMock()
            client_cls.return_value.__aenter__ = AsyncMock(return_value=http)
            client_cls.return_value.__aexit__ = AsyncMock(return_value=False)
            yield http

    @pytest.mark.asyncio
    async def test_query_is_suffixed(self, mock_http):
        response = MagicMock()
        response.json.return_value = {"pages": [{"id": 1, "key": "Asthma"}]}
        mock_http.get = AsyncMock(return_value=response)

        pages = await WikipediaClient.search_articles("asthma")

        assert pages == [{"id": 1, "key": "Asthma"}]
        params = mock_http.get.call_args.kwargs["params"]
        assert params == {"q": "asthma health medical", "limit": 10}

    @pytest.mark.asyncio
    async def test_timeout_gives_empty_list(self, mock_http):
        mock_http.get = AsyncMock(side_effect=httpx.ReadTimeout("slow"))

        assert await WikipediaClient.search_articles("asthma") == []

    @pytest.mark.asyncio
    async def test_http_error_gives_empty_list(self, mock_http):
        response = MagicMock()
        response.raise_for_status.side_effect = httpx.HTTPStatusError(
            "503", request=MagicMock(), response=MagicMock()
        )
        mock_http.get = AsyncMock(return_value=response)

        assert await WikipediaClient.search_articles("asthma") == []


class TestTranslationsApi:
    def test_languages(self, client):
        body = client.get("/api/v1/i18n/languages").json()

        assert body == {"languages": ["en", "hi"], "default": "en"}

    def test_accept_language(self, client):
        body = client.get("/api/v1/i18n", headers={"Accept-Language": "hi-IN,hi;q=0.9"}).json()

        assert body["language"] == "hi"
        assert body["translations"]["language.hindi"] == "हिंदी"

    def test_query_wins_over_header(self, client):
        body = client.get("/api/v1/i18n?lang=en", headers={"Accept-Language": "hi"}).json()

        assert body["language"] == "en"

    def test_unsupported_language(self, client):
        assert client.get("/api/v1/i18n/fr").status_code == 404
