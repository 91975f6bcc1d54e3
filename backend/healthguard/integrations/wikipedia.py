"""
Wikipedia Article Search HTTP Client

Async client for the Wikimedia Core REST API page search, used to suggest
health articles to the user.

API Documentation: https://api.wikimedia.org/wiki/Core_REST_API/Reference/Search/Search_content
"""

import logging
from typing import Any, Dict, List

import httpx

from healthguard.core.config import settings

logger = logging.getLogger(__name__)


# Appended to every query to keep results on health topics
QUERY_SUFFIX = " health medical"
RESULT_LIMIT = 10
ARTICLE_BASE_URL = "https://en.wikipedia.org/wiki/"


class WikipediaClient:
    """
    HTTP client for Wikipedia article search.

    Wikimedia's public API needs no key, only a descriptive User-Agent.

    Methods:
        search_articles: Search health articles, [] on any failure
        article_url: Public URL of an article from its key
    """

    @staticmethod
    async def search_articles(query: str) -> List[Dict[str, Any]]:
        """
        Search Wikipedia for health articles.

        Args:
            query: Free text typed by the user

        Returns:
            list of page dicts (id, key, title, excerpt, description,
            thumbnail). Network errors, timeouts and non-200 responses are
            logged and yield an empty list.
        """
        try:
            async with httpx.AsyncClient(timeout=10.0) as client:
                response = await client.get(
                    settings.WIKIPEDIA_API_URL,
                    params={"q": query + QUERY_SUFFIX, "limit": RESULT_LIMIT},
                    headers={"User-Agent": settings.WIKIPEDIA_USER_AGENT}
                )
                response.raise_for_status()
                data = response.json()

        except httpx.TimeoutException:
            logger.warning(f"Wikipedia search timed out for query '{query}'")
            return []
        except httpx.HTTPError as e:
            logger.error(f"Error fetching Wikipedia articles: {e}")
            return []
        except ValueError as e:
            logger.error(f"Invalid JSON from Wikipedia search: {e}")
            return []

        return data.get("pages") or []

    @staticmethod
    def article_url(key: str) -> str:
        return f"{ARTICLE_BASE_URL}{key}"


wikipedia_client = WikipediaClient()
