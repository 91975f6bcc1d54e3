"""
Health Articles API Endpoints

Endpoints:
    - GET /articles/search?q= - Wikipedia health article search
"""

from fastapi import APIRouter, Depends, Query

from healthguard.api.v1.deps import get_current_user
from healthguard.integrations.wikipedia import wikipedia_client
from healthguard.models.user import User
from healthguard.schemas.reference import ArticleResponse, ArticleSearchResponse

router = APIRouter(prefix="/articles")


def _to_article(page: dict) -> ArticleResponse:
    thumbnail = page.get("thumbnail") or {}
    thumbnail_url = thumbnail.get("url")
    if thumbnail_url and thumbnail_url.startswith("//"):
        thumbnail_url = "https:" + thumbnail_url

    return ArticleResponse(
        id=page["id"],
        key=page["key"],
        title=page.get("title") or page["key"],
        excerpt=page.get("excerpt"),
        description=page.get("description"),
        thumbnail_url=thumbnail_url,
        url=wikipedia_client.article_url(page["key"]),
    )


@router.get("/search", response_model=ArticleSearchResponse)
async def search_articles(
    q: str = Query(..., min_length=1, max_length=200, description="Search text, e.g. 'diabetes'"),
    current_user: User = Depends(get_current_user)
):
    """
    Search Wikipedia for health articles.

    The query is suffixed with " health medical". If Wikipedia is
    unreachable the result is an empty list, never an error.
    """
    pages = await wikipedia_client.search_articles(q)
    articles = [_to_article(page) for page in pages if page.get("id") is not None and page.get("key")]
    return ArticleSearchResponse(query=q, articles=articles)
