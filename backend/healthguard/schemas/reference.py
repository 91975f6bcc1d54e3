"""
Reference Data Pydantic Schemas
Static health alerts, article search results and UI translations.
"""

from typing import Optional

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# HEALTH ALERTS
# ============================================================================

class HealthAlertResponse(BaseModel):
    """Public health advisory for one state."""
    id: str
    title: str
    description: str
    severity: str = Field(..., description="low | medium | high")
    source: str
    source_url: str = Field(..., alias="sourceUrl")
    date: str

    model_config = ConfigDict(populate_by_name=True)


class HealthAlertListResponse(BaseModel):
    state: str
    alerts: list[HealthAlertResponse]


class StatesResponse(BaseModel):
    states: list[str]


# ============================================================================
# ARTICLES
# ============================================================================

class ArticleResponse(BaseModel):
    """Search hit from Wikipedia."""
    id: int
    key: str
    title: str
    excerpt: Optional[str] = None
    description: Optional[str] = None
    thumbnail_url: Optional[str] = None
    url: str


class ArticleSearchResponse(BaseModel):
    query: str
    articles: list[ArticleResponse]


# ============================================================================
# I18N
# ============================================================================

class LanguagesResponse(BaseModel):
    languages: list[str]
    default: str


class TranslationsResponse(BaseModel):
    language: str
    translations: dict[str, str]
