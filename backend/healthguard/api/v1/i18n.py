"""
Translations API Endpoints
UI strings in English and Hindi. No authentication required.

Endpoints:
    - GET /i18n/languages - Supported languages and the default
    - GET /i18n - Strings for the request language (lang / Accept-Language)
    - GET /i18n/{language} - Strings for an explicit language
"""

from fastapi import APIRouter, Depends, HTTPException, status

from healthguard.api.v1.deps import get_language
from healthguard.core.config import settings
from healthguard.core.constants import SUPPORTED_LANGUAGES
from healthguard.schemas.reference import LanguagesResponse, TranslationsResponse
from healthguard.services.i18n import get_translations

router = APIRouter(prefix="/i18n")


@router.get("/languages", response_model=LanguagesResponse)
def list_languages():
    return LanguagesResponse(languages=list(SUPPORTED_LANGUAGES), default=settings.DEFAULT_LANGUAGE)


@router.get("", response_model=TranslationsResponse)
def get_request_translations(language: str = Depends(get_language)):
    return TranslationsResponse(language=language, translations=get_translations(language))


@router.get("/{language}", response_model=TranslationsResponse)
def get_language_translations(language: str):
    if language not in SUPPORTED_LANGUAGES:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unsupported language '{language}'"
        )
    return TranslationsResponse(language=language, translations=get_translations(language))
