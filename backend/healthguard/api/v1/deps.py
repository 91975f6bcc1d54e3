"""
API Dependencies
Common dependencies used across API endpoints.

This module provides:
- Database session management (re-exported get_db)
- User authentication (JWT validation)
- Request language selection

Dependencies are injected into FastAPI endpoints using Depends().
"""

from typing import Optional
from uuid import UUID

from fastapi import Depends, Header, HTTPException, Query, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from healthguard.core.config import settings
from healthguard.core.security import TOKEN_TYPE_ACCESS, verify_token
from healthguard.db.session import get_db
from healthguard.models.user import User
from healthguard.services.auth_service import get_user_by_id
from healthguard.services.i18n import resolve_language


# HTTP Bearer token scheme for JWT authentication
# Used to extract "Authorization: Bearer <token>" from request headers
security = HTTPBearer()


def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db)
) -> User:
    """
    Extract and validate current user from JWT token.

    This dependency:
    1. Extracts JWT token from Authorization header
    2. Validates token signature, expiration and type
    3. Loads user from database
    4. Stores the user id and email on request.state for error logging

    Raises:
        HTTPException 401: If token is invalid, expired, or the user is gone

    Usage in endpoint:
        @router.get("/profile")
        def get_profile(current_user: User = Depends(get_current_user)):
            return {"email": current_user.email}
    """
    payload = verify_token(credentials.credentials, expected_type=TOKEN_TYPE_ACCESS)
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"}
        )

    try:
        user_id = UUID(payload.sub)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"}
        )

    user = get_user_by_id(db, user_id)
    if user is None or not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found or inactive",
            headers={"WWW-Authenticate": "Bearer"}
        )

    # Plain values: the ORM user is detached once get_db closes the session
    request.state.user_id = user.id
    request.state.user_email = user.email
    return user


def get_language(
    lang: Optional[str] = Query(None, description="UI language (en, hi)"),
    accept_language: Optional[str] = Header(None)
) -> str:
    """
    Language of the current request.

    The `lang` query parameter wins over the Accept-Language header;
    without either, settings.DEFAULT_LANGUAGE is used.
    """
    if lang:
        return resolve_language(lang, settings.DEFAULT_LANGUAGE)
    return resolve_language(accept_language, settings.DEFAULT_LANGUAGE)
