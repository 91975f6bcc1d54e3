"""
Authentication Endpoints
Account creation, login, token rotation and the current account.

Endpoints:
- POST /auth/register - Create an account, returns tokens
- POST /auth/login - Exchange email/password for tokens
- POST /auth/refresh - Rotate both tokens using a refresh token
- GET /auth/me - Current account details
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from healthguard.api.v1.deps import get_current_user
from healthguard.core.security import (
    TOKEN_TYPE_REFRESH,
    create_access_token,
    create_refresh_token,
    verify_token,
)
from healthguard.db.session import get_db
from healthguard.models.user import User
from healthguard.schemas.user import (
    LoginRequest,
    RefreshTokenRequest,
    Token,
    UserCreate,
    UserResponse,
)
from healthguard.services import auth_service
from healthguard.services.error_logging import error_logger

# Login and registration events go to their own logger
auth_logger = logging.getLogger("auth")


class LoginFailedError(Exception):
    """Failed login attempt, recorded in the error log as a warning."""


router = APIRouter()

BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers=BEARER_CHALLENGE,
    )


def _issue_tokens(user: User) -> Token:
    return Token(
        access_token=create_access_token(user.id),
        refresh_token=create_refresh_token(user.id),
        token_type="bearer",
    )


def _client_ip(request: Request) -> str:
    return request.client.host if request.client else "unknown"


@router.post(
    "/register",
    response_model=Token,
    status_code=status.HTTP_201_CREATED,
    summary="Register new user",
    responses={
        400: {"description": "Email already registered"},
        422: {"description": "Invalid email, password shorter than 8 characters..."},
    },
)
async def register(user_data: UserCreate, db: Session = Depends(get_db)) -> Token:
    """
    Create an account and log it in straight away.

    The health profile is not part of registration: the client sends it
    afterwards through POST /profile (onboarding).

    Example:
        POST /api/v1/auth/register
        {
            "email": "asha@example.com",
            "password": "SecurePass123!",
            "full_name": "Asha Verma",
            "language": "hi"
        }
    """
    duplicate = HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="Email already registered",
    )
    if auth_service.get_user_by_email(db, user_data.email):
        raise duplicate

    try:
        user = auth_service.create_user(db, user_data)
    except IntegrityError:
        # Lost a race with a concurrent registration of the same email
        db.rollback()
        raise duplicate

    auth_logger.info(f"REGISTER | email={user.email} | user_id={user.id}")
    return _issue_tokens(user)


@router.post(
    "/login",
    response_model=Token,
    summary="Login user",
    responses={401: {"description": "Incorrect email or password"}},
)
async def login(
    credentials: LoginRequest,
    request: Request,
    db: Session = Depends(get_db)
) -> Token:
    """
    Check email and password and return a fresh token pair.

    The error message is the same for an unknown email and a wrong
    password. Failed attempts are stored in the error log as warnings.
    """
    client_ip = _client_ip(request)
    user = auth_service.authenticate_user(db, credentials.email, credentials.password)

    if user is None:
        auth_logger.warning(f"LOGIN_FAILED | email={credentials.email} | ip={client_ip}")
        error_logger.log_error(
            LoginFailedError(f"Failed login attempt for email: {credentials.email}"),
            request=request,
            severity="warning",
            context={"email": credentials.email, "client_ip": client_ip},
        )
        raise _unauthorized("Incorrect email or password")

    auth_logger.info(f"LOGIN_SUCCESS | email={user.email} | user_id={user.id} | ip={client_ip}")
    return _issue_tokens(user)


@router.post(
    "/refresh",
    response_model=Token,
    summary="Refresh access token",
    responses={401: {"description": "Invalid or expired refresh token"}},
)
async def refresh_token(
    refresh_data: RefreshTokenRequest,
    db: Session = Depends(get_db)
) -> Token:
    """
    Rotate tokens: both the access and the refresh token are reissued.

    Access tokens are refused here. Once the refresh token expires
    (REFRESH_TOKEN_EXPIRATION) the user has to log in again.
    """
    payload = verify_token(refresh_data.refresh_token, expected_type=TOKEN_TYPE_REFRESH)
    if payload is None:
        raise _unauthorized("Invalid or expired refresh token")

    try:
        user_id = UUID(payload.sub)
    except ValueError:
        raise _unauthorized("Invalid token payload")

    user = auth_service.get_user_by_id(db, user_id)
    if user is None or not user.is_active:
        raise _unauthorized("User not found or inactive")

    return _issue_tokens(user)


@router.get("/me", response_model=UserResponse, summary="Current account")
async def read_current_user(current_user: User = Depends(get_current_user)) -> UserResponse:
    return UserResponse.model_validate(current_user)
