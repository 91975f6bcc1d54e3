"""
Security Utilities
Password hashing and JWT token handling.

Passwords are hashed with bcrypt through passlib; access and refresh
tokens are signed JWTs (python-jose, HS256) whose subject is the user id.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt
from passlib.context import CryptContext

from healthguard.core.config import settings
from healthguard.schemas.user import TokenPayload


# Password hashing context using bcrypt
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# Algorithm used for signing tokens (HS256 = HMAC with SHA-256)
ALGORITHM = "HS256"

TOKEN_TYPE_ACCESS = "access"
TOKEN_TYPE_REFRESH = "refresh"


def hash_password(password: str) -> str:
    """
    Hash a plain text password using bcrypt.

    Example:
        >>> hashed = hash_password("mySecurePassword123")
        >>> print(hashed)  # $2b$12$...
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plain text password against its stored bcrypt hash."""
    return pwd_context.verify(plain_password, hashed_password)


def _create_token(user_id: UUID, token_type: str, lifetime_seconds: int) -> str:
    expire = datetime.now(timezone.utc) + timedelta(seconds=lifetime_seconds)
    payload = {
        "sub": str(user_id),  # Subject (user ID)
        "exp": expire,  # Expiration time
        "type": token_type  # access | refresh
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=ALGORITHM)


def create_access_token(user_id: UUID) -> str:
    """
    Create a short-lived JWT access token (default: 1 hour).

    Example:
        token = create_access_token(user.id)
        # Use in header: Authorization: Bearer {token}
    """
    return _create_token(user_id, TOKEN_TYPE_ACCESS, settings.JWT_EXPIRATION)


def create_refresh_token(user_id: UUID) -> str:
    """Create a long-lived JWT refresh token (default: 7 days)."""
    return _create_token(user_id, TOKEN_TYPE_REFRESH, settings.REFRESH_TOKEN_EXPIRATION)


def verify_token(token: str, expected_type: str = TOKEN_TYPE_ACCESS) -> Optional[TokenPayload]:
    """
    Verify and decode a JWT token.

    Validates signature, expiration and token type.

    Returns:
        TokenPayload if the token is valid, None otherwise
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        # Bad signature, expired, malformed...
        return None

    user_id = payload.get("sub")
    token_type = payload.get("type")
    exp = payload.get("exp")

    if not user_id or not token_type or not exp:
        return None

    if token_type != expected_type:
        return None

    return TokenPayload(sub=user_id, exp=exp, type=token_type)
